"""
Fire Alarm monitor - Raspberry Pi temperature watch

Polls an ambient temperature sensor and raises a visual/audible alarm, an
SMS and a datastore record when the configured threshold is crossed.
"""

import asyncio
import logging
import signal
import sys
from .core import FireAlarmServer
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


async def main():
    """Main entry point"""
    server = FireAlarmServer()
    current = asyncio.current_task()

    # Handle shutdown signals
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, current.cancel)

    try:
        await server.start()
    except asyncio.CancelledError:
        logger.info("Shutdown signal received")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise
    finally:
        await server.stop()


def run():
    """Console script entry point"""
    setup_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Monitor stopped by user")
    except Exception as e:
        logger.error(f"Monitor crashed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
