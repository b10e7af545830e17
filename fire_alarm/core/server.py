"""Core FireAlarmServer - wires sensor, detector, presenter and notifier"""

import asyncio
import logging
from typing import Optional
from ..controllers import SensorController, DisplayController, BuzzerController
from ..models import AlarmSignal
from ..services import (
    ThresholdDetector, SensorPoller, AlarmPresenter, Notifier, SmsService, DatastoreService
)
from ..utils.event_bus import EventBus
from .. import config

logger = logging.getLogger(__name__)


class FireAlarmServer:
    """Main monitor orchestrating all components"""

    def __init__(self, sensor: SensorController = None, display: DisplayController = None,
                 buzzer: BuzzerController = None, notifier: Notifier = None,
                 threshold: float = None, poll_interval: float = None,
                 blink_interval: float = None):
        logger.info("Initializing Fire Alarm monitor...")

        # Hardware (single owner; passed by reference to the services below)
        self.sensor = sensor or SensorController()
        self.display = display or DisplayController()
        self.buzzer = buzzer or BuzzerController()

        self.bus = EventBus()
        self.detector = ThresholdDetector(
            self.bus,
            threshold if threshold is not None else config.ALARM_THRESHOLD
        )
        self.presenter = AlarmPresenter(
            self.bus, self.display, self.buzzer,
            blink_interval if blink_interval is not None else config.BLINK_INTERVAL
        )
        self.notifier = notifier or self._build_notifier()
        self.poller = SensorPoller(
            self.sensor, self.display, self.detector,
            poll_interval if poll_interval is not None else config.POLL_INTERVAL
        )

        self._poll_task: Optional[asyncio.Task] = None
        self.running = False
        logger.info(f"Fire Alarm monitor initialized (threshold: {self.detector.threshold}, "
                    f"simulation: {config.SIMULATE_HARDWARE})")

    @staticmethod
    def _build_notifier() -> Notifier:
        sms = None
        if config.sms_configured():
            sms = SmsService(config.TWILIO_ACCT_SID, config.TWILIO_AUTH_TOKEN)
        else:
            logger.info("Twilio credentials not set - SMS alerts disabled")

        datastore = None
        if config.datastore_configured():
            datastore = DatastoreService()
        else:
            logger.info("SERVER/AUTH_TOKEN not set - datastore notifications disabled")

        return Notifier(
            sms=sms,
            datastore=datastore,
            number_to_send_to=config.NUMBER_TO_SEND_TO,
            outgoing_number=config.TWILIO_OUTGOING_NUMBER,
            server=config.SERVER,
            auth_token=config.AUTH_TOKEN,
        )

    async def start(self):
        """Reset outputs, subscribe handlers and poll until cancelled"""
        try:
            logger.info("Starting Fire Alarm monitor...")

            self.presenter.reset()
            self.bus.on(AlarmSignal.ALARM_START, self.notifier.notify)
            self.bus.on(AlarmSignal.ALARM_START, self.presenter.start_alarm)

            self.running = True
            self._poll_task = asyncio.create_task(self.poller.run())
            logger.info("Fire Alarm monitor started successfully")

            await self._poll_task

        except asyncio.CancelledError:
            logger.info("Fire Alarm monitor cancelled")
            raise
        except Exception as e:
            logger.error(f"Error starting Fire Alarm monitor: {e}", exc_info=True)
            raise

    async def stop(self):
        """Stop polling and leave the hardware quiet"""
        if not self.running:
            return
        logger.info("Stopping Fire Alarm monitor...")
        self.running = False

        if self._poll_task is not None and not self._poll_task.done():
            self._poll_task.cancel()
            try:
                await self._poll_task
            except asyncio.CancelledError:
                pass

        # Each step runs on its own so one hardware fault cannot skip the rest
        failures = 0
        for step in (self.presenter.stop_alarm, self.display.clear,
                     self.buzzer.cleanup, self.sensor.close):
            try:
                step()
            except Exception as e:
                failures += 1
                logger.error(f"Error during shutdown ({getattr(step, '__qualname__', step)}): {e}")

        if failures:
            logger.warning(f"Fire Alarm monitor stopped with {failures} cleanup error(s)")
        else:
            logger.info("Fire Alarm monitor stopped successfully")
