"""Sensor poller - periodic temperature sampling"""

import asyncio
import logging
from typing import Optional
from ..controllers.sensors import SensorController, SensorReadError
from ..controllers.display import DisplayController
from ..models import TemperatureReading
from .threshold_detector import ThresholdDetector

logger = logging.getLogger(__name__)


class SensorPoller:
    """Reads the temperature sensor on a fixed cadence and feeds the detector"""

    def __init__(self, sensor: SensorController, display: DisplayController,
                 detector: ThresholdDetector, interval: float):
        self.sensor = sensor
        self.display = display
        self.detector = detector
        self.interval = interval
        self.last_reading: Optional[TemperatureReading] = None
        self.failed_reads = 0
        logger.info(f"Sensor poller initialized (interval: {interval}s)")

    async def read(self) -> Optional[TemperatureReading]:
        """One blocking sensor read, run off the event loop. None on failure."""
        try:
            value = await asyncio.to_thread(self.sensor.read)
        except SensorReadError as e:
            self.failed_reads += 1
            logger.warning(f"Skipping tick: {e}")
            return None
        except Exception as e:
            self.failed_reads += 1
            logger.error(f"Failed to read temperature sensor: {e}")
            return None

        return TemperatureReading(temperature=value)

    async def tick(self) -> Optional[TemperatureReading]:
        """Read, show the value, then run the threshold check"""
        reading = await self.read()
        if reading is None:
            return None

        self.last_reading = reading
        self.display.message(f"temperature: {reading.temperature:.0f}")
        self.detector.evaluate(reading.temperature)
        return reading

    async def run(self):
        """Poll until cancelled"""
        logger.info("Starting sensor polling loop...")

        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            try:
                await self.tick()
            except Exception as e:
                logger.error(f"Error in sensor polling loop: {e}", exc_info=True)

            # Fixed cadence; a slow read delays the next tick instead of overlapping it
            next_tick = max(next_tick + self.interval, loop.time())
            await asyncio.sleep(next_tick - loop.time())
