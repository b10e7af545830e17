"""Temperature sensor controller for Raspberry Pi"""

import logging
import random
from .. import config

logger = logging.getLogger(__name__)


class SensorReadError(Exception):
    """Raised when the temperature sensor returns no usable value"""


class SensorController:
    """Read ambient temperature from a DHT22 on a GPIO pin"""

    def __init__(self, pin: int = None, simulate: bool = None):
        self.pin = pin if pin is not None else config.TEMP_SENSOR_PIN
        self.simulate = config.SIMULATE_HARDWARE if simulate is None else simulate
        self.dht_sensor = None

        if not self.simulate:
            # Hardware libraries only import on a board with Blinka support
            import adafruit_dht
            import board
            self.dht_sensor = adafruit_dht.DHT22(getattr(board, f'D{self.pin}'))
            logger.info(f"DHT22 initialized on GPIO {self.pin}")

        logger.info("Sensor controller initialized")

    def read(self) -> float:
        """Blocking read; returns degrees Celsius"""
        if self.simulate:
            return self._simulate_temperature()

        try:
            temp_c = self.dht_sensor.temperature
        except RuntimeError as e:
            # DHT22 checksum/timing errors are routine, the next read usually works
            raise SensorReadError(f"DHT22 read failed: {e}") from e

        if temp_c is None:
            raise SensorReadError("DHT22 returned no temperature")
        return round(temp_c, 1)

    def close(self):
        if self.dht_sensor is not None:
            self.dht_sensor.exit()
            self.dht_sensor = None

    def _simulate_temperature(self) -> float:
        """Return simulated temperature reading"""
        return round(config.SIMULATED_TEMPERATURE + random.uniform(-0.5, 0.5), 1)
