"""Piezo buzzer controller for Raspberry Pi"""

import logging
from .. import config

logger = logging.getLogger(__name__)

ALARM_VOLUME = 0.5
ALARM_TONE_HZ = 2600


class BuzzerController:
    """Drive a passive buzzer with hardware PWM (tone = frequency, volume = duty cycle)"""

    def __init__(self, pin: int = None, simulate: bool = None):
        self.pin = pin if pin is not None else config.BUZZER_PIN
        self.simulate = config.SIMULATE_HARDWARE if simulate is None else simulate
        self.gpio = None
        self.pwm = None

        self.volume = 0.0
        self.frequency = None
        self.is_playing = False

        if not self.simulate:
            import RPi.GPIO as GPIO
            self.gpio = GPIO
            GPIO.setmode(GPIO.BCM)
            GPIO.setup(self.pin, GPIO.OUT)
            self.pwm = GPIO.PWM(self.pin, ALARM_TONE_HZ)

        logger.info("Buzzer controller initialized")

    def set_volume(self, level: float):
        """Set volume in the 0.0-1.0 range"""
        self.volume = min(max(level, 0.0), 1.0)
        if self.is_playing and not self.simulate:
            self.pwm.ChangeDutyCycle(self._duty_cycle())

    def play(self, frequency: int):
        """Start sounding a tone until stop() is called"""
        self.frequency = frequency
        self.is_playing = True
        if self.simulate:
            logger.debug(f"[SIMULATION] Buzzer ON {frequency}Hz at volume {self.volume}")
            return

        self.pwm.ChangeFrequency(frequency)
        self.pwm.start(self._duty_cycle())

    def stop(self):
        """Silence the buzzer; safe to call when already silent"""
        self.is_playing = False
        if self.simulate:
            logger.debug("[SIMULATION] Buzzer OFF")
            return

        self.pwm.stop()

    def cleanup(self):
        """Release the GPIO pin on shutdown"""
        if self.simulate:
            return
        try:
            self.gpio.cleanup(self.pin)
            logger.info("GPIO cleanup complete")
        except RuntimeError as e:
            logger.error(f"Error during GPIO cleanup: {e}")

    def _duty_cycle(self) -> float:
        # Half duty is the loudest square wave a piezo can produce
        return self.volume * 50.0
