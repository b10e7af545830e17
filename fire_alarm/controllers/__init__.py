"""Controllers package for hardware control"""

from .sensors import SensorController, SensorReadError
from .display import DisplayController, COLORS
from .buzzer import BuzzerController, ALARM_VOLUME, ALARM_TONE_HZ

__all__ = [
    'SensorController',
    'SensorReadError',
    'DisplayController',
    'COLORS',
    'BuzzerController',
    'ALARM_VOLUME',
    'ALARM_TONE_HZ',
]
