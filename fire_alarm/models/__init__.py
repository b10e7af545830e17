"""Models package"""

from .alarm import AlarmSignal, AlarmState, PresenterState, TemperatureReading

__all__ = ['AlarmSignal', 'AlarmState', 'PresenterState', 'TemperatureReading']
