"""Alarm data models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class AlarmSignal(Enum):
    """Edge-triggered events emitted by the threshold detector"""
    ALARM_START = "start-alarm"
    ALARM_CLEAR = "stop-alarm"


class AlarmState(Enum):
    """Detector state: whether the last reading was at or above threshold"""
    IDLE = "idle"
    ALARMING = "alarming"


class PresenterState(Enum):
    """Display/buzzer pattern state"""
    IDLE = "idle"
    BLINKING = "blinking"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class TemperatureReading:
    """Single temperature sample"""
    temperature: float  # Celsius
    timestamp: str = field(default_factory=utc_timestamp)
