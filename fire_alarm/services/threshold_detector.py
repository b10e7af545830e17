"""Threshold detector - turns temperature readings into alarm edges"""

import logging
from typing import Optional
from ..models import AlarmSignal, AlarmState
from ..utils.event_bus import EventBus

logger = logging.getLogger(__name__)


class ThresholdDetector:
    """
    Edge-triggered threshold check.

    Emits ALARM_START when a reading crosses from below the threshold to at
    or above it, and ALARM_CLEAR on the reverse crossing. Sustained readings
    on either side emit nothing. ``previous`` starts at 0, so a first reading
    already at or above a positive threshold raises the alarm straight away.
    """

    def __init__(self, bus: EventBus, threshold: float):
        self.bus = bus
        self.threshold = threshold
        self.previous = 0
        self.state = AlarmState.IDLE
        logger.info(f"Threshold detector initialized (threshold: {threshold})")

    def evaluate(self, current: float) -> Optional[AlarmSignal]:
        """Compare current against the previous reading and emit on a crossing"""
        signal = None

        if self.previous < self.threshold and current >= self.threshold:
            signal = AlarmSignal.ALARM_START
            self.state = AlarmState.ALARMING
        elif self.previous >= self.threshold and current < self.threshold:
            signal = AlarmSignal.ALARM_CLEAR
            self.state = AlarmState.IDLE

        self.previous = current

        if signal is not None:
            logger.info(f"{signal.name}: {current} (threshold {self.threshold})")
            self.bus.emit(signal, current)
        return signal
