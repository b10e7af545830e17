"""Fire Alarm monitor package"""

from .core import FireAlarmServer
from .services import ThresholdDetector, AlarmPresenter, Notifier

__all__ = ['FireAlarmServer', 'ThresholdDetector', 'AlarmPresenter', 'Notifier']
