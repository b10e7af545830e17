"""Services package"""

from .threshold_detector import ThresholdDetector
from .sensor_poller import SensorPoller
from .alarm_presenter import AlarmPresenter
from .notifier import Notifier
from .sms_service import SmsService
from .datastore_service import DatastoreService

__all__ = ['ThresholdDetector', 'SensorPoller', 'AlarmPresenter', 'Notifier', 'SmsService', 'DatastoreService']
