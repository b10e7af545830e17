"""Notifier - best-effort outbound alerts when a fire is detected"""

import asyncio
import logging
from typing import Optional, Set
from ..models.alarm import utc_timestamp
from .datastore_service import DatastoreService
from .sms_service import SmsService

logger = logging.getLogger(__name__)

SMS_BODY = "fire alarm"


class Notifier:
    """
    Sends an SMS and records the alarm time in the remote datastore.

    Each path is skipped when its client or settings are missing. Both run
    as fire-and-forget tasks: notify() returns immediately, and failures are
    logged and dropped without retry.
    """

    def __init__(self, sms: Optional[SmsService] = None, datastore: Optional[DatastoreService] = None,
                 number_to_send_to: str = None, outgoing_number: str = None,
                 server: str = None, auth_token: str = None):
        self.sms = sms
        self.datastore = datastore
        self.number_to_send_to = number_to_send_to
        self.outgoing_number = outgoing_number
        self.server = server
        self.auth_token = auth_token

        # Strong references so in-flight tasks are not garbage collected
        self._pending: Set[asyncio.Task] = set()

        logger.info(
            f"Notifier initialized (sms: {'on' if self.sms_enabled else 'off'}, "
            f"datastore: {'on' if self.datastore_enabled else 'off'})"
        )

    @property
    def sms_enabled(self) -> bool:
        return self.sms is not None

    @property
    def datastore_enabled(self) -> bool:
        return self.datastore is not None and bool(self.server and self.auth_token)

    def notify(self, _payload=None):
        """ALARM_START handler"""
        logger.warning("fire alarm")

        if self.sms_enabled:
            self._spawn(self._send_sms())
        if self.datastore_enabled:
            self._spawn(self._store_alarm_time(utc_timestamp()))

    def _spawn(self, coro):
        task = asyncio.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send_sms(self):
        try:
            sid = await asyncio.to_thread(
                self.sms.send, self.number_to_send_to, self.outgoing_number, SMS_BODY
            )
            logger.info(f"SMS sent (sid: {sid})")
        except Exception as e:
            logger.error(f"Failed to send SMS: {e}")

    async def _store_alarm_time(self, timestamp: str):
        try:
            await asyncio.to_thread(
                self.datastore.put_timestamp, self.server, self.auth_token, timestamp
            )
            logger.info("datastore notified")
        except Exception as e:
            logger.error(f"Failed to notify datastore: {e}")
