"""SMS service - Twilio text message alerts"""

import logging
from twilio.rest import Client

logger = logging.getLogger(__name__)


class SmsService:
    """Thin wrapper around the Twilio REST client"""

    def __init__(self, account_sid: str, auth_token: str):
        self.client = Client(account_sid, auth_token)
        logger.info("SMS service initialized")

    def send(self, to: str, from_: str, body: str) -> str:
        """Send a text message (blocking). Returns the Twilio message SID."""
        message = self.client.messages.create(to=to, from_=from_, body=body)
        return message.sid
