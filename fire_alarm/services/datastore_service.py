"""Datastore service - records alarm times in a remote key/value store"""

import logging
import requests

logger = logging.getLogger(__name__)


class DatastoreService:
    """Authenticated HTTP writes to the remote datastore"""

    def __init__(self, session: requests.Session = None):
        self.session = session or requests.Session()
        logger.info("Datastore service initialized")

    def put_timestamp(self, endpoint: str, auth_token: str, iso_timestamp: str) -> int:
        """
        PUT ``{"value": iso_timestamp}`` to endpoint (blocking).

        Raises:
            requests.RequestException: on transport errors or non-2xx status.

        Returns:
            HTTP status code.
        """
        response = self.session.put(
            endpoint,
            headers={"X-Auth-Token": auth_token},
            json={"value": iso_timestamp},
        )
        response.raise_for_status()
        return response.status_code

    def close(self):
        self.session.close()
