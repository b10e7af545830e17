"""Tests for SMS and datastore notifications"""

import asyncio
import threading
from datetime import datetime
from unittest.mock import MagicMock

import requests

from fire_alarm.services.notifier import Notifier, SMS_BODY


def make_notifier(sms=True, datastore=True, server="https://example.com/fire", auth_token="token"):
    return Notifier(
        sms=MagicMock() if sms else None,
        datastore=MagicMock() if datastore else None,
        number_to_send_to="+15550001111",
        outgoing_number="+15552223333",
        server=server,
        auth_token=auth_token,
    )


async def notify_and_drain(notifier):
    notifier.notify(60)
    pending = list(notifier._pending)
    await asyncio.gather(*pending)
    return pending


def test_sends_sms_and_stores_timestamp():
    notifier = make_notifier()

    asyncio.run(notify_and_drain(notifier))

    notifier.sms.send.assert_called_once_with("+15550001111", "+15552223333", SMS_BODY)
    notifier.datastore.put_timestamp.assert_called_once()
    endpoint, token, timestamp = notifier.datastore.put_timestamp.call_args.args
    assert endpoint == "https://example.com/fire"
    assert token == "token"
    assert datetime.fromisoformat(timestamp).tzinfo is not None


def test_without_sms_config_still_writes_datastore():
    notifier = make_notifier(sms=False)

    pending = asyncio.run(notify_and_drain(notifier))

    assert len(pending) == 1
    notifier.datastore.put_timestamp.assert_called_once()


def test_without_datastore_config_still_sends_sms():
    notifier = make_notifier(server=None)

    pending = asyncio.run(notify_and_drain(notifier))

    assert len(pending) == 1
    notifier.sms.send.assert_called_once()
    notifier.datastore.put_timestamp.assert_not_called()


def test_missing_auth_token_disables_datastore():
    notifier = make_notifier(auth_token=None)

    assert not notifier.datastore_enabled
    assert notifier.sms_enabled


def test_nothing_configured_is_a_noop(caplog):
    notifier = make_notifier(sms=False, datastore=False)

    pending = asyncio.run(notify_and_drain(notifier))

    assert pending == []
    assert "fire alarm" in caplog.text


def test_sms_failure_is_logged_and_does_not_affect_datastore(caplog):
    notifier = make_notifier()
    notifier.sms.send.side_effect = RuntimeError("gateway down")

    asyncio.run(notify_and_drain(notifier))

    notifier.datastore.put_timestamp.assert_called_once()
    assert "Failed to send SMS: gateway down" in caplog.text
    assert "datastore notified" in caplog.text


def test_datastore_failure_is_logged(caplog):
    notifier = make_notifier(sms=False)
    notifier.datastore.put_timestamp.side_effect = requests.HTTPError("500 Server Error")

    asyncio.run(notify_and_drain(notifier))

    assert "Failed to notify datastore: 500 Server Error" in caplog.text


def test_notify_returns_before_network_calls_finish():
    release = threading.Event()
    notifier = make_notifier(datastore=False)
    notifier.sms.send.side_effect = lambda *args: release.wait(5) and "SM123"

    async def scenario():
        notifier.notify()
        # Handler returned while the send is still blocked in its worker thread
        in_flight = len(notifier._pending)
        release.set()
        await asyncio.gather(*list(notifier._pending))
        return in_flight

    assert asyncio.run(scenario()) == 1
    assert notifier._pending == set()
