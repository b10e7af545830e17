"""Configuration for the Fire Alarm monitor"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
_repo_root = Path(__file__).parent.parent.resolve()
_env_file = _repo_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


def _optional(name):
    """Return a stripped env value, or None when unset or blank"""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _number(name, default, cast=float):
    value = _optional(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        return default


# Hardware Platform
SIMULATE_HARDWARE = os.getenv("SIMULATE_HARDWARE", "false").lower() == "true"
SIMULATED_TEMPERATURE = _number("SIMULATED_TEMPERATURE", 22.0)

# Alarm
ALARM_THRESHOLD = _number("ALARM_THRESHOLD", 30.0)
POLL_INTERVAL = _number("POLL_INTERVAL", 0.5)    # seconds
BLINK_INTERVAL = _number("BLINK_INTERVAL", 0.25)  # seconds

# Hardware pins (BCM numbering) and LCD geometry
TEMP_SENSOR_PIN = _number("TEMP_SENSOR_PIN", 4, int)
BUZZER_PIN = _number("BUZZER_PIN", 18, int)
LCD_COLUMNS = _number("LCD_COLUMNS", 16, int)
LCD_ROWS = _number("LCD_ROWS", 2, int)

# SMS alerts (Twilio) - disabled unless both SID and token are set
TWILIO_ACCT_SID = _optional("TWILIO_ACCT_SID")
TWILIO_AUTH_TOKEN = _optional("TWILIO_AUTH_TOKEN")
NUMBER_TO_SEND_TO = _optional("NUMBER_TO_SEND_TO")
TWILIO_OUTGOING_NUMBER = _optional("TWILIO_OUTGOING_NUMBER")

# Remote datastore - disabled unless both endpoint and token are set
SERVER = _optional("SERVER")
AUTH_TOKEN = _optional("AUTH_TOKEN")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "logs/fire-alarm.log")


def sms_configured() -> bool:
    return bool(TWILIO_ACCT_SID and TWILIO_AUTH_TOKEN)


def datastore_configured() -> bool:
    return bool(SERVER and AUTH_TOKEN)
