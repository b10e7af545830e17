"""Logging for the fire alarm monitor: console plus a rotating alarm log"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from .. import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Chatty client libraries; their request dumps would bury alarm events
QUIET_LOGGERS = ("twilio.http_client", "urllib3")


def setup_logging():
    """Configure the root logger once; repeat calls are no-ops"""
    root = logging.getLogger()
    if getattr(root, "_fire_alarm_configured", False):
        return
    root.setLevel(config.LOG_LEVEL)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(config.LOG_LEVEL)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Size-capped file log
    try:
        log_dir = os.path.dirname(config.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(config.LOG_FILE, maxBytes=1_000_000, backupCount=3)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError as e:
        root.warning(f"Could not create log file {config.LOG_FILE}: {e}")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root._fire_alarm_configured = True
    logging.getLogger(__name__).info(
        f"Logging configured (level: {config.LOG_LEVEL}, file: {config.LOG_FILE})"
    )
