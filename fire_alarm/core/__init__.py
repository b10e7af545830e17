"""Core package"""

from .server import FireAlarmServer

__all__ = ['FireAlarmServer']
