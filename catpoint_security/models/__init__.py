"""Data models for the security system."""

from .status import AlarmStatus, ArmingStatus, SensorType
from .sensor import Sensor
from .config import SecurityConfig

__all__ = ['AlarmStatus', 'ArmingStatus', 'SensorType', 'Sensor', 'SecurityConfig']
