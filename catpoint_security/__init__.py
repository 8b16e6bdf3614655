"""
Catpoint Security

Decides when to raise, escalate or clear a home alarm from door, window and
motion sensors, the arming mode, and a camera-based cat detector.
"""

__version__ = "1.0.0"

from .config_manager import ConfigManager
from .models import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
    Sensor,
    SecurityConfig
)
from .services import (
    SecurityService,
    StatusStoreInterface,
    CatDetectorInterface,
    StatusListener,
    InMemoryStatusStore,
    SqliteStatusStore,
    OpenCVCatDetector,
    FakeCatDetector,
    LoggingStatusListener,
    StatusHistoryListener,
    SecurityServiceError,
    InvalidStatusError,
    UnknownSensorError,
    StatusStoreError,
    DetectorError
)

__all__ = [
    # Core
    'SecurityService',
    'ConfigManager',

    # Data models
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',
    'Sensor',
    'SecurityConfig',

    # Collaborator interfaces
    'StatusStoreInterface',
    'CatDetectorInterface',
    'StatusListener',

    # Implementations
    'InMemoryStatusStore',
    'SqliteStatusStore',
    'OpenCVCatDetector',
    'FakeCatDetector',
    'LoggingStatusListener',
    'StatusHistoryListener',

    # Errors
    'SecurityServiceError',
    'InvalidStatusError',
    'UnknownSensorError',
    'StatusStoreError',
    'DetectorError'
]
