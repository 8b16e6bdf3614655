"""Services for the security system."""

from .interfaces import (
    StatusStoreInterface,
    CatDetectorInterface,
    StatusListener
)
from .exceptions import (
    SecurityServiceError,
    InvalidStatusError,
    UnknownSensorError,
    StatusStoreError,
    DetectorError
)
from .security_service import SecurityService
from .status_store import InMemoryStatusStore, SqliteStatusStore
from .cat_detector import OpenCVCatDetector, FakeCatDetector, create_detector
from .listeners import LoggingStatusListener, StatusHistoryListener

__all__ = [
    'StatusStoreInterface',
    'CatDetectorInterface',
    'StatusListener',
    'SecurityServiceError',
    'InvalidStatusError',
    'UnknownSensorError',
    'StatusStoreError',
    'DetectorError',
    'SecurityService',
    'InMemoryStatusStore',
    'SqliteStatusStore',
    'OpenCVCatDetector',
    'FakeCatDetector',
    'create_detector',
    'LoggingStatusListener',
    'StatusHistoryListener'
]
