"""Configuration components for the security system."""

from .defaults import (
    DEFAULT_PATHS,
    DETECTOR_BACKENDS,
    DETECTOR_SETTINGS,
    LOG_LEVELS
)

__all__ = [
    'DEFAULT_PATHS',
    'DETECTOR_BACKENDS',
    'DETECTOR_SETTINGS',
    'LOG_LEVELS'
]
