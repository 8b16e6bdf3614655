"""Exceptions raised by the security system."""


class SecurityServiceError(Exception):
    """Base class for security system errors."""


class InvalidStatusError(SecurityServiceError, ValueError):
    """A status value is not one of the enumerated values."""


class UnknownSensorError(SecurityServiceError, KeyError):
    """A sensor is not registered with the status store."""

    def __init__(self, sensor_name: str):
        super().__init__(sensor_name)
        self.sensor_name = sensor_name

    def __str__(self) -> str:
        return f"Unknown sensor: {self.sensor_name}"


class StatusStoreError(SecurityServiceError):
    """The status store could not read or write state."""


class DetectorError(SecurityServiceError):
    """The cat detector could not classify an image."""
