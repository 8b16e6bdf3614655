"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Iterable, Set

import numpy as np

from ..models.sensor import Sensor
from ..models.status import AlarmStatus, ArmingStatus

NDArray = np.ndarray


class StatusStoreInterface(ABC):
    """Interface for the durable holder of sensors and system status."""

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get the current arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Persist a new arming status."""
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get the current alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Persist a new alarm status."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all registered sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Register a sensor, replacing any sensor with the same name."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Unregister a sensor. Raises UnknownSensorError if absent."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist a sensor's state. Raises UnknownSensorError if absent."""
        pass


class CatDetectorInterface(ABC):
    """Interface for image classification."""

    @abstractmethod
    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        """Return True if the image shows a cat with at least the given confidence."""
        pass


class StatusListener:
    """Observer of security system changes.

    Every callback is a no-op by default; subclasses override what they need.
    """

    def notify(self, alarm_status: AlarmStatus) -> None:
        """Called after the alarm status is written."""

    def cat_detected(self, cat_detected: bool) -> None:
        """Called after an image has been classified."""

    def sensor_status_changed(self, sensors: Iterable[Sensor]) -> None:
        """Called after sensors are added, removed, or change state."""
