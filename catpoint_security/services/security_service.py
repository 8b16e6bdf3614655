"""Security service: derives the alarm status from sensors, arming and images."""

import threading
from typing import Any, List, Optional, Set, Union

from ..logging_config import get_logger
from ..models.sensor import Sensor
from ..models.status import AlarmStatus, ArmingStatus
from .error_handler import global_error_handler, with_error_handling
from .exceptions import InvalidStatusError
from .interfaces import CatDetectorInterface, StatusListener, StatusStoreInterface
from .transitions import (
    AlarmEvent, arming_event, image_event, next_alarm_status, sensor_event
)

logger = get_logger("security_service")

COMPONENT_NAME = "security_service"


class SecurityService:
    """Receives sensor, arming and image events and decides the alarm status.

    The service is the only writer of the alarm status and of sensor active
    flags. Every public operation reads its snapshot, writes and notifies
    listeners while holding the instance lock, so concurrent callers are
    serialized per service instance.
    """

    def __init__(self,
                 status_store: StatusStoreInterface,
                 cat_detector: CatDetectorInterface,
                 confidence_threshold: float = 0.5,
                 cat_detected: bool = False):
        """
        Initialize security service.

        Args:
            status_store: Holder of sensors, arming status and alarm status
            cat_detector: Image classifier
            confidence_threshold: Minimum confidence for a cat detection (0.0-1.0)
            cat_detected: Result of the last image analysis from a previous run
        """
        self.status_store = status_store
        self.cat_detector = cat_detector
        self.confidence_threshold = confidence_threshold

        self._listeners: List[StatusListener] = []
        self._cat_detected = bool(cat_detected)
        self._lock = threading.RLock()

        global_error_handler.register_component(COMPONENT_NAME)

    # Listeners

    def add_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # Read accessors

    def get_alarm_status(self) -> AlarmStatus:
        return self.status_store.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self.status_store.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self.status_store.get_sensors()

    @property
    def cat_detected(self) -> bool:
        """Result of the most recent image analysis."""
        return self._cat_detected

    # Sensor registry

    @with_error_handling(COMPONENT_NAME)
    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.status_store.add_sensor(sensor)
            logger.info(f"Sensor added: {sensor.name} ({sensor.sensor_type.value})")
            self._notify_sensors(self.status_store.get_sensors())

    @with_error_handling(COMPONENT_NAME)
    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.status_store.remove_sensor(sensor)
            logger.info(f"Sensor removed: {sensor.name}")
            self._notify_sensors(self.status_store.get_sensors())

    # Events

    @with_error_handling(COMPONENT_NAME)
    def set_sensor_activation(self, sensor: Sensor, active: bool) -> None:
        """Change a sensor's active flag and update the alarm status.

        The sensor is persisted whatever the alarm outcome. If the store
        rejects it, the sensor's flag is restored and the error propagates.
        """
        active = bool(active)
        with self._lock:
            was_active = sensor.active
            sensor.active = active
            try:
                self.status_store.update_sensor(sensor)
            except Exception:
                sensor.active = was_active
                raise

            sensors = self.status_store.get_sensors()
            event = sensor_event(active, was_active, _any_active(sensors))
            logger.debug(f"Sensor {sensor.name} {'activated' if active else 'deactivated'} "
                         f"(was {'active' if was_active else 'inactive'}): {event.value}")

            new_status = self._apply_event(event)

            self._notify_sensors(sensors)
            if new_status is not None:
                self._notify_alarm(new_status)

    @with_error_handling(COMPONENT_NAME)
    def set_arming_status(self, arming_status: Union[ArmingStatus, str]) -> None:
        """Change the arming status.

        Disarming clears any alarm. Arming resets every sensor to inactive,
        and arming home right after a cat was seen raises the alarm.
        Sensors are reset before the arming status is written, so a store
        failure during the reset leaves the arming status as it was.
        """
        arming_status = coerce_arming_status(arming_status)
        with self._lock:
            sensors: Optional[Set[Sensor]] = None
            if arming_status.is_armed:
                sensors = self.status_store.get_sensors()
                for sensor in sorted(sensors):
                    was_active = sensor.active
                    sensor.active = False
                    try:
                        self.status_store.update_sensor(sensor)
                    except Exception:
                        sensor.active = was_active
                        raise

            self.status_store.set_arming_status(arming_status)
            logger.info(f"Arming status set to {arming_status.name}")

            event = arming_event(arming_status, self._cat_detected)
            new_status = self._apply_event(event, arming_status)

            if sensors is not None:
                self._notify_sensors(sensors)
            if new_status is not None:
                self._notify_alarm(new_status)

    @with_error_handling(COMPONENT_NAME)
    def process_image(self, image: Any) -> bool:
        """Classify an image and update the alarm status.

        Returns:
            True if the image contains a cat
        """
        with self._lock:
            contains_cat = bool(
                self.cat_detector.image_contains_cat(image, self.confidence_threshold)
            )
            self._cat_detected = contains_cat
            logger.info(f"Image analysed: {'cat detected' if contains_cat else 'no cat'}")

            sensors = self.status_store.get_sensors()
            new_status = self._apply_event(image_event(contains_cat, _any_active(sensors)))

            for listener in list(self._listeners):
                listener.cat_detected(contains_cat)
            if new_status is not None:
                self._notify_alarm(new_status)

            return contains_cat

    # Internals

    def _apply_event(self, event: AlarmEvent,
                     arming_status: Optional[ArmingStatus] = None) -> Optional[AlarmStatus]:
        """Look up the transition for an event and persist the result."""
        alarm_status = self.status_store.get_alarm_status()
        if arming_status is None:
            arming_status = self.status_store.get_arming_status()

        new_status = next_alarm_status(alarm_status, arming_status, event)
        if new_status is None:
            return None

        self.status_store.set_alarm_status(new_status)
        if new_status is not alarm_status:
            logger.info(f"Alarm status {_name(alarm_status)} -> {new_status.name} on {event.value}")
        return new_status

    def _notify_alarm(self, alarm_status: AlarmStatus) -> None:
        for listener in list(self._listeners):
            listener.notify(alarm_status)

    def _notify_sensors(self, sensors: Set[Sensor]) -> None:
        for listener in list(self._listeners):
            listener.sensor_status_changed(sensors)


def coerce_arming_status(value: Union[ArmingStatus, str]) -> ArmingStatus:
    """Convert an arming status or its name to an ArmingStatus.

    Raises:
        InvalidStatusError: if the value names no arming status
    """
    if isinstance(value, ArmingStatus):
        return value
    if isinstance(value, str):
        try:
            return ArmingStatus[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidStatusError(f"Invalid arming status: {value!r}")


def _any_active(sensors) -> bool:
    return any(sensor.active for sensor in sensors)


def _name(status: Optional[AlarmStatus]) -> str:
    return status.name if status is not None else "None"
