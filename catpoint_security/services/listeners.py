"""Status listeners that log or record security system changes."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from ..logging_config import get_logger
from ..models.sensor import Sensor
from ..models.status import AlarmStatus
from .interfaces import StatusListener


class LoggingStatusListener(StatusListener):
    """Writes every notification to the log."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("status")

    def notify(self, alarm_status: AlarmStatus) -> None:
        level = logging.WARNING if alarm_status is AlarmStatus.ALARM else logging.INFO
        self.logger.log(level, f"Alarm status: {alarm_status.name} ({alarm_status.description})")

    def cat_detected(self, cat_detected: bool) -> None:
        if cat_detected:
            self.logger.info("DANGER - CAT DETECTED")
        else:
            self.logger.info("Camera clear")

    def sensor_status_changed(self, sensors: Iterable[Sensor]) -> None:
        active = sorted(sensor.name for sensor in sensors if sensor.active)
        self.logger.debug(f"Active sensors: {', '.join(active) if active else 'none'}")


@dataclass
class AlarmTransition:
    """An alarm status notification with the time it was received."""
    alarm_status: AlarmStatus
    timestamp: datetime = field(default_factory=datetime.now)


class StatusHistoryListener(StatusListener):
    """Keeps the notifications it receives, newest last."""

    def __init__(self, max_history: int = 500):
        self.max_history = max_history
        self.alarm_history: List[AlarmTransition] = []
        self.detections: List[bool] = []
        self.sensor_updates = 0
        self._lock = threading.Lock()

    def notify(self, alarm_status: AlarmStatus) -> None:
        with self._lock:
            self.alarm_history.append(AlarmTransition(alarm_status))
            if len(self.alarm_history) > self.max_history:
                self.alarm_history = self.alarm_history[-self.max_history:]

    def cat_detected(self, cat_detected: bool) -> None:
        with self._lock:
            self.detections.append(cat_detected)
            if len(self.detections) > self.max_history:
                self.detections = self.detections[-self.max_history:]

    def sensor_status_changed(self, sensors: Iterable[Sensor]) -> None:
        with self._lock:
            self.sensor_updates += 1

    @property
    def statuses(self) -> List[AlarmStatus]:
        with self._lock:
            return [transition.alarm_status for transition in self.alarm_history]

    @property
    def last_status(self) -> Optional[AlarmStatus]:
        with self._lock:
            return self.alarm_history[-1].alarm_status if self.alarm_history else None
