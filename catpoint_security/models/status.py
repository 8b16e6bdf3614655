"""Status enumerations for the security system."""

from enum import Enum


class AlarmStatus(Enum):
    """Escalation level of the premises."""
    NO_ALARM = "Cool and Good"
    PENDING_ALARM = "I'm in Danger..."
    ALARM = "Awooga!"

    @property
    def description(self) -> str:
        return self.value


class ArmingStatus(Enum):
    """Whether and how the system is armed."""
    DISARMED = "Disarmed"
    ARMED_HOME = "Armed - At Home"
    ARMED_AWAY = "Armed - Away"

    @property
    def description(self) -> str:
        return self.value

    @property
    def is_armed(self) -> bool:
        return self is not ArmingStatus.DISARMED


class SensorType(Enum):
    """Sensor categories."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"
