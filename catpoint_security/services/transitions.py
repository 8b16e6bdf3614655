"""Alarm status transition table.

Every alarm decision the security service makes is a lookup in
``TRANSITION_RULES``. Rules are checked in order and the first rule whose
alarm status, arming status and event all match decides the outcome.
``ANY`` matches every status. A rule whose outcome is ``UNCHANGED`` stops the
search without writing a new alarm status.
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Union

from ..models.status import AlarmStatus, ArmingStatus


class AlarmEvent(Enum):
    """Event kinds that feed the alarm decision."""
    SENSOR_ACTIVATED = "sensor_activated"
    SENSOR_DEACTIVATED = "sensor_deactivated"
    LAST_SENSOR_DEACTIVATED = "last_sensor_deactivated"
    INACTIVE_SENSOR_DEACTIVATED = "inactive_sensor_deactivated"
    CAT_DETECTED = "cat_detected"
    NO_CAT_ALL_CLEAR = "no_cat_all_clear"
    NO_CAT_SENSORS_ACTIVE = "no_cat_sensors_active"
    DISARMED = "disarmed"
    ARMED = "armed"
    ARMED_WITH_CAT = "armed_with_cat"


class _Any:
    def __repr__(self) -> str:
        return "ANY"


ANY = _Any()
UNCHANGED = None

AlarmMatch = Union[AlarmStatus, _Any]
ArmingMatch = Union[ArmingStatus, _Any]


class TransitionRule(NamedTuple):
    alarm_status: AlarmMatch
    arming_status: ArmingMatch
    event: AlarmEvent
    next_status: Optional[AlarmStatus]

    def matches(self, alarm_status: AlarmStatus, arming_status: ArmingStatus,
                event: AlarmEvent) -> bool:
        return (self.event is event
                and (self.alarm_status is ANY or self.alarm_status is alarm_status)
                and (self.arming_status is ANY or self.arming_status is arming_status))


_A = AlarmStatus
_M = ArmingStatus
_E = AlarmEvent

# For arming events the arming column holds the status being armed into.
TRANSITION_RULES: List[TransitionRule] = [
    # Sensor turned on
    TransitionRule(_A.ALARM,         ANY,          _E.SENSOR_ACTIVATED, UNCHANGED),
    TransitionRule(ANY,              _M.DISARMED,  _E.SENSOR_ACTIVATED, UNCHANGED),
    TransitionRule(_A.NO_ALARM,      ANY,          _E.SENSOR_ACTIVATED, _A.PENDING_ALARM),
    TransitionRule(_A.PENDING_ALARM, ANY,          _E.SENSOR_ACTIVATED, _A.ALARM),

    # Sensor turned off
    TransitionRule(_A.ALARM,         ANY,          _E.SENSOR_DEACTIVATED, UNCHANGED),
    TransitionRule(_A.ALARM,         ANY,          _E.LAST_SENSOR_DEACTIVATED, UNCHANGED),
    TransitionRule(ANY,              ANY,          _E.INACTIVE_SENSOR_DEACTIVATED, UNCHANGED),
    TransitionRule(_A.PENDING_ALARM, ANY,          _E.LAST_SENSOR_DEACTIVATED, _A.NO_ALARM),
    TransitionRule(ANY,              ANY,          _E.LAST_SENSOR_DEACTIVATED, UNCHANGED),
    TransitionRule(ANY,              ANY,          _E.SENSOR_DEACTIVATED, UNCHANGED),

    # Image classified
    TransitionRule(ANY,              _M.ARMED_HOME, _E.CAT_DETECTED, _A.ALARM),
    TransitionRule(ANY,              ANY,           _E.CAT_DETECTED, UNCHANGED),
    TransitionRule(ANY,              ANY,           _E.NO_CAT_ALL_CLEAR, _A.NO_ALARM),
    TransitionRule(ANY,              ANY,           _E.NO_CAT_SENSORS_ACTIVE, UNCHANGED),

    # Arming changed
    TransitionRule(ANY,              _M.DISARMED,   _E.DISARMED, _A.NO_ALARM),
    TransitionRule(ANY,              _M.ARMED_HOME, _E.ARMED_WITH_CAT, _A.ALARM),
    TransitionRule(ANY,              ANY,           _E.ARMED_WITH_CAT, UNCHANGED),
    TransitionRule(ANY,              ANY,           _E.ARMED, UNCHANGED),
]


def next_alarm_status(alarm_status: AlarmStatus, arming_status: ArmingStatus,
                      event: AlarmEvent) -> Optional[AlarmStatus]:
    """Return the alarm status to write, or None to leave it unchanged."""
    for rule in TRANSITION_RULES:
        if rule.matches(alarm_status, arming_status, event):
            return rule.next_status
    return UNCHANGED


def sensor_event(active: bool, was_active: bool, any_sensor_active: bool) -> AlarmEvent:
    """Classify a sensor activation change.

    ``any_sensor_active`` is whether any sensor is active after the change.
    """
    if active:
        return AlarmEvent.SENSOR_ACTIVATED
    if not was_active:
        return AlarmEvent.INACTIVE_SENSOR_DEACTIVATED
    if any_sensor_active:
        return AlarmEvent.SENSOR_DEACTIVATED
    return AlarmEvent.LAST_SENSOR_DEACTIVATED


def image_event(contains_cat: bool, any_sensor_active: bool) -> AlarmEvent:
    """Classify an image analysis result."""
    if contains_cat:
        return AlarmEvent.CAT_DETECTED
    if any_sensor_active:
        return AlarmEvent.NO_CAT_SENSORS_ACTIVE
    return AlarmEvent.NO_CAT_ALL_CLEAR


def arming_event(arming_status: ArmingStatus, cat_seen: bool) -> AlarmEvent:
    """Classify an arming status change."""
    if arming_status is ArmingStatus.DISARMED:
        return AlarmEvent.DISARMED
    if cat_seen:
        return AlarmEvent.ARMED_WITH_CAT
    return AlarmEvent.ARMED
