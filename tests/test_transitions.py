"""Unit tests for the alarm transition table."""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.models.status import AlarmStatus, ArmingStatus
from catpoint_security.services.transitions import (
    AlarmEvent, TRANSITION_RULES, arming_event, image_event, next_alarm_status, sensor_event
)

SENSOR_EVENTS = (
    AlarmEvent.SENSOR_ACTIVATED,
    AlarmEvent.SENSOR_DEACTIVATED,
    AlarmEvent.LAST_SENSOR_DEACTIVATED,
    AlarmEvent.INACTIVE_SENSOR_DEACTIVATED,
)


class TestTransitionTable(unittest.TestCase):
    """Test cases for next_alarm_status."""

    def test_every_event_has_a_rule(self):
        """Each event kind appears in the table."""
        covered = {rule.event for rule in TRANSITION_RULES}
        self.assertEqual(covered, set(AlarmEvent))

    def test_activation_escalates_when_armed(self):
        """No alarm goes pending and pending goes to alarm while armed."""
        for arming in (ArmingStatus.ARMED_HOME, ArmingStatus.ARMED_AWAY):
            self.assertEqual(
                next_alarm_status(AlarmStatus.NO_ALARM, arming, AlarmEvent.SENSOR_ACTIVATED),
                AlarmStatus.PENDING_ALARM)
            self.assertEqual(
                next_alarm_status(AlarmStatus.PENDING_ALARM, arming, AlarmEvent.SENSOR_ACTIVATED),
                AlarmStatus.ALARM)

    def test_activation_ignored_when_disarmed(self):
        for alarm in AlarmStatus:
            self.assertIsNone(
                next_alarm_status(alarm, ArmingStatus.DISARMED, AlarmEvent.SENSOR_ACTIVATED))

    def test_alarm_is_sink_for_sensor_events(self):
        """No sensor event moves the system out of alarm."""
        for arming in ArmingStatus:
            for event in SENSOR_EVENTS:
                with self.subTest(arming=arming, event=event):
                    self.assertIsNone(next_alarm_status(AlarmStatus.ALARM, arming, event))

    def test_last_sensor_deactivated_clears_pending_only(self):
        for arming in ArmingStatus:
            self.assertEqual(
                next_alarm_status(AlarmStatus.PENDING_ALARM, arming,
                                  AlarmEvent.LAST_SENSOR_DEACTIVATED),
                AlarmStatus.NO_ALARM)
            self.assertIsNone(
                next_alarm_status(AlarmStatus.NO_ALARM, arming,
                                  AlarmEvent.LAST_SENSOR_DEACTIVATED))

    def test_deactivation_with_others_active_unchanged(self):
        for alarm in AlarmStatus:
            for arming in ArmingStatus:
                self.assertIsNone(
                    next_alarm_status(alarm, arming, AlarmEvent.SENSOR_DEACTIVATED))
                self.assertIsNone(
                    next_alarm_status(alarm, arming, AlarmEvent.INACTIVE_SENSOR_DEACTIVATED))

    def test_image_events(self):
        for alarm in AlarmStatus:
            self.assertEqual(
                next_alarm_status(alarm, ArmingStatus.ARMED_HOME, AlarmEvent.CAT_DETECTED),
                AlarmStatus.ALARM)
            self.assertIsNone(
                next_alarm_status(alarm, ArmingStatus.ARMED_AWAY, AlarmEvent.CAT_DETECTED))
            self.assertIsNone(
                next_alarm_status(alarm, ArmingStatus.DISARMED, AlarmEvent.CAT_DETECTED))
            for arming in ArmingStatus:
                self.assertEqual(
                    next_alarm_status(alarm, arming, AlarmEvent.NO_CAT_ALL_CLEAR),
                    AlarmStatus.NO_ALARM)
                self.assertIsNone(
                    next_alarm_status(alarm, arming, AlarmEvent.NO_CAT_SENSORS_ACTIVE))

    def test_arming_events(self):
        for alarm in AlarmStatus:
            self.assertEqual(
                next_alarm_status(alarm, ArmingStatus.DISARMED, AlarmEvent.DISARMED),
                AlarmStatus.NO_ALARM)
            self.assertEqual(
                next_alarm_status(alarm, ArmingStatus.ARMED_HOME, AlarmEvent.ARMED_WITH_CAT),
                AlarmStatus.ALARM)
            self.assertIsNone(
                next_alarm_status(alarm, ArmingStatus.ARMED_AWAY, AlarmEvent.ARMED_WITH_CAT))
            self.assertIsNone(
                next_alarm_status(alarm, ArmingStatus.ARMED_HOME, AlarmEvent.ARMED))


class TestEventClassification(unittest.TestCase):
    """Test cases for event classifiers."""

    def test_sensor_event(self):
        self.assertEqual(sensor_event(True, False, True), AlarmEvent.SENSOR_ACTIVATED)
        self.assertEqual(sensor_event(True, True, True), AlarmEvent.SENSOR_ACTIVATED)
        self.assertEqual(sensor_event(False, False, False),
                         AlarmEvent.INACTIVE_SENSOR_DEACTIVATED)
        self.assertEqual(sensor_event(False, True, True), AlarmEvent.SENSOR_DEACTIVATED)
        self.assertEqual(sensor_event(False, True, False), AlarmEvent.LAST_SENSOR_DEACTIVATED)

    def test_image_event(self):
        self.assertEqual(image_event(True, True), AlarmEvent.CAT_DETECTED)
        self.assertEqual(image_event(False, True), AlarmEvent.NO_CAT_SENSORS_ACTIVE)
        self.assertEqual(image_event(False, False), AlarmEvent.NO_CAT_ALL_CLEAR)

    def test_arming_event(self):
        self.assertEqual(arming_event(ArmingStatus.DISARMED, True), AlarmEvent.DISARMED)
        self.assertEqual(arming_event(ArmingStatus.ARMED_HOME, False), AlarmEvent.ARMED)
        self.assertEqual(arming_event(ArmingStatus.ARMED_AWAY, True), AlarmEvent.ARMED_WITH_CAT)


if __name__ == '__main__':
    unittest.main()
