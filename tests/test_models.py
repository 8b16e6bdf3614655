"""Unit tests for data models."""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.models import AlarmStatus, ArmingStatus, Sensor, SensorType


class TestSensor(unittest.TestCase):
    """Test cases for Sensor."""

    def test_defaults(self):
        sensor = Sensor("Front Door", SensorType.DOOR)
        self.assertFalse(sensor.active)
        self.assertTrue(sensor.sensor_id)

    def test_identity_is_name(self):
        """Sensors with the same name are equal whatever their state."""
        a = Sensor("Front Door", SensorType.DOOR, active=True)
        b = Sensor("Front Door", SensorType.DOOR)

        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Sensor("Back Door", SensorType.DOOR))

    def test_ordering(self):
        sensors = [Sensor("Window", SensorType.WINDOW), Sensor("Attic", SensorType.MOTION)]
        self.assertEqual([s.name for s in sorted(sensors)], ["Attic", "Window"])

    def test_dict_round_trip(self):
        sensor = Sensor("Hall", SensorType.MOTION, active=True)
        restored = Sensor.from_dict(sensor.to_dict())

        self.assertEqual(restored.name, "Hall")
        self.assertEqual(restored.sensor_type, SensorType.MOTION)
        self.assertTrue(restored.active)
        self.assertEqual(restored.sensor_id, sensor.sensor_id)


class TestStatuses(unittest.TestCase):
    """Test cases for status enumerations."""

    def test_descriptions(self):
        self.assertEqual(AlarmStatus.ALARM.description, "Awooga!")
        self.assertEqual(ArmingStatus.ARMED_HOME.description, "Armed - At Home")

    def test_is_armed(self):
        self.assertFalse(ArmingStatus.DISARMED.is_armed)
        self.assertTrue(ArmingStatus.ARMED_HOME.is_armed)
        self.assertTrue(ArmingStatus.ARMED_AWAY.is_armed)


if __name__ == '__main__':
    unittest.main()
