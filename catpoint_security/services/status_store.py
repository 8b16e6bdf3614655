"""Status store implementations for sensors, arming status and alarm status."""

import os
import sqlite3
import threading
from typing import Dict, Set

from ..config.defaults import DEFAULT_PATHS
from ..logging_config import get_logger
from ..models.sensor import Sensor
from ..models.status import AlarmStatus, ArmingStatus, SensorType
from .exceptions import StatusStoreError, UnknownSensorError
from .interfaces import StatusStoreInterface

logger = get_logger("status_store")

ALARM_STATUS_KEY = "alarm_status"
ARMING_STATUS_KEY = "arming_status"
CAT_DETECTED_KEY = "cat_detected"


class InMemoryStatusStore(StatusStoreInterface):
    """Status store that keeps everything in process memory.

    Sensors handed out by ``get_sensors`` are the stored instances, so a
    caller that flips a flag and calls ``update_sensor`` sees the change
    immediately.
    """

    def __init__(self,
                 arming_status: ArmingStatus = ArmingStatus.DISARMED,
                 alarm_status: AlarmStatus = AlarmStatus.NO_ALARM):
        self._arming_status = arming_status
        self._alarm_status = alarm_status
        self._sensors: Dict[str, Sensor] = {}
        self._lock = threading.Lock()

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_sensors(self) -> Set[Sensor]:
        with self._lock:
            return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._sensors[sensor.name] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            if sensor.name not in self._sensors:
                raise UnknownSensorError(sensor.name)
            del self._sensors[sensor.name]

    def update_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            if sensor.name not in self._sensors:
                raise UnknownSensorError(sensor.name)
            stored = self._sensors[sensor.name]
            if stored is not sensor:
                stored.active = sensor.active
                stored.sensor_type = sensor.sensor_type


class SqliteStatusStore(StatusStoreInterface):
    """Status store persisted in a SQLite database file."""

    def __init__(self, database_path: str = DEFAULT_PATHS["database_file"]):
        """
        Initialize SQLite status store.

        Args:
            database_path: Path to SQLite database file
        """
        self.database_path = database_path
        self._initialize_database()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.database_path)

    def _initialize_database(self) -> None:
        """Create tables and seed the initial status."""
        directory = os.path.dirname(self.database_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    CREATE TABLE IF NOT EXISTS sensors (
                        name TEXT PRIMARY KEY,
                        sensor_id TEXT NOT NULL,
                        sensor_type TEXT NOT NULL,
                        active INTEGER NOT NULL DEFAULT 0
                    )
                """)
                cursor.execute("""
                    CREATE TABLE IF NOT EXISTS status (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                """)
                cursor.execute("INSERT OR IGNORE INTO status (key, value) VALUES (?, ?)",
                               (ARMING_STATUS_KEY, ArmingStatus.DISARMED.name))
                cursor.execute("INSERT OR IGNORE INTO status (key, value) VALUES (?, ?)",
                               (ALARM_STATUS_KEY, AlarmStatus.NO_ALARM.name))
                cursor.execute("INSERT OR IGNORE INTO status (key, value) VALUES (?, ?)",
                               (CAT_DETECTED_KEY, "0"))
                conn.commit()
            logger.info(f"Status store initialized: {self.database_path}")
        except sqlite3.Error as e:
            logger.error(f"Failed to initialize status store: {e}")
            raise StatusStoreError(f"Cannot initialize {self.database_path}: {e}") from e

    def _get_status(self, key: str) -> str:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT value FROM status WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to read {key}: {e}") from e
        if row is None:
            raise StatusStoreError(f"Missing status entry: {key}")
        return row[0]

    def _set_status(self, key: str, value: str) -> None:
        try:
            with self._connect() as conn:
                conn.execute("INSERT OR REPLACE INTO status (key, value) VALUES (?, ?)",
                             (key, value))
                conn.commit()
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to write {key}: {e}") from e

    def get_arming_status(self) -> ArmingStatus:
        return ArmingStatus[self._get_status(ARMING_STATUS_KEY)]

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._set_status(ARMING_STATUS_KEY, arming_status.name)

    def get_alarm_status(self) -> AlarmStatus:
        return AlarmStatus[self._get_status(ALARM_STATUS_KEY)]

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._set_status(ALARM_STATUS_KEY, alarm_status.name)

    def get_cat_detected(self) -> bool:
        """Result of the last image analysis saved with set_cat_detected."""
        return self._get_status(CAT_DETECTED_KEY) == "1"

    def set_cat_detected(self, cat_detected: bool) -> None:
        self._set_status(CAT_DETECTED_KEY, "1" if cat_detected else "0")

    def get_sensors(self) -> Set[Sensor]:
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT name, sensor_id, sensor_type, active FROM sensors"
                ).fetchall()
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to read sensors: {e}") from e

        return {
            Sensor(name=name, sensor_type=SensorType(sensor_type),
                   active=bool(active), sensor_id=sensor_id)
            for name, sensor_id, sensor_type, active in rows
        }

    def get_sensor(self, name: str) -> Sensor:
        """Look up a sensor by name."""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT name, sensor_id, sensor_type, active FROM sensors WHERE name = ?",
                    (name,)
                ).fetchone()
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to read sensor {name}: {e}") from e

        if row is None:
            raise UnknownSensorError(name)
        name, sensor_id, sensor_type, active = row
        return Sensor(name=name, sensor_type=SensorType(sensor_type),
                      active=bool(active), sensor_id=sensor_id)

    def add_sensor(self, sensor: Sensor) -> None:
        try:
            with self._connect() as conn:
                conn.execute("""
                    INSERT OR REPLACE INTO sensors (name, sensor_id, sensor_type, active)
                    VALUES (?, ?, ?, ?)
                """, (sensor.name, sensor.sensor_id, sensor.sensor_type.value, int(sensor.active)))
                conn.commit()
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to add sensor {sensor.name}: {e}") from e

    def remove_sensor(self, sensor: Sensor) -> None:
        self._execute_for_sensor("DELETE FROM sensors WHERE name = ?", (sensor.name,), sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        self._execute_for_sensor(
            "UPDATE sensors SET sensor_type = ?, active = ? WHERE name = ?",
            (sensor.sensor_type.value, int(sensor.active), sensor.name),
            sensor
        )

    def _execute_for_sensor(self, sql: str, params: tuple, sensor: Sensor) -> None:
        try:
            with self._connect() as conn:
                cursor = conn.execute(sql, params)
                conn.commit()
                affected = cursor.rowcount
        except sqlite3.Error as e:
            raise StatusStoreError(f"Failed to write sensor {sensor.name}: {e}") from e
        if affected == 0:
            raise UnknownSensorError(sensor.name)

