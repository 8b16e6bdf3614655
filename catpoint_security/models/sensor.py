"""Sensor entity."""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict

from .status import SensorType


@dataclass(eq=False)
class Sensor:
    """A named binary sensor.

    Sensors are identified by name: two instances with the same name refer to
    the same physical device, whatever their active flag says.
    """
    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: "Sensor") -> bool:
        return (self.name, self.sensor_type.value) < (other.name, other.sensor_type.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sensor_type": self.sensor_type.value,
            "active": self.active,
            "sensor_id": self.sensor_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        return cls(
            name=data["name"],
            sensor_type=SensorType(data["sensor_type"]),
            active=bool(data.get("active", False)),
            sensor_id=data.get("sensor_id") or uuid.uuid4().hex,
        )
