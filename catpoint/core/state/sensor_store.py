from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from catpoint.domain.models import Sensor, SensorType

SensorKey = Tuple[str, SensorType]


@dataclass
class SensorStore:
    """
    In-memory registry of sensors keyed by identity (name + type).

    Notes
    -----
    - This store is intentionally simple and not thread-safe.
      Synchronization is handled by the enclosing `InMemoryStateStore`.
    - The store keeps the Sensor objects it is given. Callers that mutate a
      sensor's ``active`` flag should still call :meth:`update` so a
      replacement object with the same identity is picked up.
    """

    sensors: Dict[SensorKey, Sensor] = field(default_factory=dict)

    def add(self, sensor: Sensor) -> None:
        """
        Register a sensor, replacing any sensor with the same identity.

        Parameters
        ----------
        sensor
            Sensor to register.
        """
        self.sensors[sensor.key] = sensor

    def update(self, sensor: Sensor) -> None:
        """
        Replace the stored sensor with ``sensor``.

        Raises
        ------
        KeyError
            If no sensor with the same identity is registered.
        """
        if sensor.key not in self.sensors:
            raise KeyError(f"Unknown sensor: {sensor.name} ({sensor.sensor_type.value})")
        self.sensors[sensor.key] = sensor

    def remove(self, sensor: Sensor) -> None:
        """
        Remove a sensor.

        Raises
        ------
        KeyError
            If no sensor with the same identity is registered.
        """
        if sensor.key not in self.sensors:
            raise KeyError(f"Unknown sensor: {sensor.name} ({sensor.sensor_type.value})")
        del self.sensors[sensor.key]

    def all(self) -> Set[Sensor]:
        """Return a new set holding every registered sensor."""
        return set(self.sensors.values())

    def active(self) -> List[Sensor]:
        """Return registered sensors whose ``active`` flag is set."""
        return [s for s in self.sensors.values() if s.active]

    def clear(self) -> None:
        self.sensors.clear()
