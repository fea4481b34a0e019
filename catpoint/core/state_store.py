from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Protocol, Set

from catpoint.core.state.sensor_store import SensorStore
from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor


class StateStore(Protocol):
    """
    Repository contract consumed by the alarm controller.

    Any object providing these methods can back an `AlarmController`
    (in-memory store, database-backed repository, test fake). All operations
    are expected to succeed; failure handling belongs to the implementation.
    """

    def get_arming_status(self) -> ArmingStatus: ...

    def set_arming_status(self, status: ArmingStatus) -> None: ...

    def get_alarm_status(self) -> AlarmStatus: ...

    def set_alarm_status(self, status: AlarmStatus) -> None: ...

    def get_sensors(self) -> Set[Sensor]: ...

    def add_sensor(self, sensor: Sensor) -> None: ...

    def remove_sensor(self, sensor: Sensor) -> None: ...

    def update_sensor(self, sensor: Sensor) -> None: ...


@dataclass
class InMemoryStateStore:
    """
    Thread-safe in-memory implementation of :class:`StateStore`.

    'InMemoryStateStore' holds:
    - the current arming mode
    - the current alarm status
    - the sensor registry

    Concurrency Model
    -----------------
    All reads/writes are guarded by a single re-entrant lock (`threading.RLock`).
    This gives the UI consistent snapshots while the image scan worker and the
    GUI thread both drive the controller.

    Design Notes
    ------------
    - Arming and alarm status always hold a value (DISARMED / NO_ALARM unless
      given otherwise), so readers never see an unset state.
    - :meth:`get_sensors` returns a new set, so callers may iterate it while
      sensors are being added or removed elsewhere.

    Attributes
    ----------
    arming_status
        Current arming mode.
    alarm_status
        Current alarm status.
    sensors
        Sensor registry.
    """

    arming_status: ArmingStatus = ArmingStatus.DISARMED
    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM
    sensors: SensorStore = field(default_factory=SensorStore)

    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    # --- Status API ---
    def get_arming_status(self) -> ArmingStatus:
        with self._lock:
            return self.arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        with self._lock:
            self.arming_status = status

    def get_alarm_status(self) -> AlarmStatus:
        with self._lock:
            return self.alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        with self._lock:
            self.alarm_status = status

    # --- Sensor API ---
    def get_sensors(self) -> Set[Sensor]:
        """
        Return all registered sensors.

        Returns
        -------
        set of Sensor
            A new set; the Sensor objects themselves are the stored ones.
        """
        with self._lock:
            return self.sensors.all()

    def add_sensor(self, sensor: Sensor) -> None:
        """
        Register a sensor (or replace one with the same name and type).

        Parameters
        ----------
        sensor
            Sensor to register.
        """
        with self._lock:
            self.sensors.add(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        """
        Remove a registered sensor.

        Raises
        ------
        KeyError
            If the sensor is not registered.
        """
        with self._lock:
            self.sensors.remove(sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        """
        Persist a sensor's new state.

        Raises
        ------
        KeyError
            If the sensor is not registered.
        """
        with self._lock:
            self.sensors.update(sensor)

    def active_sensors(self) -> List[Sensor]:
        """
        Snapshot of currently active sensors.

        Returns
        -------
        list of Sensor
            Sensors whose ``active`` flag is set.
        """
        with self._lock:
            return self.sensors.active()
