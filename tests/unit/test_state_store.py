"""
Unit tests for catpoint.core.state_store.InMemoryStateStore.

Validates:
- default arming/alarm status are always defined
- status round-trips
- sensor add/update/remove delegation and validation
- get_sensors returns a copy of the collection holding the stored objects
"""

from __future__ import annotations

import pytest

from catpoint.core.state_store import InMemoryStateStore
from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor, SensorType


def test_defaults_are_disarmed_and_no_alarm() -> None:
    store = InMemoryStateStore()

    assert store.get_arming_status() is ArmingStatus.DISARMED
    assert store.get_alarm_status() is AlarmStatus.NO_ALARM
    assert store.get_sensors() == set()


def test_status_setters() -> None:
    store = InMemoryStateStore()

    store.set_arming_status(ArmingStatus.ARMED_AWAY)
    store.set_alarm_status(AlarmStatus.PENDING_ALARM)

    assert store.get_arming_status() is ArmingStatus.ARMED_AWAY
    assert store.get_alarm_status() is AlarmStatus.PENDING_ALARM


def test_sensor_lifecycle() -> None:
    store = InMemoryStateStore()
    sensor = Sensor("Front", SensorType.DOOR)

    store.add_sensor(sensor)
    sensor.active = True
    store.update_sensor(sensor)

    assert store.active_sensors() == [sensor]

    store.remove_sensor(sensor)

    assert store.get_sensors() == set()


def test_update_unknown_sensor_raises() -> None:
    store = InMemoryStateStore()

    with pytest.raises(KeyError):
        store.update_sensor(Sensor("Ghost", SensorType.MOTION))


def test_get_sensors_returns_stored_objects_in_new_set() -> None:
    store = InMemoryStateStore()
    sensor = Sensor("Front", SensorType.DOOR)
    store.add_sensor(sensor)

    sensors = store.get_sensors()
    (stored,) = sensors
    sensors.clear()

    assert stored is sensor
    assert len(store.get_sensors()) == 1
