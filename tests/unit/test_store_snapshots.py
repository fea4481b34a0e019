"""
Unit tests for catpoint.ui.adapters.store_snapshots.

These helpers are pure functions over the store, so they are tested without
a Qt application.
"""

from __future__ import annotations

from catpoint.core.state_store import InMemoryStateStore
from catpoint.domain.models import AlarmStatus, Sensor, SensorType
from catpoint.ui.adapters.store_snapshots import alarm_level, sensor_rows


def test_alarm_level_mapping() -> None:
    assert alarm_level(AlarmStatus.NO_ALARM) == "OK"
    assert alarm_level(AlarmStatus.PENDING_ALARM) == "WARNING"
    assert alarm_level(AlarmStatus.ALARM) == "CRITICAL"


def test_sensor_rows_sorted_with_status_text() -> None:
    store = InMemoryStateStore()
    store.add_sensor(Sensor("Window", SensorType.WINDOW))
    store.add_sensor(Sensor("Door", SensorType.DOOR, active=True))

    assert sensor_rows(store) == [
        ("Door", "DOOR", "Active"),
        ("Window", "WINDOW", "Inactive"),
    ]


def test_sensor_rows_empty_store() -> None:
    assert sensor_rows(InMemoryStateStore()) == []
