from __future__ import annotations

from typing import List, Tuple

from catpoint.core.state_store import StateStore
from catpoint.domain.models import AlarmStatus

SensorRow = Tuple[str, str, str]  # name, type, status


def alarm_level(status: AlarmStatus) -> str:
    """
    Map an alarm status to the indicator level used by the UI:
    OK / WARNING / CRITICAL
    """
    if status is AlarmStatus.ALARM:
        return "CRITICAL"
    if status is AlarmStatus.PENDING_ALARM:
        return "WARNING"
    return "OK"


def sensor_rows(store: StateStore) -> List[SensorRow]:
    rows: List[SensorRow] = []
    for s in store.get_sensors():
        rows.append((s.name, s.sensor_type.value, "Active" if s.active else "Inactive"))

    rows.sort(key=lambda r: (r[0], r[1]))
    return rows
