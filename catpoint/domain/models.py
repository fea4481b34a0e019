"""
Domain models and enums.

This module defines the core domain-level types used across the system:
- Arming modes and alarm statuses
- Sensor types
- Sensor, the binary device whose activity drives alarm escalation

Enums subclass ``str`` so their values serialize cleanly into config files,
logs and UI labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ArmingStatus(str, Enum):
    """
    Arming mode selected by the user.

    Members
    -------
    DISARMED : str
        Sensor activity is ignored.
    ARMED_HOME : str
        Armed while occupants are home. A detected cat raises the alarm.
    ARMED_AWAY : str
        Armed while the home is empty.
    """

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"

    @property
    def description(self) -> str:
        return _ARMING_DESCRIPTIONS[self]


class AlarmStatus(str, Enum):
    """
    Escalation level of the alarm.

    Members
    -------
    NO_ALARM : str
        Nothing is wrong.
    PENDING_ALARM : str
        Something looks off; one more trigger raises the alarm.
    ALARM : str
        The alarm is sounding.
    """

    NO_ALARM = "NO_ALARM"
    PENDING_ALARM = "PENDING_ALARM"
    ALARM = "ALARM"

    @property
    def description(self) -> str:
        return _ALARM_DESCRIPTIONS[self]


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}

_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}


class SensorType(str, Enum):
    """Kind of physical sensor. Alarm rules treat all types alike."""

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


@dataclass(unsafe_hash=True)
class Sensor:
    """
    A binary door/window/motion sensor.

    Identity is the ``(name, sensor_type)`` pair: two Sensor objects with the
    same name and type compare equal and hash alike regardless of their
    ``active`` flag, so a sensor can be looked up in a set after it toggles.

    Parameters
    ----------
    name
        Human-readable sensor name (e.g., "Front Door").
    sensor_type
        Kind of sensor.
    active
        Whether the sensor is currently triggered.
    """

    name: str
    sensor_type: SensorType
    active: bool = field(default=False, compare=False)

    @property
    def key(self) -> Tuple[str, SensorType]:
        return (self.name, self.sensor_type)
