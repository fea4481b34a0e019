"""
Unit tests for catpoint.bootstrap.

Wiring is built from in-memory AppConfig objects; the scan worker is never
started.
"""

from __future__ import annotations

from catpoint.bootstrap import build_app_system, build_classifier
from catpoint.core.config.yaml_config import parse_app_config
from catpoint.domain.models import AlarmStatus, ArmingStatus, SensorType
from catpoint.imaging.fake_classifier import FakeImageClassifier
from catpoint.imaging.label_classifier import LabelImageClassifier


def test_build_app_system_seeds_store_from_config() -> None:
    cfg = parse_app_config(
        {
            "arming_status": "ARMED_AWAY",
            "sensors": [
                {"name": "Front", "type": "DOOR"},
                {"name": "Hall", "type": "MOTION", "active": True},
            ],
        }
    )

    wiring = build_app_system(config=cfg)

    assert wiring.store.get_arming_status() is ArmingStatus.ARMED_AWAY
    assert wiring.store.get_alarm_status() is AlarmStatus.NO_ALARM
    assert {(s.name, s.sensor_type, s.active) for s in wiring.store.get_sensors()} == {
        ("Front", SensorType.DOOR, False),
        ("Hall", SensorType.MOTION, True),
    }
    assert wiring.controller.store is wiring.store
    assert not wiring.scanner.is_alive()


def test_build_classifier_kinds() -> None:
    fake = build_classifier(parse_app_config({"classifier": {"kind": "fake", "detection_rate": 1.0}}))
    none = build_classifier(parse_app_config({"classifier": {"kind": "none"}}))

    assert isinstance(fake, FakeImageClassifier)
    assert fake.contains_target(b"img", 50.0) is True
    assert isinstance(none, LabelImageClassifier)
    assert none.contains_target(b"img", 50.0) is False


def test_wired_controller_reacts_to_cat_while_armed_home() -> None:
    cfg = parse_app_config({"arming_status": "ARMED_HOME", "classifier": {"detection_rate": 1.0}})
    wiring = build_app_system(config=cfg)

    wiring.controller.process_image(b"img")

    assert wiring.store.get_alarm_status() is AlarmStatus.ALARM
