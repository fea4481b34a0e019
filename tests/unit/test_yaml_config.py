"""
Unit tests for catpoint.core.config.yaml_config.

Validates:
- defaults when sections are missing
- typed parsing of a full config file
- validation errors for bad values
- path resolution via CATPOINT_CONFIG
"""

from __future__ import annotations

from pathlib import Path

import pytest

from catpoint.core.config.yaml_config import load_app_config, parse_app_config
from catpoint.domain.models import ArmingStatus, SensorType

FULL_CONFIG = """
logging:
  level: debug
arming_status: armed_home
sensors:
  - name: Front Door
    type: DOOR
  - name: Hallway
    type: motion
    active: true
classifier:
  kind: none
  detection_rate: 0.25
  seed: 7
scanner:
  max_queue: 4
  poll_timeout_s: 0.1
ui:
  window_title: Test Panel
  refresh_ms: 250
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_empty_mapping_uses_defaults() -> None:
    cfg = parse_app_config({})

    assert cfg.logging.level == "INFO"
    assert cfg.arming_status is ArmingStatus.DISARMED
    assert cfg.sensors == []
    assert cfg.classifier.kind == "fake"
    assert cfg.classifier.seed is None
    assert cfg.scanner.max_queue == 16
    assert cfg.ui.refresh_ms == 500


def test_load_full_config(tmp_path: Path) -> None:
    cfg = load_app_config(str(_write(tmp_path, FULL_CONFIG)))

    assert cfg.logging.level == "DEBUG"
    assert cfg.arming_status is ArmingStatus.ARMED_HOME
    assert [(s.name, s.sensor_type, s.active) for s in cfg.sensors] == [
        ("Front Door", SensorType.DOOR, False),
        ("Hallway", SensorType.MOTION, True),
    ]
    assert cfg.classifier.kind == "none"
    assert cfg.classifier.detection_rate == 0.25
    assert cfg.classifier.seed == 7
    assert cfg.scanner.max_queue == 4
    assert cfg.scanner.poll_timeout_s == 0.1
    assert cfg.ui.window_title == "Test Panel"


def test_sensor_config_builds_sensor() -> None:
    cfg = parse_app_config({"sensors": [{"name": "Kitchen", "type": "WINDOW", "active": True}]})

    sensor = cfg.sensors[0].to_sensor()

    assert sensor.name == "Kitchen"
    assert sensor.sensor_type is SensorType.WINDOW
    assert sensor.active is True


@pytest.mark.parametrize(
    "raw",
    [
        {"arming_status": "ARMED_MOON"},
        {"sensors": [{"name": "X", "type": "CHIMNEY"}]},
        {"sensors": [{"type": "DOOR"}]},
        {"classifier": {"kind": "aws"}},
        {"classifier": {"detection_rate": 2.0}},
        {"logging": {"level": "LOUD"}},
        {"logging": "debug"},
        {"sensors": ["Front Door"]},
    ],
)
def test_invalid_values_raise(raw: dict) -> None:
    with pytest.raises(ValueError):
        parse_app_config(raw)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(str(tmp_path / "missing.yaml"))


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_app_config(str(_write(tmp_path, "- just\n- a list\n")))


def test_env_var_resolution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, "arming_status: ARMED_AWAY\n")
    monkeypatch.setenv("CATPOINT_CONFIG", str(path))

    cfg = load_app_config()

    assert cfg.arming_status is ArmingStatus.ARMED_AWAY
