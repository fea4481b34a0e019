from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml

from catpoint.domain.models import ArmingStatus, Sensor, SensorType

E = TypeVar("E", ArmingStatus, SensorType)


@dataclass(frozen=True)
class LoggingConfig:
    """Root logger settings applied at startup."""
    level: str = "INFO"


@dataclass(frozen=True)
class SensorConfigData:
    """One sensor registered at startup."""
    name: str
    sensor_type: SensorType
    active: bool = False

    def to_sensor(self) -> Sensor:
        return Sensor(name=self.name, sensor_type=self.sensor_type, active=self.active)


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Image classifier selection.

    ``kind`` is ``"fake"`` (random answers) or ``"none"`` (unconfigured
    backend, every image reports no cat).
    """
    kind: str = "fake"
    detection_rate: float = 0.5
    seed: Optional[int] = None


@dataclass(frozen=True)
class ScannerConfig:
    """Image scan worker settings."""
    max_queue: int = 16
    poll_timeout_s: float = 0.5


@dataclass(frozen=True)
class UiConfig:
    """Desktop panel settings."""
    window_title: str = "Very Secure App"
    refresh_ms: int = 500


@dataclass(frozen=True)
class AppConfig:
    """
    Root application configuration loaded from YAML.

    This is the single source of truth for runtime-tunable values so the
    panel can be configured without code changes.
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    arming_status: ArmingStatus = ArmingStatus.DISARMED
    sensors: List[SensorConfigData] = field(default_factory=list)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    ui: UiConfig = field(default_factory=UiConfig)


CLASSIFIER_KINDS = ("fake", "none")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def _resolve_default_config_path() -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) CATPOINT_CONFIG env var if provided
    2) config.yaml next to the executable
    3) ./config.yaml in current working directory
    """
    import os
    import sys

    env = os.getenv("CATPOINT_CONFIG")
    if env:
        return Path(env).expanduser().resolve()

    # PyInstaller-friendly: executable directory
    exe_dir = Path(sys.executable).resolve().parent
    candidate = exe_dir / "config.yaml"
    if candidate.exists():
        return candidate

    return Path("config.yaml").resolve()


def _parse_enum(enum_cls: Type[E], raw: Any, key: str) -> E:
    try:
        return enum_cls(str(raw).upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {key} {raw!r}; expected one of: {allowed}") from None


def parse_app_config(raw: Dict[str, Any]) -> AppConfig:
    """
    Convert a raw YAML mapping into typed config objects.

    Parameters
    ----------
    raw
        Mapping loaded from YAML. Missing sections fall back to defaults.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    ValueError
        If a value is invalid (unknown enum member or log level, bad rate,
        missing name, non-mapping sensor entry).
    """
    # ---- logging ----
    lg = raw.get("logging") or {}
    if not isinstance(lg, dict):
        raise ValueError("logging must be a mapping")
    level = str(lg.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid logging.level {level!r}; expected one of: {', '.join(LOG_LEVELS)}")
    logging_cfg = LoggingConfig(level=level)

    # ---- arming ----
    arming_status = _parse_enum(ArmingStatus, raw.get("arming_status", "DISARMED"), "arming_status")

    # ---- sensors ----
    sensors: List[SensorConfigData] = []
    for item in raw.get("sensors") or []:
        if not isinstance(item, dict):
            raise ValueError(f"Sensor entries must be mappings, got {item!r}")
        if "name" not in item:
            raise ValueError("Every sensor entry needs a 'name'")
        sensors.append(
            SensorConfigData(
                name=str(item["name"]),
                sensor_type=_parse_enum(SensorType, item.get("type", "DOOR"), "sensor type"),
                active=bool(item.get("active", False)),
            )
        )

    # ---- classifier ----
    c = raw.get("classifier") or {}
    kind = str(c.get("kind", "fake")).lower()
    if kind not in CLASSIFIER_KINDS:
        raise ValueError(f"Invalid classifier kind {kind!r}; expected one of: {', '.join(CLASSIFIER_KINDS)}")
    detection_rate = float(c.get("detection_rate", 0.5))
    if not 0.0 <= detection_rate <= 1.0:
        raise ValueError(f"classifier.detection_rate must be within [0, 1], got {detection_rate}")
    seed = c.get("seed")
    classifier = ClassifierConfig(
        kind=kind,
        detection_rate=detection_rate,
        seed=None if seed is None else int(seed),
    )

    # ---- scanner ----
    s = raw.get("scanner") or {}
    scanner = ScannerConfig(
        max_queue=int(s.get("max_queue", 16)),
        poll_timeout_s=float(s.get("poll_timeout_s", 0.5)),
    )

    # ---- ui ----
    u = raw.get("ui") or {}
    ui = UiConfig(
        window_title=str(u.get("window_title", "Very Secure App")),
        refresh_ms=int(u.get("refresh_ms", 500)),
    )

    return AppConfig(
        logging=logging_cfg,
        arming_status=arming_status,
        sensors=sensors,
        classifier=classifier,
        scanner=scanner,
        ui=ui,
    )


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration from YAML.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If fields are invalid.
    """
    cfg_path = Path(path).expanduser().resolve() if path else _resolve_default_config_path()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    return parse_app_config(_read_yaml(cfg_path))
