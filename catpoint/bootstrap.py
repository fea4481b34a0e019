from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from catpoint.core.config.yaml_config import AppConfig, load_app_config
from catpoint.core.state_store import InMemoryStateStore
from catpoint.imaging.base import ImageClassifier
from catpoint.imaging.fake_classifier import FakeImageClassifier
from catpoint.imaging.label_classifier import LabelImageClassifier
from catpoint.runtime.image_scan_thread import ImageScanWorkerThread
from catpoint.services.controller import AlarmController


@dataclass(frozen=True)
class AppWiring:
    """Everything the UI layer needs to run the system."""
    config: AppConfig
    store: InMemoryStateStore
    controller: AlarmController
    scanner: ImageScanWorkerThread


def build_classifier(cfg: AppConfig) -> ImageClassifier:
    if cfg.classifier.kind == "fake":
        return FakeImageClassifier(detection_rate=cfg.classifier.detection_rate, seed=cfg.classifier.seed)

    # "none": no backend wired, every image reports no cat.
    return LabelImageClassifier(detector=None)


def build_store(cfg: AppConfig) -> InMemoryStateStore:
    store = InMemoryStateStore()
    store.set_arming_status(cfg.arming_status)
    for sensor_cfg in cfg.sensors:
        store.add_sensor(sensor_cfg.to_sensor())
    return store


def build_app_system(config_path: Optional[str] = None, config: Optional[AppConfig] = None) -> AppWiring:
    cfg = config or load_app_config(config_path)

    # --- STATE ---
    store = build_store(cfg)

    # --- CONTROLLER ---
    controller = AlarmController(store=store, classifier=build_classifier(cfg))

    # --- RUNTIME ---
    scanner = ImageScanWorkerThread(
        controller=controller,
        max_queue=cfg.scanner.max_queue,
        poll_timeout_s=cfg.scanner.poll_timeout_s,
    )

    return AppWiring(config=cfg, store=store, controller=controller, scanner=scanner)
