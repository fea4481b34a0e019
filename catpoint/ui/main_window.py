from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QSplitter, QVBoxLayout, QWidget

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint.runtime.image_scan_thread import ImageScanWorkerThread
from catpoint.services.controller import AlarmController
from catpoint.ui.adapters.qt_status_listener import QtStatusListener
from catpoint.ui.adapters.store_snapshots import sensor_rows
from catpoint.ui.widgets.control_panel import ControlPanel
from catpoint.ui.widgets.image_panel import ImagePanel
from catpoint.ui.widgets.sensor_table import SensorTable
from catpoint.ui.widgets.status_indicator import StatusIndicator

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Security panel window.
    - Top: alarm status + arming controls
    - Left: camera feed
    - Right: sensor management
    """

    def __init__(
        self,
        controller: AlarmController,
        scanner: ImageScanWorkerThread,
        title: str = "Very Secure App",
        refresh_ms: int = 500,
    ) -> None:
        super().__init__()
        self.setWindowTitle(title)
        self.resize(1100, 700)

        self.controller = controller
        self.scanner = scanner

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        # Top bar
        top = QHBoxLayout()
        self.status = StatusIndicator()
        self.controls = ControlPanel()
        top.addWidget(self.status, 1)
        top.addWidget(self.controls, 2)
        layout.addLayout(top)

        # Middle: camera + sensors (splitter)
        splitter = QSplitter()
        splitter.setChildrenCollapsible(False)

        self.image_panel = ImagePanel()
        self.sensor_table = SensorTable()

        splitter.addWidget(self.image_panel)
        splitter.addWidget(self.sensor_table)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        layout.addWidget(splitter, stretch=1)

        # Controller -> UI
        self.listener = QtStatusListener(self)
        self.listener.alarm_status_changed.connect(self._on_alarm_status_changed)
        self.listener.cat_detected.connect(self.image_panel.set_cat_detected)
        self.controller.add_status_listener(self.listener)

        # UI -> controller
        self.controls.arming_requested.connect(self._on_arming_requested)
        self.sensor_table.add_requested.connect(self._on_add_sensor)
        self.sensor_table.toggle_requested.connect(self._on_toggle_sensor)
        self.sensor_table.remove_requested.connect(self._on_remove_sensor)
        self.image_panel.scan_requested.connect(self._on_scan_requested)

        self.status.set_status(self.controller.get_alarm_status())
        self.controls.set_arming(self.controller.get_arming_status())

        # Sensor flags also change as a side effect of arming.
        self.timer = QTimer(self)
        self.timer.setInterval(refresh_ms)
        self.timer.timeout.connect(self.refresh_ui)
        self.timer.start()
        self.refresh_ui()

    def refresh_ui(self) -> None:
        self.sensor_table.set_rows(sensor_rows(self.controller.store))

    def closeEvent(self, event) -> None:
        self.timer.stop()
        self.controller.remove_status_listener(self.listener)
        super().closeEvent(event)

    def _find_sensor(self, name: str, sensor_type: SensorType) -> Optional[Sensor]:
        key = (name, sensor_type)
        for s in self.controller.get_sensors():
            if s.key == key:
                return s
        return None

    def _on_alarm_status_changed(self, status: AlarmStatus) -> None:
        self.status.set_status(status)

    def _on_arming_requested(self, status: ArmingStatus) -> None:
        self.controller.set_arming_status(status)
        self.controls.set_arming(self.controller.get_arming_status())
        self.refresh_ui()

    def _on_add_sensor(self, name: str, sensor_type: SensorType) -> None:
        self.controller.add_sensor(Sensor(name=name, sensor_type=sensor_type))
        self.refresh_ui()

    def _on_toggle_sensor(self, name: str, sensor_type: SensorType) -> None:
        sensor = self._find_sensor(name, sensor_type)
        if sensor is None:
            logger.warning("Sensor %s (%s) no longer exists", name, sensor_type.value)
            return
        self.controller.change_sensor_activation(sensor, not sensor.active)
        self.refresh_ui()

    def _on_remove_sensor(self, name: str, sensor_type: SensorType) -> None:
        sensor = self._find_sensor(name, sensor_type)
        if sensor is not None:
            self.controller.remove_sensor(sensor)
        self.refresh_ui()

    def _on_scan_requested(self, image: bytes) -> None:
        # A full queue drops the image; the scanner logs it.
        self.scanner.submit(image)
