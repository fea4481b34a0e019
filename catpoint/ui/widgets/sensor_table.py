from __future__ import annotations

from typing import List, Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from catpoint.domain.models import SensorType
from catpoint.ui.adapters.store_snapshots import SensorRow
from catpoint.ui.theme import COLOR_OK, COLOR_WARN

SensorSelection = Tuple[str, SensorType]


class SensorTable(QFrame):
    """
    Table of all sensors (name, type, status) with add/toggle/remove controls.

    The widget never touches the controller itself; it emits:
    - ``add_requested(name, SensorType)``
    - ``toggle_requested(name, SensorType)``
    - ``remove_requested(name, SensorType)``
    """

    add_requested = Signal(str, object)
    toggle_requested = Signal(str, object)
    remove_requested = Signal(str, object)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")

        title = QLabel("Sensor Management")
        title.setObjectName("PanelTitle")

        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Sensor", "Type", "Status"])
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setSelectionMode(QTableWidget.SingleSelection)

        self._toggle_btn = QPushButton("Activate / Deactivate")
        self._toggle_btn.clicked.connect(lambda: self._emit_for_selection(self.toggle_requested))
        self._remove_btn = QPushButton("Remove Sensor")
        self._remove_btn.setObjectName("DangerButton")
        self._remove_btn.clicked.connect(lambda: self._emit_for_selection(self.remove_requested))

        actions = QHBoxLayout()
        actions.addWidget(self._toggle_btn)
        actions.addWidget(self._remove_btn)
        actions.addStretch(1)

        self._name_edit = QLineEdit()
        self._name_edit.setPlaceholderText("Sensor name")
        self._type_combo = QComboBox()
        for t in SensorType:
            self._type_combo.addItem(t.value, t)
        self._add_btn = QPushButton("Add New Sensor")
        self._add_btn.clicked.connect(self._on_add_clicked)

        add_row = QHBoxLayout()
        add_row.addWidget(self._name_edit, 1)
        add_row.addWidget(self._type_combo)
        add_row.addWidget(self._add_btn)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        layout.addWidget(title)
        layout.addWidget(self.table)
        layout.addLayout(actions)
        layout.addLayout(add_row)

    def set_rows(self, rows: List[SensorRow]) -> None:
        selected = self.selected_sensor()
        self.table.setRowCount(len(rows))

        for i, (name, sensor_type, status) in enumerate(rows):
            self._set_item(i, 0, name)
            self._set_item(i, 1, sensor_type)
            self._set_item(i, 2, status, status=True)
            if selected is not None and selected == (name, SensorType(sensor_type)):
                self.table.selectRow(i)

        self.table.resizeColumnsToContents()

    def selected_sensor(self) -> Optional[SensorSelection]:
        row = self.table.currentRow()
        if row < 0:
            return None
        name_item = self.table.item(row, 0)
        type_item = self.table.item(row, 1)
        if name_item is None or type_item is None:
            return None
        return name_item.text(), SensorType(type_item.text())

    def _emit_for_selection(self, signal) -> None:
        selected = self.selected_sensor()
        if selected is not None:
            signal.emit(*selected)

    def _on_add_clicked(self) -> None:
        name = self._name_edit.text().strip()
        if not name:
            return
        self.add_requested.emit(name, self._type_combo.currentData())
        self._name_edit.clear()

    def _set_item(self, row: int, col: int, text: str, status: bool = False) -> None:
        item = QTableWidgetItem(text)
        item.setFlags(item.flags() & ~Qt.ItemIsEditable)

        if status:
            item.setTextAlignment(Qt.AlignCenter)
            item.setForeground(Qt.white)
            color = COLOR_WARN if text == "Active" else COLOR_OK
            item.setBackground(QBrush(QColor(color)))

        self.table.setItem(row, col, item)
