from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel

from catpoint.domain.models import AlarmStatus
from catpoint.ui.adapters.store_snapshots import alarm_level
from catpoint.ui.theme import COLOR_OK, COLOR_WARN, COLOR_CRIT, COLOR_TEXT_MUTED


class StatusIndicator(QFrame):
    """
    Alarm status widget: colored dot + status description.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")

        title = QLabel("System Status:")
        title.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-weight: 600;")
        self._dot = QLabel("●")
        self._dot.setStyleSheet(f"color: {COLOR_OK}; font-size: 16px;")
        self._text = QLabel(AlarmStatus.NO_ALARM.description)
        self._text.setStyleSheet("font-size: 16px; font-weight: 700;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.addWidget(title, 0, Qt.AlignVCenter)
        layout.addWidget(self._dot, 0, Qt.AlignVCenter)
        layout.addWidget(self._text, 0, Qt.AlignVCenter)
        layout.addStretch(1)

    def set_status(self, status: AlarmStatus) -> None:
        level = alarm_level(status)
        color = COLOR_OK
        if level == "WARNING":
            color = COLOR_WARN
        elif level == "CRITICAL":
            color = COLOR_CRIT

        self._dot.setStyleSheet(f"color: {color}; font-size: 16px;")
        self._text.setText(status.description)
