from __future__ import annotations

from typing import Dict

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QButtonGroup, QFrame, QHBoxLayout, QLabel, QPushButton

from catpoint.domain.models import ArmingStatus


class ControlPanel(QFrame):
    """
    Row of mutually exclusive arming buttons.

    Emits ``arming_requested(ArmingStatus)`` when the user picks a mode; the
    owner forwards it to the controller and calls :meth:`set_arming` back.
    """

    arming_requested = Signal(object)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")

        title = QLabel("System Control")
        title.setObjectName("PanelTitle")

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: Dict[ArmingStatus, QPushButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.addWidget(title)

        for status in ArmingStatus:
            btn = QPushButton(status.description)
            btn.setObjectName("ArmButton")
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, s=status: self.arming_requested.emit(s))
            self._group.addButton(btn)
            self._buttons[status] = btn
            layout.addWidget(btn)

        layout.addStretch(1)

    def set_arming(self, status: ArmingStatus) -> None:
        self._buttons[status].setChecked(True)
