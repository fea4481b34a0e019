from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QFileDialog, QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from catpoint.ui.theme import COLOR_CRIT, COLOR_TEXT_MUTED


class ImagePanel(QFrame):
    """
    Camera feed panel: shows the current image and asks for a scan.

    "Refresh Camera" loads an image file from disk; "Scan Picture" emits
    ``scan_requested(bytes)`` with the raw file content.
    """

    scan_requested = Signal(bytes)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")
        self._image: Optional[bytes] = None

        title = QLabel("Camera Feed")
        title.setObjectName("PanelTitle")

        self._header = QLabel("No image loaded")
        self._header.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-weight: 600;")

        self._picture = QLabel()
        self._picture.setObjectName("CameraView")
        self._picture.setMinimumSize(300, 225)
        self._picture.setAlignment(Qt.AlignCenter)

        self._refresh_btn = QPushButton("Refresh Camera")
        self._refresh_btn.clicked.connect(self._on_refresh_clicked)
        self._scan_btn = QPushButton("Scan Picture")
        self._scan_btn.clicked.connect(self._on_scan_clicked)

        buttons = QHBoxLayout()
        buttons.addWidget(self._refresh_btn)
        buttons.addWidget(self._scan_btn)
        buttons.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        layout.addWidget(title)
        layout.addWidget(self._header)
        layout.addWidget(self._picture, 1)
        layout.addLayout(buttons)

    def set_cat_detected(self, cat: bool) -> None:
        if cat:
            self._header.setText("DANGER - CAT DETECTED")
            self._header.setStyleSheet(f"color: {COLOR_CRIT}; font-weight: 700;")
        else:
            self._header.setText("Camera clear - no cats")
            self._header.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-weight: 600;")

    def _on_refresh_clicked(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Select Picture", "", "Images (*.png *.jpg *.jpeg *.bmp)")
        if not path:
            return

        self._image = Path(path).read_bytes()
        pixmap = QPixmap()
        pixmap.loadFromData(self._image)
        self._picture.setPixmap(
            pixmap.scaled(self._picture.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )
        self._header.setText(Path(path).name)
        self._header.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-weight: 600;")

    def _on_scan_clicked(self) -> None:
        if self._image is not None:
            self.scan_requested.emit(self._image)
