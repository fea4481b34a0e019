from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from catpoint.domain.models import AlarmStatus


class QtStatusListener(QObject):
    """
    StatusListener that re-emits controller notifications as Qt signals.

    The controller calls listeners on whichever thread drove it (the GUI
    thread for button clicks, the image scan worker for camera images).
    Qt delivers cross-thread signals through the receiver's event loop, so
    widgets connected here are only ever touched on the GUI thread.
    """

    alarm_status_changed = Signal(object)
    cat_detected = Signal(bool)

    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        self.alarm_status_changed.emit(status)

    def on_cat_detected(self, cat_detected: bool) -> None:
        self.cat_detected.emit(cat_detected)
