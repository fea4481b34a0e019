from __future__ import annotations

from typing import Protocol

from catpoint.domain.models import AlarmStatus


class StatusListener(Protocol):
    """
    Protocol interface for alarm controller observers.

    Any object providing both hooks can be registered with
    `AlarmController.add_status_listener`. This keeps the presentation layer
    (GUI panels, loggers, test recorders) decoupled from the rules engine.

    Methods
    -------
    on_alarm_status_changed(status)
        Called after the alarm status has been written to the store.
    on_cat_detected(cat_detected)
        Called once for every processed camera image.
    """

    def on_alarm_status_changed(self, status: AlarmStatus) -> None:
        """
        React to an alarm status update.

        Parameters
        ----------
        status
            The alarm status just persisted.
        """
        ...

    def on_cat_detected(self, cat_detected: bool) -> None:
        """
        React to an image classification result.

        Parameters
        ----------
        cat_detected
            True if the last processed image contained a cat.
        """
        ...
