"""
Alarm controller.

This module contains the rules engine of the security system. It receives
three kinds of events:
- arming mode changes (from the user)
- sensor activation changes (from sensors / the user)
- camera images (classified for cats by an `ImageClassifier`)

and turns them into alarm status transitions, written to a `StateStore` and
broadcast to registered `StatusListener` objects.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Set

from catpoint.core.state_store import StateStore
from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor
from catpoint.imaging.base import ImageClassifier
from catpoint.services.listeners import StatusListener

logger = logging.getLogger(__name__)

# Minimum classifier confidence (percent) for a cat to count as detected.
CAT_CONFIDENCE_THRESHOLD = 50.0


@dataclass
class AlarmController:
    """
    Decide the alarm status from arming mode, sensors and cat detection.

    Responsibilities
    ----------------
    - Forward arming/alarm/sensor updates to the `StateStore`.
    - Apply the escalation rules (NO_ALARM -> PENDING_ALARM -> ALARM and back).
    - Remember whether the last camera image contained a cat.
    - Notify listeners synchronously on every alarm status write and every
      processed image.

    Concurrency Model
    -----------------
    Every public operation runs under one re-entrant lock per controller, so
    rule evaluation, the listener set and ``cat_detected`` stay consistent
    when the GUI thread and the image scan worker call in concurrently.
    Listeners run inside the lock and may call back into the controller.

    Parameters
    ----------
    store
        Repository holding arming mode, alarm status and sensors.
    classifier
        Backend answering "does this image contain a cat".
    """

    store: StateStore
    classifier: ImageClassifier

    _listeners: Set[StatusListener] = field(default_factory=set, init=False, repr=False)
    _cat_detected: bool = field(default=False, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    @property
    def cat_detected(self) -> bool:
        """Whether the last processed image contained a cat (reset on disarm)."""
        with self._lock:
            return self._cat_detected

    # --- Arming ---
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """
        Change the arming mode.

        Disarming clears the alarm and forgets any detected cat. Arming
        resets every active sensor, and arming at home while a cat is in view
        raises the alarm straight away.

        Parameters
        ----------
        arming_status
            New arming mode. Persisted last, whichever branch ran.
        """
        with self._lock:
            logger.info("Arming status -> %s", arming_status.value)

            if arming_status is ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
                self._cat_detected = False
            else:
                for sensor in self.store.get_sensors():
                    if sensor.active:
                        sensor.active = False
                        self.store.update_sensor(sensor)

                if arming_status is ArmingStatus.ARMED_HOME and self._cat_detected:
                    self.set_alarm_status(AlarmStatus.ALARM)

            self.store.set_arming_status(arming_status)

    # --- Images ---
    def process_image(self, image: Any) -> None:
        """
        Classify a camera image and update the alarm status accordingly.

        Parameters
        ----------
        image
            Camera frame handed to the classifier as-is.
        """
        cat = self.classifier.contains_target(image, CAT_CONFIDENCE_THRESHOLD)
        self._on_cat_detection(bool(cat))

    def _on_cat_detection(self, cat: bool) -> None:
        with self._lock:
            self._cat_detected = cat
            logger.debug("Cat detected: %s", cat)

            if cat and self.store.get_arming_status() is ArmingStatus.ARMED_HOME:
                self.set_alarm_status(AlarmStatus.ALARM)
            elif not cat and not self._any_sensor_active():
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            # A cat while disarmed or armed-away changes nothing.

            for listener in list(self._listeners):
                listener.on_cat_detected(cat)

    # --- Sensors ---
    def change_sensor_activation(self, sensor: Sensor, active: bool) -> None:
        """
        Change a sensor's activation and update the alarm status if needed.

        Rules are evaluated against the alarm status and sensor state captured
        before the sensor is touched.

        Parameters
        ----------
        sensor
            A sensor known to the store.
        active
            Desired activation state.
        """
        with self._lock:
            previous_status = self.store.get_alarm_status()
            was_active = sensor.active

            if not was_active and active:
                self._on_sensor_activated()
            elif was_active and not active:
                self._on_sensor_deactivated()
            elif was_active and active:
                if previous_status is AlarmStatus.PENDING_ALARM:
                    self.set_alarm_status(AlarmStatus.ALARM)
            # inactive -> inactive: nothing to handle

            sensor.active = active
            self.store.update_sensor(sensor)

            # Also covers redundant deactivations of an already inactive sensor.
            if previous_status is AlarmStatus.PENDING_ALARM and not active and not self._any_sensor_active():
                self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _on_sensor_activated(self) -> None:
        if self.store.get_arming_status() is ArmingStatus.DISARMED:
            return

        status = self.store.get_alarm_status()
        if status is AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif status is AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)
        else:
            logger.debug("Sensor activated while %s; no change", status.value)

    def _on_sensor_deactivated(self) -> None:
        status = self.store.get_alarm_status()
        if status is AlarmStatus.PENDING_ALARM:
            if not self._any_sensor_active():
                self.set_alarm_status(AlarmStatus.NO_ALARM)
        elif status is AlarmStatus.ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        else:
            logger.debug("Sensor deactivated while %s; no change", status.value)

    def _any_sensor_active(self) -> bool:
        return any(s.active for s in self.store.get_sensors())

    # --- Alarm status ---
    def set_alarm_status(self, status: AlarmStatus) -> None:
        """
        Persist an alarm status and notify every listener.

        Parameters
        ----------
        status
            New alarm status. Written even if unchanged.
        """
        with self._lock:
            self.store.set_alarm_status(status)
            logger.info("Alarm status -> %s", status.value)
            for listener in list(self._listeners):
                listener.on_alarm_status_changed(status)

    # --- Listeners ---
    def add_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners.discard(listener)

    # --- Pass-throughs ---
    def get_alarm_status(self) -> AlarmStatus:
        return self.store.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self.store.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self.store.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        self.store.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self.store.remove_sensor(sensor)
