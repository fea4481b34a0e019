"""
Unit tests for catpoint.runtime.image_scan_thread.ImageScanWorkerThread.

Validates:
- submitted images reach controller.process_image in order
- a full queue drops new images instead of blocking
- an exception while processing does not kill the worker
- stop() ends the thread

A fake controller is used; no classifier or UI is involved.
"""

from __future__ import annotations

import threading
from typing import Any, List, cast

from catpoint.runtime.image_scan_thread import ImageScanWorkerThread
from catpoint.services.controller import AlarmController


class FakeController:
    """Records processed images; raises for images equal to ``b"boom"``."""

    def __init__(self) -> None:
        self.images: List[Any] = []
        self.done = threading.Event()
        self.expected = 0

    def process_image(self, image: Any) -> None:
        if image == b"boom":
            raise RuntimeError("classifier exploded")
        self.images.append(image)
        if len(self.images) >= self.expected:
            self.done.set()


def test_worker_processes_images_in_order() -> None:
    controller = FakeController()
    controller.expected = 3
    worker = ImageScanWorkerThread(cast(AlarmController, controller), poll_timeout_s=0.05)
    worker.start()

    for img in (b"1", b"2", b"3"):
        assert worker.submit(img) is True

    assert controller.done.wait(2.0)
    worker.stop()
    worker.join(2.0)

    assert controller.images == [b"1", b"2", b"3"]
    assert not worker.is_alive()


def test_worker_survives_processing_error() -> None:
    controller = FakeController()
    controller.expected = 1
    worker = ImageScanWorkerThread(cast(AlarmController, controller), poll_timeout_s=0.05)
    worker.start()

    worker.submit(b"boom")
    worker.submit(b"ok")

    assert controller.done.wait(2.0)
    worker.stop()
    worker.join(2.0)

    assert controller.images == [b"ok"]


def test_submit_drops_when_queue_full() -> None:
    """
    Without a running thread nothing drains the queue, so the bound is hit.
    """
    worker = ImageScanWorkerThread(cast(AlarmController, FakeController()), max_queue=2)

    assert worker.submit(b"1") is True
    assert worker.submit(b"2") is True
    assert worker.submit(b"3") is False
    assert worker.pending() == 2


def test_shared_stop_event_stops_worker() -> None:
    stop = threading.Event()
    worker = ImageScanWorkerThread(cast(AlarmController, FakeController()), poll_timeout_s=0.05, stop_event=stop)
    worker.start()

    stop.set()
    worker.join(2.0)

    assert not worker.is_alive()
