from __future__ import annotations

import logging
import threading
from queue import Empty, Full, Queue
from typing import Any, Optional

from catpoint.services.controller import AlarmController

logger = logging.getLogger(__name__)


class ImageScanWorkerThread:
    """
    Worker thread for image classification.

    Responsibilities
    ----------------
    - Accept camera images from any thread via :meth:`submit`.
    - Feed them one at a time to `AlarmController.process_image(...)`, which:
      - asks the classifier whether the image contains a cat
      - updates the alarm status
      - notifies status listeners

    Concurrency Model
    -----------------
    - The thread polls the queue with a timeout to remain responsive to stop signals.
    - Exceptions raised while processing an image are logged and do not kill the thread.
    - If the queue is full, new images are dropped so callers never block.

    Parameters
    ----------
    controller
        Alarm controller that processes images.
    max_queue
        Maximum number of images waiting to be scanned.
    poll_timeout_s
        Queue poll timeout used to check the stop signal.
    stop_event
        Optional shared stop signal. A private one is created if omitted.
    """

    def __init__(
        self,
        controller: AlarmController,
        max_queue: int = 16,
        poll_timeout_s: float = 0.5,
        stop_event: Optional[threading.Event] = None,
    ):
        self._controller = controller
        self._q: "Queue[Any]" = Queue(maxsize=max_queue)
        self._poll_timeout_s = poll_timeout_s
        self._stop = stop_event or threading.Event()
        self._thread = threading.Thread(target=self._run, name="image-scan-worker", daemon=True)

    def start(self) -> None:
        """
        Start the worker thread if it is not already running.
        """
        if not self._thread.is_alive():
            self._thread.start()

    def stop(self) -> None:
        """
        Signal the worker thread to stop.
        """
        self._stop.set()

    def join(self, timeout: float | None = 2.0) -> None:
        """
        Join the worker thread.

        Parameters
        ----------
        timeout
            Maximum time to wait for the thread to exit.
        """
        self._thread.join(timeout=timeout)

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def submit(self, image: Any) -> bool:
        """
        Queue an image for scanning (non-blocking).

        Parameters
        ----------
        image
            Camera image passed unchanged to the controller.

        Returns
        -------
        bool
            True if queued, False if dropped because the queue is full.
        """
        try:
            self._q.put_nowait(image)
        except Full:
            logger.warning("Image scan queue full; dropping image")
            return False
        return True

    def pending(self) -> int:
        return self._q.qsize()

    def _run(self) -> None:
        """
        Worker loop that consumes images and delegates processing to the controller.
        """
        while not self._stop.is_set():
            try:
                image = self._q.get(timeout=self._poll_timeout_s)
            except Empty:
                continue

            try:
                self._controller.process_image(image)
            except Exception:
                logger.exception("process_image failed")
            finally:
                self._q.task_done()
