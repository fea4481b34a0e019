"""
Image classification contracts.

The alarm controller only needs one answer from a camera frame: does it
contain the target object (a cat)? Backends implementing
:class:`ImageClassifier` must never raise for backend trouble; an unreachable
or unconfigured backend answers ``False``.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Tuple

Label = Tuple[str, float]


class ImageClassifier(Protocol):
    """
    Protocol interface for "does this image contain the target" checks.

    Methods
    -------
    contains_target(image, confidence_threshold)
        Return True if the target object is found with at least the given
        confidence (percent, 0-100).
    """

    def contains_target(self, image: Any, confidence_threshold: float) -> bool:
        """
        Classify an image.

        Parameters
        ----------
        image
            Encoded image bytes (or any object the backend understands).
        confidence_threshold
            Minimum confidence, in percent, for a label to count.

        Returns
        -------
        bool
            True if the target is present; False otherwise or on failure.
        """
        ...


class LabelDetector(Protocol):
    """
    Protocol for label-detection backends wrapped by `LabelImageClassifier`.

    A detector returns ``(label, confidence_percent)`` pairs for an image.
    It may raise; the classifier converts failures into ``False``.
    """

    def __call__(self, image: Any, min_confidence: float) -> Iterable[Label]: ...
