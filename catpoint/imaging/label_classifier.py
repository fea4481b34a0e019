from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from catpoint.imaging.base import Label, LabelDetector

logger = logging.getLogger(__name__)


def format_labels(labels: List[Label]) -> str:
    """
    Render detected labels as ``Name(NN.N%)`` joined by commas.

    Parameters
    ----------
    labels
        ``(label, confidence)`` pairs.

    Returns
    -------
    str
        Human-readable summary used in log lines.
    """
    return ", ".join(f"{name}({confidence:.1f}%)" for name, confidence in labels)


@dataclass
class LabelImageClassifier:
    """
    Image classifier built on a generic label-detection backend.

    The detector returns every label it recognises with a confidence score;
    this adapter decides whether any of them names the target object.

    Failure Policy
    --------------
    The alarm controller must never see a backend failure. This adapter
    answers ``False`` when:
    - no detector is configured
    - the image is empty
    - the detector raises or returns malformed labels

    Parameters
    ----------
    detector
        Label detection backend. ``None`` means "unconfigured".
    target
        Case-insensitive word a label must contain to count as a match.
    """

    detector: Optional[LabelDetector] = None
    target: str = "cat"

    def contains_target(self, image: Any, confidence_threshold: float) -> bool:
        if self.detector is None:
            logger.error("Label detector not configured; reporting no %s", self.target)
            return False

        # Array frames have no usable truth value, so only bytes are checked for emptiness.
        if image is None or (isinstance(image, (bytes, bytearray)) and not image):
            logger.error("Empty image; reporting no %s", self.target)
            return False

        target = self.target.lower()
        try:
            labels = [(str(name), float(confidence)) for name, confidence in self.detector(image, confidence_threshold)]
            logger.info(format_labels(labels))
            return any(
                target in name.lower() and confidence >= confidence_threshold
                for name, confidence in labels
            )
        except Exception:
            logger.error("Label detection failed", exc_info=True)
            return False
