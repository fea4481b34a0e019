from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class FakeImageClassifier:
    """
    Stand-in classification backend that answers at random.

    Useful for demos and manual testing of the desktop panel when no real
    recognition backend is available. The image content is ignored.

    Parameters
    ----------
    detection_rate
        Probability (0..1) that an image is reported as containing a cat.
    seed
        Optional seed for reproducible answers.
    """

    detection_rate: float = 0.5
    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.detection_rate <= 1.0:
            raise ValueError(f"detection_rate must be within [0, 1], got {self.detection_rate}")
        self._rng = random.Random(self.seed)

    def contains_target(self, image: Any, confidence_threshold: float) -> bool:
        found = self._rng.random() < self.detection_rate
        logger.debug("Fake classification (threshold=%.1f%%): %s", confidence_threshold, found)
        return found
