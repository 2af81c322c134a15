"""Keypoint extractor abstraction for pose-estimation backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from contracts import Keypoint


class KeypointExtractor(ABC):
    """Pose estimator that returns the keypoints of the first detected person."""

    @abstractmethod
    def estimate(self, image: Any) -> List[Keypoint]:
        """Return keypoints for one frame, or an empty list if nobody is detected.

        Implementations raise ExtractorError when the model cannot run.
        """

    def close(self) -> None:
        """Release model resources."""
        return None


__all__ = ["KeypointExtractor"]
