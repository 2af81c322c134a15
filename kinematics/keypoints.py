"""Keypoint lookup and confidence filtering."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

from contracts import Keypoint, KeypointName

KeypointIndex = Dict[KeypointName, Keypoint]


def index_keypoints(keypoints: Iterable[Keypoint]) -> KeypointIndex:
    """Map known landmarks to their keypoint; the first occurrence of a name wins."""
    index: KeypointIndex = {}
    for kp in keypoints:
        landmark = kp.landmark
        if landmark is None or landmark in index:
            continue
        index[landmark] = kp
    return index


def first_present(index: KeypointIndex, *names: KeypointName) -> Optional[Keypoint]:
    """Return the keypoint for the first of ``names`` present in ``index``."""
    for name in names:
        kp = index.get(name)
        if kp is not None:
            return kp
    return None


def filter_by_confidence(
    keypoints: Sequence[Keypoint], min_score: float
) -> Tuple[Keypoint, ...]:
    """Keep keypoints whose score is strictly above ``min_score``.

    A missing score counts as zero confidence.
    """
    output = []
    for kp in keypoints:
        score = kp.score if kp.score is not None else 0.0
        if score > min_score:
            output.append(kp)
    return tuple(output)


__all__ = ["KeypointIndex", "filter_by_confidence", "first_present", "index_keypoints"]
