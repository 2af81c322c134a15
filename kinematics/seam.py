"""Seam orientation proxy from the bowling forearm."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from contracts import Keypoint, KeypointName
from kinematics.keypoints import first_present, index_keypoints

DEFAULT_SEAM_ANGLE_DEG = 12.0


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties toward positive infinity."""
    scale = 10.0 ** digits
    return math.floor(value * scale + 0.5) / scale


def estimate_seam_angle(
    keypoints: Sequence[Keypoint],
    default_deg: float = DEFAULT_SEAM_ANGLE_DEG,
) -> float:
    """Angle of the elbow->wrist vector in degrees, one decimal place.

    ``keypoints`` should already be confidence filtered. The raw image-space
    angle is returned in [-180, 180] without any seam-relative normalization.
    """
    index = index_keypoints(keypoints)
    wrist: Optional[Keypoint] = first_present(
        index, KeypointName.RIGHT_WRIST, KeypointName.LEFT_WRIST
    )
    elbow: Optional[Keypoint] = first_present(
        index, KeypointName.RIGHT_ELBOW, KeypointName.LEFT_ELBOW
    )
    if wrist is None or elbow is None:
        return default_deg
    if not (wrist.has_coordinates and elbow.has_coordinates):
        return default_deg

    dx = wrist.x - elbow.x
    dy = wrist.y - elbow.y
    angle = math.degrees(math.atan2(dy, dx))
    return round_half_up(angle, 1)


__all__ = ["DEFAULT_SEAM_ANGLE_DEG", "estimate_seam_angle", "round_half_up"]
