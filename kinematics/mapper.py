"""Map a frame's pose keypoints onto a normalized ball position."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from configs.settings import KinematicsConfig
from contracts import Keypoint, KeypointName, Vec3
from kinematics.keypoints import first_present, index_keypoints


def select_wrist(keypoints: Sequence[Keypoint]) -> Optional[Keypoint]:
    """Pick the bowling-hand proxy: right wrist, left wrist, then any keypoint."""
    index = index_keypoints(keypoints)
    wrist = first_present(index, KeypointName.RIGHT_WRIST, KeypointName.LEFT_WRIST)
    if wrist is not None:
        return wrist
    if keypoints:
        return keypoints[0]
    return None


def map_ball_position(
    width: float,
    height: float,
    keypoints: Sequence[Keypoint],
    config: Optional[KinematicsConfig] = None,
) -> Vec3:
    """Convert one frame's keypoints into (lateral, vertical, depth) metres.

    Depth is always 0 here; the segmenter assigns it from temporal position.
    """
    cfg = config or KinematicsConfig()
    wrist = select_wrist(keypoints)
    if wrist is None:
        return cfg.default_position

    px = wrist.x if wrist.x is not None else width / 2.0
    py = wrist.y if wrist.y is not None else height * cfg.missing_y_fraction

    normalized_x = px / width - 0.5
    normalized_y = 1.0 - py / height

    lateral = normalized_x * cfg.lateral_scale_m
    vertical = max(cfg.min_height_m, normalized_y * cfg.vertical_scale_m)
    return (lateral, vertical, 0.0)


def project_to_image(
    position: Vec3,
    width: float,
    height: float,
    config: Optional[KinematicsConfig] = None,
) -> Tuple[float, float]:
    """Project a ball position back into pixel coordinates for overlays.

    Inverse of the lateral/vertical mapping; the height floor is not undone.
    """
    cfg = config or KinematicsConfig()
    u = (position[0] / cfg.lateral_scale_m + 0.5) * width
    v = (1.0 - position[1] / cfg.vertical_scale_m) * height
    return (u, v)


__all__ = ["map_ball_position", "project_to_image", "select_wrist"]
