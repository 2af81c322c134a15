"""Per-frame kinematic observation built from a frame sample."""

from __future__ import annotations

from typing import Optional

from configs.settings import KinematicsConfig
from contracts import FrameObservation, FrameSample
from kinematics.keypoints import filter_by_confidence
from kinematics.mapper import map_ball_position
from kinematics.seam import estimate_seam_angle


def observe_frame(
    sample: FrameSample, config: Optional[KinematicsConfig] = None
) -> FrameObservation:
    """Run the kinematic mapper and seam estimator on one sample.

    The ball position uses every keypoint the extractor returned; the seam
    angle and the retained keypoints only use confident ones.
    """
    cfg = config or KinematicsConfig()
    retained = filter_by_confidence(sample.keypoints, cfg.keypoint_min_score)
    position = map_ball_position(
        sample.frame_width, sample.frame_height, sample.keypoints, cfg
    )
    return FrameObservation(
        timestamp=sample.timestamp,
        ball_position=position,
        seam_angle=estimate_seam_angle(retained, cfg.default_seam_angle_deg),
        keypoints=retained,
    )


__all__ = ["observe_frame"]
