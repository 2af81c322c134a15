"""Pose-to-ball kinematics: wrist mapping and seam estimation."""

from kinematics.keypoints import filter_by_confidence, first_present, index_keypoints
from kinematics.mapper import map_ball_position, project_to_image, select_wrist
from kinematics.observation import observe_frame
from kinematics.seam import estimate_seam_angle

__all__ = [
    "estimate_seam_angle",
    "filter_by_confidence",
    "first_present",
    "index_keypoints",
    "map_ball_position",
    "observe_frame",
    "project_to_image",
    "select_wrist",
]
