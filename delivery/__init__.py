"""Delivery segmentation package."""

from delivery.fallback import fallback_result
from delivery.segmenter import (
    assign_depths,
    compute_speeds,
    derive_key_moments,
    detect_release_frame,
    label_phases,
    segment,
    segment_observations,
)
from delivery.smoothing import smooth_series
from delivery.timeline import delivery_timeline, nearest_frame_index, phase_spans

__all__ = [
    "assign_depths",
    "compute_speeds",
    "delivery_timeline",
    "derive_key_moments",
    "detect_release_frame",
    "fallback_result",
    "label_phases",
    "nearest_frame_index",
    "phase_spans",
    "segment",
    "segment_observations",
    "smooth_series",
]
