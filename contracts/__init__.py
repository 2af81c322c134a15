"""Shared data contracts for delivery analysis."""

from .types import (
    DeliveryPhase,
    DeliveryResult,
    DeliverySummary,
    FrameObservation,
    FrameSample,
    FrameSnapshot,
    KeyMoments,
    Keypoint,
    KeypointName,
    Vec3,
)

__all__ = [
    "DeliveryPhase",
    "DeliveryResult",
    "DeliverySummary",
    "FrameObservation",
    "FrameSample",
    "FrameSnapshot",
    "KeyMoments",
    "Keypoint",
    "KeypointName",
    "Vec3",
]
