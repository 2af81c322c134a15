"""Reduce a segmented delivery to its telemetry summary."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from configs.settings import SegmentationConfig, TelemetryConfig
from contracts import DeliverySummary, FrameSnapshot, KeyMoments


def _or_default(value: Optional[float], default: float) -> float:
    # Zero, missing and NaN all mean "no usable measurement"
    if value is None or value == 0 or math.isnan(value):
        return default
    return value


def aggregate_summary(
    frames: Sequence[FrameSnapshot],
    key_moments: KeyMoments,
    config: Optional[TelemetryConfig] = None,
    pitch_length_m: float = SegmentationConfig.pitch_length_m,
) -> DeliverySummary:
    """Compute release pace, run-up pace, seam angle, release height and impact distance.

    Args:
        frames: Segmented snapshots with smoothed speed and seam series
        key_moments: Release/pitch/impact indices into ``frames``
        config: Defaults used when a measurement is zero or missing
        pitch_length_m: Distance used for the predicted impact point

    Returns:
        DeliverySummary
    """
    cfg = config or TelemetryConfig()
    release = frames[key_moments.release_frame]
    runup = frames[int(math.floor(key_moments.release_frame * 0.5))]
    impact = frames[key_moments.impact_frame]

    release_height = release.release_height
    if release_height is None:
        release_height = cfg.default_release_height_m

    return DeliverySummary(
        release_speed_kph=_or_default(release.speed_kph, cfg.default_release_speed_kph),
        seam_angle=_or_default(release.seam_angle, cfg.default_seam_angle_deg),
        release_height=release_height,
        predicted_impact_meters=max(0.0, pitch_length_m - impact.ball_position[2]),
        runup_velocity_kph=_or_default(runup.speed_kph, cfg.default_runup_velocity_kph),
    )


__all__ = ["aggregate_summary"]
