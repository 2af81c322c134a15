"""Synthetic result for clips that produced no frame samples."""

from __future__ import annotations

from typing import Optional

from configs.settings import FallbackConfig
from contracts import (
    DeliveryPhase,
    DeliveryResult,
    DeliverySummary,
    FrameSnapshot,
    KeyMoments,
)


def fallback_result(config: Optional[FallbackConfig] = None) -> DeliveryResult:
    """Return the fixed single-frame delivery used when there is nothing to segment."""
    cfg = config or FallbackConfig()
    position = tuple(cfg.position)
    snapshot = FrameSnapshot(
        timestamp=0.0,
        phase=DeliveryPhase.RUN_UP,
        ball_position=position,
        seam_angle=cfg.seam_angle_deg,
        speed_kph=cfg.speed_kph,
        release_height=cfg.release_height_m,
        keypoints=(),
    )
    return DeliveryResult(
        frames=(snapshot,),
        trajectory=(position,),
        key_moments=KeyMoments(release_frame=0, pitch_frame=0, impact_frame=0),
        summary=DeliverySummary(
            release_speed_kph=cfg.speed_kph,
            seam_angle=cfg.seam_angle_deg,
            release_height=cfg.release_height_m,
            predicted_impact_meters=cfg.predicted_impact_m,
            runup_velocity_kph=cfg.runup_velocity_kph,
        ),
        diagnostics={"fallback": True, "frame_count": 0},
    )


__all__ = ["fallback_result"]
