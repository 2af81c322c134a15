"""Delivery segmentation: depth, speed, key moments and phase labels.

The reconstruction is heuristic. Frames are spread linearly along the pitch,
the release frame is the peak of smoothed speed searched from 40% of the clip
onward, and the pitch and impact frames sit at fixed proportional offsets
after release. None of this models ball flight.
"""

from __future__ import annotations

import math
import time
from typing import List, Optional, Sequence

import numpy as np

from configs.settings import AppConfig, SegmentationConfig, default_config
from contracts import (
    DeliveryPhase,
    DeliveryResult,
    FrameObservation,
    FrameSample,
    FrameSnapshot,
    KeyMoments,
    Vec3,
)
from delivery.fallback import fallback_result
from delivery.smoothing import smooth_series
from kinematics.observation import observe_frame
from log_config.logger import get_logger, log_performance
from metrics.telemetry import aggregate_summary

logger = get_logger(__name__)

MPS_TO_KPH = 3.6


def assign_depths(
    positions: Sequence[Vec3], pitch_length_m: float = SegmentationConfig.pitch_length_m
) -> List[Vec3]:
    """Place frame ``i`` of ``N`` at ``i / max(N - 1, 1)`` of the pitch length."""
    span = max(len(positions) - 1, 1)
    output: List[Vec3] = []
    for idx, (x, y, _z) in enumerate(positions):
        progress = idx / span
        output.append((x, y, progress * pitch_length_m))
    return output


def compute_speeds(
    positions: Sequence[Vec3],
    timestamps: Sequence[float],
    default_interval_s: float = SegmentationConfig.default_frame_interval_s,
) -> List[float]:
    """Instantaneous speed in whole km/h between consecutive positions.

    Frame 0 has speed 0. A zero or non-finite time step is replaced by
    ``default_interval_s``.
    """
    if not positions:
        return []
    pos = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    t = np.asarray(timestamps, dtype=np.float64)

    dt = np.diff(t)
    dt = np.where((dt == 0.0) | ~np.isfinite(dt), default_interval_s, dt)
    deltas = np.diff(pos, axis=0)
    distances = np.sqrt(np.sum(deltas * deltas, axis=1))
    meters_per_sec = distances / dt
    kph = np.floor(meters_per_sec * MPS_TO_KPH + 0.5)
    return [0.0] + [float(v) for v in kph]


def detect_release_frame(speeds: Sequence[float], search_start: float = 0.4) -> int:
    """Index of the running maximum of ``speeds``, seeded at ``floor(N * search_start)``.

    Every index is visited; the accumulator only moves on a strictly greater
    value, so ties keep the earliest index that reached the maximum.
    """
    n = len(speeds)
    if n == 0:
        return 0
    best = min(int(math.floor(n * search_start)), n - 1)
    for idx in range(n):
        if speeds[idx] > speeds[best]:
            best = idx
    return best


def derive_key_moments(
    release_frame: int,
    frame_count: int,
    pitch_offset_fraction: float = 0.25,
    impact_offset_fraction: float = 0.2,
) -> KeyMoments:
    last = max(frame_count - 1, 0)
    release = min(max(release_frame, 0), last)
    pitch = min(last, release + int(math.floor(frame_count * pitch_offset_fraction)))
    impact = min(last, pitch + int(math.floor(frame_count * impact_offset_fraction)))
    return KeyMoments(release_frame=release, pitch_frame=pitch, impact_frame=impact)


def label_phase(idx: int, key_moments: KeyMoments) -> DeliveryPhase:
    release = key_moments.release_frame
    if idx < release * 0.5:
        return DeliveryPhase.RUN_UP
    if idx < release:
        return DeliveryPhase.LOAD_UP
    if idx == release:
        return DeliveryPhase.RELEASE
    if idx <= key_moments.pitch_frame:
        return DeliveryPhase.PITCH
    if idx <= key_moments.impact_frame:
        return DeliveryPhase.IMPACT
    return DeliveryPhase.FOLLOW_THROUGH


def label_phases(frame_count: int, key_moments: KeyMoments) -> List[DeliveryPhase]:
    return [label_phase(idx, key_moments) for idx in range(frame_count)]


def segment_observations(
    observations: Sequence[FrameObservation],
    config: Optional[AppConfig] = None,
) -> DeliveryResult:
    """Segment per-frame observations into a full delivery result.

    Args:
        observations: Ordered per-frame observations
        config: Analysis constants (defaults when None)

    Returns:
        DeliveryResult with one snapshot and one trajectory point per observation
    """
    cfg = config or default_config()
    if not observations:
        logger.warning("No frames to segment, returning fallback delivery")
        return fallback_result(cfg.fallback)

    seg = cfg.segmentation
    n = len(observations)
    raw_positions = [obs.ball_position for obs in observations]
    positions = assign_depths(raw_positions, seg.pitch_length_m)
    speeds = compute_speeds(
        positions,
        [obs.timestamp for obs in observations],
        seg.default_frame_interval_s,
    )

    smoothed_speeds = smooth_series(speeds, cfg.smoothing.speed_alpha)
    seam_angles = smooth_series(
        [obs.seam_angle for obs in observations], cfg.smoothing.seam_alpha
    )

    release_frame = detect_release_frame(smoothed_speeds, seg.release_search_start)
    key_moments = derive_key_moments(
        release_frame, n, seg.pitch_offset_fraction, seg.impact_offset_fraction
    )
    phases = label_phases(n, key_moments)
    logger.debug(
        f"Segmented {n} frames: release={key_moments.release_frame} "
        f"pitch={key_moments.pitch_frame} impact={key_moments.impact_frame}"
    )

    frames = tuple(
        FrameSnapshot(
            timestamp=obs.timestamp,
            phase=phases[idx],
            ball_position=positions[idx],
            seam_angle=seam_angles[idx],
            speed_kph=smoothed_speeds[idx],
            release_height=raw_positions[idx][1],
            keypoints=obs.keypoints,
        )
        for idx, obs in enumerate(observations)
    )
    summary = aggregate_summary(frames, key_moments, cfg.telemetry, seg.pitch_length_m)

    return DeliveryResult(
        frames=frames,
        trajectory=tuple(positions),
        key_moments=key_moments,
        summary=summary,
        diagnostics={
            "fallback": False,
            "frame_count": n,
            "raw_speeds_kph": speeds,
        },
    )


def segment(
    frames: Sequence[FrameSample],
    config: Optional[AppConfig] = None,
) -> DeliveryResult:
    """Derive trajectory, phases, key moments and telemetry from frame samples.

    Empty input yields the fallback delivery. The computation is pure and
    deterministic for a given input and configuration.
    """
    cfg = config or default_config()
    start = time.perf_counter()
    observations = [observe_frame(sample, cfg.kinematics) for sample in frames]
    result = segment_observations(observations, cfg)
    log_performance(
        f"segment {len(observations)} frames", (time.perf_counter() - start) * 1000.0
    )
    return result


__all__ = [
    "assign_depths",
    "compute_speeds",
    "derive_key_moments",
    "detect_release_frame",
    "label_phase",
    "label_phases",
    "segment",
    "segment_observations",
]
