"""Synthetic bowling-arm keypoints for pipeline testing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional

import numpy as np

from contracts import FrameSample, Keypoint, KeypointName

from .extractor import KeypointExtractor
from .sampling import sample_times


@dataclass(frozen=True)
class SimConfig:
    duration_s: float = 1.5
    width: int = 1280
    height: int = 720
    release_fraction: float = 0.55
    noise_px: float = 2.0
    score: float = 0.9
    seed: int = 7


def simulated_keypoints(
    t: float, config: SimConfig, rng: Optional[np.random.Generator] = None
) -> List[Keypoint]:
    """Wrist and elbow of a right-arm bowler at time ``t``.

    The bowler runs in toward the frame centre, then the arm rotates over the
    shoulder with the wrist highest around ``release_fraction`` of the clip.
    """
    progress = min(max(t / config.duration_s, 0.0), 1.0)
    shoulder_x = config.width * (0.2 + 0.3 * min(progress / config.release_fraction, 1.0))
    shoulder_y = config.height * 0.45
    # Arm angle sweeps from hanging down (pi/2) through overhead (-pi/2)
    phase = (progress - config.release_fraction) * 2.0 * math.pi
    arm_angle = -math.pi / 2.0 + phase
    forearm = config.height * 0.12
    upper_arm = config.height * 0.12

    elbow_x = shoulder_x + upper_arm * math.cos(arm_angle)
    elbow_y = shoulder_y + upper_arm * math.sin(arm_angle)
    wrist_x = elbow_x + forearm * math.cos(arm_angle)
    wrist_y = elbow_y + forearm * math.sin(arm_angle)

    if rng is not None and config.noise_px > 0:
        jitter = rng.normal(0.0, config.noise_px, size=4)
        elbow_x += jitter[0]
        elbow_y += jitter[1]
        wrist_x += jitter[2]
        wrist_y += jitter[3]

    return [
        Keypoint(KeypointName.RIGHT_SHOULDER.value, float(shoulder_x), float(shoulder_y), config.score),
        Keypoint(KeypointName.RIGHT_ELBOW.value, float(elbow_x), float(elbow_y), config.score),
        Keypoint(KeypointName.RIGHT_WRIST.value, float(wrist_x), float(wrist_y), config.score),
    ]


class SimulatedExtractor(KeypointExtractor):
    """Extractor whose "image" is the seek time returned by the frame reader."""

    def __init__(self, config: Optional[SimConfig] = None) -> None:
        self._config = config or SimConfig()
        self._rng = np.random.default_rng(self._config.seed)

    def estimate(self, image: Any) -> List[Keypoint]:
        return simulated_keypoints(float(image), self._config, self._rng)


def simulate_delivery(config: Optional[SimConfig] = None) -> List[FrameSample]:
    """Deterministic frame samples for a full synthetic delivery."""
    cfg = config or SimConfig()
    rng = np.random.default_rng(cfg.seed)
    return [
        FrameSample(
            timestamp=t,
            keypoints=tuple(simulated_keypoints(t, cfg, rng)),
            frame_width=cfg.width,
            frame_height=cfg.height,
        )
        for t in sample_times(cfg.duration_s)
    ]


__all__ = ["SimConfig", "SimulatedExtractor", "simulate_delivery", "simulated_keypoints"]
