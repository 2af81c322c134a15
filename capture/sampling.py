"""Clip sampling schedule and frame-sample collection."""

from __future__ import annotations

import math
from typing import Any, Callable, List, Optional

from configs.settings import SamplingConfig
from contracts import FrameSample
from exceptions import CaptureError, ExtractorError
from log_config.logger import get_logger

from .extractor import KeypointExtractor

logger = get_logger(__name__)

FrameReader = Callable[[float], Any]


def _clip_duration(duration_s: Optional[float], cfg: SamplingConfig) -> float:
    # Decoders report an unknown duration as None or NaN
    if duration_s is None or not math.isfinite(duration_s) or duration_s <= 0:
        return cfg.default_duration_s
    return duration_s


def sample_step(duration_s: float, config: Optional[SamplingConfig] = None) -> float:
    cfg = config or SamplingConfig()
    return max(duration_s / cfg.sample_frames, cfg.min_step_s)


def sample_times(
    duration_s: Optional[float], config: Optional[SamplingConfig] = None
) -> List[float]:
    """Timestamps at which the clip is sampled.

    The step is ``duration / sample_frames`` but never below ``min_step_s``.
    Times accumulate by repeated addition and include ``duration`` when reached.
    A missing, non-finite or non-positive duration uses ``default_duration_s``.
    """
    cfg = config or SamplingConfig()
    duration_s = _clip_duration(duration_s, cfg)
    step = sample_step(duration_s, cfg)
    times: List[float] = []
    t = 0.0
    while t <= duration_s:
        times.append(t)
        t += step
    return times


def seek_time(t: float, duration_s: float, config: Optional[SamplingConfig] = None) -> float:
    """Clamp a sample time so the decoder never seeks past the last frame."""
    cfg = config or SamplingConfig()
    return min(t, duration_s - cfg.seek_margin_s)


def collect_samples(
    extractor: KeypointExtractor,
    read_frame: FrameReader,
    duration_s: Optional[float],
    width: Optional[int] = None,
    height: Optional[int] = None,
    config: Optional[SamplingConfig] = None,
) -> List[FrameSample]:
    """Sample the clip and run the extractor on each sampled frame.

    Args:
        extractor: Pose estimator for single frames
        read_frame: Caller callback returning the decoded frame at a seek time
        duration_s: Clip duration in seconds
        width: Frame width in pixels (default width when 0/None)
        height: Frame height in pixels (default height when 0/None)
        config: Sampling constants

    Returns:
        One FrameSample per scheduled time, stamped with the unclamped time

    Raises:
        ExtractorError: If the extractor fails on a frame
    """
    cfg = config or SamplingConfig()
    width = width or cfg.default_width
    height = height or cfg.default_height
    duration_s = _clip_duration(duration_s, cfg)

    times = sample_times(duration_s, cfg)
    logger.info(f"Sampling {len(times)} frames over {duration_s:.2f}s at {width}x{height}")

    samples: List[FrameSample] = []
    for t in times:
        image = read_frame(seek_time(t, duration_s, cfg))
        try:
            keypoints = extractor.estimate(image)
        except CaptureError:
            raise
        except Exception as e:
            logger.error(f"Keypoint extraction failed at t={t:.3f}s: {e}")
            raise ExtractorError(f"Keypoint extraction failed at t={t:.3f}s: {e}", timestamp=t) from e
        samples.append(
            FrameSample(
                timestamp=t,
                keypoints=tuple(keypoints),
                frame_width=width,
                frame_height=height,
            )
        )
    return samples


__all__ = ["FrameReader", "collect_samples", "sample_step", "sample_times", "seek_time"]
