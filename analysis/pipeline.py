"""End-to-end delivery analysis from a clip reader and a keypoint extractor."""

from __future__ import annotations

from typing import Optional

from capture.extractor import KeypointExtractor
from capture.sampling import FrameReader, collect_samples
from configs.settings import AppConfig, default_config
from contracts import DeliveryResult
from delivery.segmenter import segment
from log_config.logger import get_logger

logger = get_logger(__name__)


def analyze_clip(
    extractor: KeypointExtractor,
    read_frame: FrameReader,
    duration_s: Optional[float],
    width: Optional[int] = None,
    height: Optional[int] = None,
    config: Optional[AppConfig] = None,
) -> DeliveryResult:
    """Sample a clip, extract keypoints per frame, and segment the delivery.

    Args:
        extractor: Pose estimator
        read_frame: Callback returning the decoded frame at a seek time
        duration_s: Clip duration in seconds
        width: Frame width in pixels
        height: Frame height in pixels
        config: Analysis constants

    Returns:
        DeliveryResult for the clip
    """
    cfg = config or default_config()
    samples = collect_samples(extractor, read_frame, duration_s, width, height, cfg.sampling)
    result = segment(samples, cfg)
    logger.info(
        f"Delivery analyzed: {len(result.frames)} frames, "
        f"release at frame {result.key_moments.release_frame}, "
        f"{result.summary.release_speed_kph:.0f} km/h"
    )
    return result


__all__ = ["analyze_clip"]
