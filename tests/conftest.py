"""Shared fixtures for delivery analysis tests."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pytest

from contracts import FrameSample, Keypoint


def _wrist_samples(
    pixels: Sequence[tuple],
    timestamps: Optional[Sequence[float]] = None,
    width: int = 1280,
    height: int = 720,
) -> List[FrameSample]:
    if timestamps is None:
        timestamps = [idx / 10 for idx in range(len(pixels))]
    return [
        FrameSample(
            timestamp=t,
            keypoints=(Keypoint("right_wrist", float(x), float(y), 0.9),),
            frame_width=width,
            frame_height=height,
        )
        for (x, y), t in zip(pixels, timestamps)
    ]


@pytest.fixture
def make_samples():
    """Factory for frame samples with one confident right wrist per frame."""
    return _wrist_samples


@pytest.fixture
def stationary_samples() -> List[FrameSample]:
    """Ten frames with the wrist parked at the frame centre, 0.1s apart."""
    return _wrist_samples([(640, 360)] * 10)
