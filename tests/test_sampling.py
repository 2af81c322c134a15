"""Tests for clip sampling and frame-sample collection."""

from __future__ import annotations

from typing import List

import pytest

from analysis.pipeline import analyze_clip
from capture.extractor import KeypointExtractor
from capture.sampling import collect_samples, sample_step, sample_times, seek_time
from capture.simulated import SimConfig, SimulatedExtractor, simulate_delivery
from contracts import Keypoint
from exceptions import ExtractorError


class FixedExtractor(KeypointExtractor):
    def __init__(self) -> None:
        self.calls = 0

    def estimate(self, image) -> List[Keypoint]:
        self.calls += 1
        return [Keypoint("right_wrist", 640.0, 360.0, 0.9)]


class FailingExtractor(KeypointExtractor):
    def estimate(self, image) -> List[Keypoint]:
        raise RuntimeError("model not loaded")


class TestSampleTimes:
    """Sampling schedule for a clip."""

    def test_ninety_steps_include_duration(self):
        times = sample_times(45.0)

        assert len(times) == 91
        assert times[1] == 0.5
        assert times[-1] == 45.0

    def test_minimum_step(self):
        assert sample_step(1.0) == 0.02
        assert sample_times(1.0)[1] == 0.02

    @pytest.mark.parametrize("duration", [None, 0.0, -2.0, float("nan"), float("inf")])
    def test_missing_duration_uses_default(self, duration):
        times = sample_times(duration)

        assert times[1] == pytest.approx(3.0 / 90)
        assert times[-1] <= 3.0


def test_seek_time_clamps_near_end() -> None:
    assert seek_time(3.0, 3.0) == pytest.approx(2.95)
    assert seek_time(1.0, 3.0) == 1.0


def test_collect_samples() -> None:
    extractor = FixedExtractor()
    seeks = []

    def read_frame(t):
        seeks.append(t)
        return None

    samples = collect_samples(extractor, read_frame, 45.0, width=None, height=None)

    assert len(samples) == 91
    assert extractor.calls == 91
    assert samples[-1].timestamp == 45.0
    assert seeks[-1] == pytest.approx(44.95)
    assert samples[0].frame_width == 1280
    assert samples[0].frame_height == 720


def test_collect_samples_unknown_duration_samples_default_clip() -> None:
    extractor = FixedExtractor()
    seeks = []

    def read_frame(t):
        seeks.append(t)
        return None

    samples = collect_samples(extractor, read_frame, float("nan"))

    assert len(samples) == len(sample_times(3.0))
    assert max(seeks) <= 3.0 - 0.05


def test_collect_samples_wraps_extractor_failure() -> None:
    with pytest.raises(ExtractorError) as excinfo:
        collect_samples(FailingExtractor(), lambda t: None, 1.0)

    assert excinfo.value.timestamp == 0.0
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_simulate_delivery_is_reproducible() -> None:
    assert simulate_delivery(SimConfig(seed=3)) == simulate_delivery(SimConfig(seed=3))


def test_analyze_clip_with_simulated_extractor() -> None:
    sim = SimConfig(duration_s=1.5)

    result = analyze_clip(SimulatedExtractor(sim), lambda t: t, sim.duration_s, sim.width, sim.height)

    n = len(result.frames)
    assert n == len(sample_times(1.5))
    km = result.key_moments
    assert 0 <= km.release_frame <= km.pitch_frame <= km.impact_frame < n
    assert result.summary.release_speed_kph > 0
