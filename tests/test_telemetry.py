"""Tests for the telemetry aggregator and fallback delivery."""

from __future__ import annotations

import math

import pytest

from configs.settings import TelemetryConfig
from contracts import DeliveryPhase, FrameSnapshot, KeyMoments
from delivery.fallback import fallback_result
from metrics.telemetry import aggregate_summary


def _snapshot(speed, seam, depth, height=1.8):
    return FrameSnapshot(
        timestamp=0.0,
        phase=DeliveryPhase.RUN_UP,
        ball_position=(0.0, 1.0, depth),
        seam_angle=seam,
        speed_kph=speed,
        release_height=height,
    )


class TestAggregateSummary:
    """Summary scalars at the key moments."""

    @pytest.fixture
    def frames(self):
        return [
            _snapshot(0.0, 8.0, 0.0),
            _snapshot(40.0, 9.0, 5.0),
            _snapshot(130.0, 21.5, 10.0, height=2.1),
            _snapshot(110.0, 0.0, 15.0),
        ]

    def test_values_at_key_moments(self, frames):
        summary = aggregate_summary(frames, KeyMoments(2, 3, 3))

        assert summary.release_speed_kph == 130.0
        assert summary.runup_velocity_kph == 40.0
        assert summary.seam_angle == 21.5
        assert summary.release_height == 2.1
        assert summary.predicted_impact_meters == pytest.approx(20.12 - 15.0)

    def test_zero_values_fall_back_to_defaults(self, frames):
        summary = aggregate_summary(frames, KeyMoments(0, 3, 3))

        assert summary.release_speed_kph == 122.0
        assert summary.runup_velocity_kph == 22.0
        assert summary.seam_angle == 8.0

    def test_zero_seam_angle_defaults(self, frames):
        summary = aggregate_summary(frames, KeyMoments(3, 3, 3))

        assert summary.seam_angle == 14.0

    def test_missing_release_height(self):
        frames = [_snapshot(50.0, 10.0, 0.0, height=None)]

        summary = aggregate_summary(frames, KeyMoments(0, 0, 0))

        assert summary.release_height == 1.85

    def test_nan_speed_defaults(self):
        frames = [_snapshot(math.nan, 10.0, 0.0)]

        summary = aggregate_summary(frames, KeyMoments(0, 0, 0))

        assert summary.release_speed_kph == 122.0

    def test_impact_distance_never_negative(self):
        frames = [_snapshot(50.0, 10.0, 25.0)]

        summary = aggregate_summary(frames, KeyMoments(0, 0, 0))

        assert summary.predicted_impact_meters == 0.0

    def test_custom_defaults(self, frames):
        cfg = TelemetryConfig(default_release_speed_kph=100.0)

        summary = aggregate_summary(frames, KeyMoments(0, 0, 0), cfg)

        assert summary.release_speed_kph == 100.0


def test_fallback_record() -> None:
    result = fallback_result()

    assert len(result.frames) == 1
    frame = result.frames[0]
    assert frame.phase == DeliveryPhase.RUN_UP
    assert frame.ball_position == (0.0, 1.5, 0.0)
    assert frame.seam_angle == 15
    assert frame.speed_kph == 115
    assert frame.release_height == 1.86
    assert frame.keypoints == ()
    assert result.trajectory == ((0.0, 1.5, 0.0),)
    assert result.key_moments == KeyMoments(0, 0, 0)
    summary = result.summary
    assert (
        summary.release_speed_kph,
        summary.seam_angle,
        summary.release_height,
        summary.predicted_impact_meters,
        summary.runup_velocity_kph,
    ) == (115, 15, 1.86, 5.4, 24)
