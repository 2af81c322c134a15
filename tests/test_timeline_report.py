"""Tests for timeline helpers and the telemetry report."""

from __future__ import annotations

from contracts import DeliveryPhase, DeliveryResult, DeliverySummary, FrameSnapshot, KeyMoments
from delivery import delivery_timeline, fallback_result, nearest_frame_index, phase_spans, segment
from metrics.report import format_summary, summary_lines


def _frames(times):
    return [
        FrameSnapshot(
            timestamp=t,
            phase=DeliveryPhase.RUN_UP,
            ball_position=(0.0, 1.0, 0.0),
            seam_angle=12.0,
            speed_kph=0.0,
            release_height=1.0,
        )
        for t in times
    ]


class TestNearestFrameIndex:
    def test_closest_frame(self):
        frames = _frames([0.0, 0.1, 0.2, 0.3])

        assert nearest_frame_index(frames, 0.21) == 2
        assert nearest_frame_index(frames, 5.0) == 3
        assert nearest_frame_index(frames, -1.0) == 0

    def test_tie_keeps_earliest(self):
        frames = _frames([0.0, 1.0, 2.0])

        assert nearest_frame_index(frames, 0.5) == 0

    def test_empty(self):
        assert nearest_frame_index([], 1.0) is None


def test_delivery_timeline(stationary_samples) -> None:
    result = segment(stationary_samples)

    timeline = delivery_timeline(result)

    assert len(timeline) == 10
    assert timeline[0] == (0, DeliveryPhase.RUN_UP)
    assert timeline[-1] == (9, DeliveryPhase.RELEASE)


def test_phase_spans(stationary_samples) -> None:
    result = segment(stationary_samples)

    assert phase_spans(result) == [
        (DeliveryPhase.RUN_UP, 0, 4),
        (DeliveryPhase.LOAD_UP, 5, 8),
        (DeliveryPhase.RELEASE, 9, 9),
    ]


def test_format_fallback_summary() -> None:
    formatted = format_summary(fallback_result())

    assert formatted == {
        "release_pace": "115 km/h",
        "seam_orientation": "15.0°",
        "release_height": "1.86 m",
        "impact_from_stumps": "5.40 m",
        "runup_velocity": "24 km/h",
        "release_frame": "1",
        "pitch_frame": "1",
        "impact_frame": "1",
    }


def test_format_rounds_half_up() -> None:
    result = DeliveryResult(
        frames=tuple(_frames([0.0, 0.1, 0.2])),
        trajectory=((0.0, 1.0, 0.0),) * 3,
        key_moments=KeyMoments(1, 2, 2),
        summary=DeliverySummary(
            release_speed_kph=122.5,
            seam_angle=-3.25,
            release_height=1.234,
            predicted_impact_meters=0.0,
            runup_velocity_kph=20.4,
        ),
    )

    formatted = format_summary(result)

    assert formatted["release_pace"] == "123 km/h"
    assert formatted["runup_velocity"] == "20 km/h"
    assert formatted["release_height"] == "1.23 m"
    assert formatted["release_frame"] == "2"
    assert formatted["impact_frame"] == "3"


def test_summary_lines() -> None:
    lines = summary_lines(fallback_result())

    assert lines[0] == "Delivery telemetry (1 frames)"
    assert len(lines) == 9
    assert lines[1].strip().startswith("Release Pace")
    assert lines[1].endswith("115 km/h")
