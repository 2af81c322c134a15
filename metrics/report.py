"""Human-readable telemetry report for a delivery result."""

from __future__ import annotations

from typing import Dict, List

from contracts import DeliveryResult
from kinematics.seam import round_half_up


def format_summary(result: DeliveryResult) -> Dict[str, str]:
    """Render summary values and key frames as display strings.

    Key frames are reported 1-based.
    """
    summary = result.summary
    moments = result.key_moments
    return {
        "release_pace": f"{round_half_up(summary.release_speed_kph):.0f} km/h",
        "seam_orientation": f"{summary.seam_angle:.1f}°",
        "release_height": f"{summary.release_height:.2f} m",
        "impact_from_stumps": f"{summary.predicted_impact_meters:.2f} m",
        "runup_velocity": f"{round_half_up(summary.runup_velocity_kph):.0f} km/h",
        "release_frame": str(moments.release_frame + 1),
        "pitch_frame": str(moments.pitch_frame + 1),
        "impact_frame": str(moments.impact_frame + 1),
    }


_LABELS = [
    ("release_pace", "Release Pace"),
    ("seam_orientation", "Seam Orientation"),
    ("release_height", "Release Height"),
    ("impact_from_stumps", "Impact From Stumps"),
    ("runup_velocity", "Run-Up Velocity"),
    ("release_frame", "Release Frame"),
    ("pitch_frame", "Pitch Frame"),
    ("impact_frame", "Impact Frame"),
]


def summary_lines(result: DeliveryResult) -> List[str]:
    formatted = format_summary(result)
    width = max(len(label) for _key, label in _LABELS)
    lines = [f"Delivery telemetry ({len(result.frames)} frames)"]
    for key, label in _LABELS:
        lines.append(f"  {label:<{width}}  {formatted[key]}")
    return lines


__all__ = ["format_summary", "summary_lines"]
