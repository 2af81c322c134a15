"""Timeline helpers for scrubbing through a segmented delivery."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from contracts import DeliveryPhase, DeliveryResult, FrameSnapshot


def delivery_timeline(result: DeliveryResult) -> List[Tuple[int, DeliveryPhase]]:
    """Return ``(index, phase)`` for every frame of ``result``."""
    return [(idx, frame.phase) for idx, frame in enumerate(result.frames)]


def nearest_frame_index(frames: Sequence[FrameSnapshot], t: float) -> Optional[int]:
    """Index of the snapshot closest in time to ``t``; ties keep the earliest."""
    if not frames:
        return None
    closest = 0
    for idx, frame in enumerate(frames):
        if abs(frame.timestamp - t) < abs(frames[closest].timestamp - t):
            closest = idx
    return closest


def phase_spans(result: DeliveryResult) -> List[Tuple[DeliveryPhase, int, int]]:
    """Collapse per-frame labels into ``(phase, first_index, last_index)`` runs."""
    spans: List[Tuple[DeliveryPhase, int, int]] = []
    for idx, frame in enumerate(result.frames):
        if spans and spans[-1][0] == frame.phase:
            phase, first, _last = spans[-1]
            spans[-1] = (phase, first, idx)
        else:
            spans.append((frame.phase, idx, idx))
    return spans


__all__ = ["delivery_timeline", "nearest_frame_index", "phase_spans"]
