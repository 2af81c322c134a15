"""Exponential smoothing for per-frame series."""

from __future__ import annotations

from typing import List, Sequence

SPEED_ALPHA = 0.35
SEAM_ALPHA = 0.25


def smooth_series(series: Sequence[float], alpha: float = SPEED_ALPHA) -> List[float]:
    """Exponentially smooth ``series``.

    ``out[0] = series[0]`` and ``out[i] = out[i-1] * (1 - alpha) + series[i] * alpha``.

    Args:
        series: Ordered values, may be empty
        alpha: Weight of the newest value, in (0, 1]

    Returns:
        New list with the same length as ``series``

    Raises:
        ValueError: If alpha is outside (0, 1]
    """
    if not 0.0 < alpha <= 1.0:
        raise ValueError(f"Smoothing factor must be in (0, 1], got {alpha}")
    output: List[float] = []
    for idx, value in enumerate(series):
        if idx == 0:
            output.append(float(value))
            continue
        output.append(output[idx - 1] * (1.0 - alpha) + value * alpha)
    return output


__all__ = ["SEAM_ALPHA", "SPEED_ALPHA", "smooth_series"]
