from __future__ import annotations

from activate_roi.engine.rounding import round_half_up

DEFAULT_DURATION_MS = 1000


def ease_out_cubic(progress: float) -> float:
    return 1 - (1 - progress) ** 3


def animated_value(
    target: float,
    elapsed_ms: float,
    duration_ms: float = DEFAULT_DURATION_MS,
    decimals: int = 0,
) -> float:
    """Value shown by a count-up display ``elapsed_ms`` into its animation."""
    progress = min(max(elapsed_ms, 0) / duration_ms, 1.0)
    return round_half_up(ease_out_cubic(progress) * target, decimals)
