from __future__ import annotations

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up, as report figures are displayed.

    Returns an int when ``decimals`` is 0.
    """
    scale = 10**decimals
    rounded = math.floor(value * scale + 0.5)
    if decimals == 0:
        return int(rounded)
    return rounded / scale
