# ABOUTME: Small numeric helpers shared by the simulator, trends and gear estimator
# ABOUTME: Clamping, half-up rounding and degree-to-compass conversion

import math
from typing import Optional

CARDINALS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to [low, high]."""
    return min(high, max(low, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Python's round() uses banker's rounding (round(78.5) == 78), which
    would shift ETAs and gear sizes sitting exactly on a half.
    """
    return math.floor(value + 0.5)


def deg_to_cardinal(degrees: Optional[float]) -> str:
    """
    Convert a bearing in degrees to a 16-point compass name.

    Returns:
        "N", "NNE", ... or "N/A" when degrees is missing
    """
    if degrees is None or math.isnan(degrees):
        return "N/A"
    index = round_half_up((degrees % 360) / 22.5) % 16
    return CARDINALS[index]
