"""
Small numeric helpers shared by the simulation models.
"""

import math
from collections.abc import Sequence

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def ols_slope(values: Sequence[float]) -> float:
    """
    Ordinary-least-squares slope of ``values`` against their index 0..n-1.
    Returns 0.0 for fewer than two points.
    """
    if len(values) < 2:
        return 0.0
    indices = np.arange(len(values))
    return float(np.polyfit(indices, np.asarray(values, dtype=float), 1)[0])


def round_to(value: float, digits: int) -> float:
    """Half-up rounding to ``digits`` decimals, matching ``round_half_up``."""
    scale = 10**digits
    return round_half_up(value * scale) / scale
