"""Small numeric helpers shared by the engine modules."""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves upward (toward +inf), unlike Python's banker's rounding.

    round_half_up(2.5) == 3, round_half_up(-2.5) == -2.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)
