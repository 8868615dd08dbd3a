"""Rounding helpers shared by the calculators."""

import math
import sys


def _saturate(value: float) -> float:
    """Overflowed results become the largest finite float of the same sign; NaN becomes 0."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(sys.float_info.max, value)
    return value


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with ties going towards positive infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); prices and
    balances here round 2.5 up to 3. Values too large to scale are already
    whole numbers and are returned unchanged.
    """
    value = _saturate(value)
    factor = 10**digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def round_amount(value: float) -> int:
    """Round a monetary value to the nearest whole unit."""
    return int(round_half_up(value))
