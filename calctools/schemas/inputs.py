"""Boundary parsing for numeric form input.

Every request schema routes its numeric fields through :func:`parse_number`
so the calculators only ever see real floats. Domain clamps (non-negative
amounts, rates within 0-100) stay in the core.
"""

import math
from typing import Annotated, Any

from pydantic import BeforeValidator


def parse_number(raw: Any) -> float:
    """Parse a form value into a float, falling back to ``0.0``.

    Blank strings, ``None``, text that does not parse, NaN and infinities
    all become ``0.0``. Booleans are rejected rather than read as 0 or 1.
    """
    if isinstance(raw, bool):
        raise ValueError("expected a number, got a boolean")
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    else:
        return raw

    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def parse_count(raw: Any) -> float:
    """Like :func:`parse_number`, truncated to a whole number."""
    value = parse_number(raw)
    if isinstance(value, float):
        return float(math.trunc(value))
    return value


Number = Annotated[float, BeforeValidator(parse_number)]
WholeNumber = Annotated[int, BeforeValidator(parse_count)]
