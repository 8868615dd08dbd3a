from __future__ import annotations

import math
import sys

import pytest

from calctools.core.rounding import round_amount, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (3.5, 4),
        (2.4999, 2),
        (-2.5, -2),
        (-2.6, -3),
        (0.0, 0),
    ],
)
def test_round_amount_rounds_ties_up(value, expected):
    assert round_amount(value) == expected


def test_round_half_up_to_two_decimals():
    assert round_half_up(33.339999999999996, 2) == 33.34
    assert round_half_up(-20.0, 2) == -20.0


def test_round_amount_returns_int():
    assert isinstance(round_amount(1234.56), int)


def test_non_finite_values_saturate():
    assert round_amount(math.inf) == int(sys.float_info.max)
    assert round_amount(-math.inf) == -int(sys.float_info.max)
    assert round_amount(math.nan) == 0
    assert round_half_up(math.inf, 2) == sys.float_info.max


def test_values_too_large_to_scale_are_returned_unchanged():
    assert round_half_up(1e307, 2) == 1e307
