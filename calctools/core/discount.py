"""Discount price and rate calculations."""

from typing import Iterable

from calctools.core.rounding import round_amount, round_half_up
from calctools.schemas.discount import (
    DiscountOverview,
    DiscountRateResponse,
    DiscountResponse,
    ReverseDiscountRequest,
    SequentialDiscountRequest,
    SingleDiscountRequest,
)


def _clamp_rate(rate: float) -> float:
    return max(0.0, min(100.0, rate))


def apply_single_discount(original_price: float, discount_rate: float) -> int:
    """Price after one discount; the rate is limited to 0-100%."""
    price = max(0.0, original_price)
    rate = _clamp_rate(discount_rate)
    return round_amount(price * (1 - rate / 100))


def apply_sequential_discounts(original_price: float, rates: Iterable[float]) -> int:
    """Apply each discount to the already discounted price, in order.

    Only the final price is rounded; 20% then 10% off 10000 gives 7200, not
    the 7000 a flat 30% would.
    """
    price = max(0.0, original_price)
    for rate in rates:
        price *= 1 - _clamp_rate(rate) / 100
    return round_amount(price)


def reverse_discount_rate(original_price: float, final_price: float) -> float:
    """Effective discount in percent, to two decimals.

    A final price above the original gives a negative rate (a markup).
    """
    if original_price <= 0:
        return 0.0
    rate = (original_price - final_price) / original_price * 100
    return round_half_up(rate, 2)


def _discount_response(original_price: float, final_price: int) -> DiscountResponse:
    price = max(0.0, original_price)
    return DiscountResponse(
        final_price=final_price,
        saved=round_amount(price) - final_price,
        effective_rate=reverse_discount_rate(price, final_price),
    )


def calculate_single_discount(request: SingleDiscountRequest) -> DiscountResponse:
    final_price = apply_single_discount(request.original_price, request.discount_rate)
    return _discount_response(request.original_price, final_price)


def calculate_sequential_discount(request: SequentialDiscountRequest) -> DiscountResponse:
    final_price = apply_sequential_discounts(request.original_price, request.rates)
    return _discount_response(request.original_price, final_price)


def calculate_reverse_discount(request: ReverseDiscountRequest) -> DiscountRateResponse:
    return DiscountRateResponse(
        discount_rate=reverse_discount_rate(request.original_price, request.final_price)
    )


def calculate_discount_overview(
    single: SingleDiscountRequest,
    sequential: SequentialDiscountRequest,
    reverse: ReverseDiscountRequest,
) -> DiscountOverview:
    """All three discount panels computed together."""
    return DiscountOverview(
        single=calculate_single_discount(single),
        sequential=calculate_sequential_discount(sequential),
        reverse=calculate_reverse_discount(reverse),
    )
