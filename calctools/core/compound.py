"""Compound growth with periodic contributions."""

import math
from typing import List

from calctools.core.rounding import round_amount
from calctools.logging_config import get_logger
from calctools.schemas.compound import CompoundRequest, CompoundResult, YearSnapshot

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12


def compute_compound_growth(
    principal: float,
    rate_percent: float,
    years: float,
    periodic_contribution: float,
    frequency: int = MONTHS_PER_YEAR,
) -> CompoundResult:
    """
    Project a balance forward and record one snapshot per completed year.

    Order of operations (per compounding period):
      1) Accrue interest at rate_percent / frequency.
      2) Add the monthly contribution, only when compounding monthly.
      3) At every full year, record the rounded balance and amount invested.

    With a contribution and any frequency other than 12 the period loop is
    replaced by an annual model: a full year of contributions is added first,
    then one year of interest is applied.

    Negative inputs are clamped to zero and frequency to at least 1.
    """
    p = max(0.0, principal)
    r = max(0.0, rate_percent) / 100
    t = max(0.0, years)
    n = max(1, int(frequency))
    pmt = max(0.0, periodic_contribution)

    if t <= 0:
        return CompoundResult()

    balance = p
    invested = p
    breakdown: List[YearSnapshot] = []

    if pmt > 0 and n != MONTHS_PER_YEAR:
        logger.debug("annual contribution model", frequency=n, years=t)
        yearly_deposit = pmt * MONTHS_PER_YEAR
        for year in range(1, math.floor(t) + 1):
            invested += yearly_deposit
            balance += yearly_deposit
            balance *= 1 + r
            breakdown.append(_snapshot(year, balance, invested))
    else:
        period_rate = r / n
        for period in range(1, math.floor(t * n) + 1):
            balance *= 1 + period_rate
            if pmt > 0:
                balance += pmt
                invested += pmt
            if period % n == 0:
                breakdown.append(_snapshot(period // n, balance, invested))

    final_amount = round_amount(balance)
    total_invested = round_amount(invested)
    return CompoundResult(
        final_amount=final_amount,
        total_invested=total_invested,
        total_interest=final_amount - total_invested,
        yearly_breakdown=breakdown,
    )


def _snapshot(year: int, balance: float, invested: float) -> YearSnapshot:
    amount = round_amount(balance)
    invested_rounded = round_amount(invested)
    return YearSnapshot(
        year=year,
        amount=amount,
        invested=invested_rounded,
        interest=amount - invested_rounded,
    )


def calculate_compound(request: CompoundRequest) -> CompoundResult:
    return compute_compound_growth(
        principal=request.principal,
        rate_percent=request.rate_percent,
        years=request.years,
        periodic_contribution=request.periodic_contribution,
        frequency=request.frequency,
    )
