"""Data contracts for compound growth calculations."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from calctools.schemas.inputs import Number, WholeNumber

MAX_YEARS = 1000
MAX_FREQUENCY = 365
MAX_RATE_PERCENT = 1000


class CompoundRequest(BaseModel):
    """Inputs for a compound growth projection.

    Values are parsed but not clamped here; negative amounts are clamped to
    zero by the calculator itself. Term, rate and frequency have upper limits
    so a single request cannot run an unbounded number of periods.
    """

    model_config = ConfigDict(extra="forbid")

    principal: Number = Field(0.0, description="Initial investment.")
    rate_percent: Number = Field(
        0.0,
        le=MAX_RATE_PERCENT,
        description="Annual interest rate in percent (5 for 5%).",
    )
    years: Number = Field(0.0, le=MAX_YEARS, description="Investment term in years.")
    periodic_contribution: Number = Field(
        0.0,
        description="Amount added every month; only compounded monthly when frequency is 12.",
    )
    frequency: WholeNumber = Field(12, le=MAX_FREQUENCY, description="Compounding periods per year.")


class YearSnapshot(BaseModel):
    """Balance at the end of one completed year."""

    year: int = Field(..., ge=1)
    amount: int
    invested: int
    interest: int


class CompoundResult(BaseModel):
    """Final totals plus the year-by-year breakdown."""

    final_amount: int = 0
    total_invested: int = 0
    total_interest: int = 0
    yearly_breakdown: List[YearSnapshot] = Field(default_factory=list)
