"""Data contracts for the discount calculator."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from calctools.schemas.inputs import Number


class SingleDiscountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_price: Number = 0.0
    discount_rate: Number = Field(0.0, description="Discount in percent, limited to 0-100.")


class SequentialDiscountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_price: Number = 0.0
    rates: List[Number] = Field(
        default_factory=list,
        description="Discounts in percent, applied one after another.",
    )


class ReverseDiscountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_price: Number = 0.0
    final_price: Number = 0.0


class DiscountResponse(BaseModel):
    final_price: int
    saved: int
    effective_rate: float = Field(..., description="Overall discount in percent, to two decimals.")


class DiscountRateResponse(BaseModel):
    discount_rate: float


class DiscountOverview(BaseModel):
    single: DiscountResponse
    sequential: DiscountResponse
    reverse: DiscountRateResponse
