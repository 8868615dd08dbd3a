"""Data contracts for the stock average-cost calculator."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from calctools.schemas.inputs import Number


class Purchase(BaseModel):
    """One buy: price per share and number of shares."""

    model_config = ConfigDict(extra="forbid")

    price: Number = Field(..., ge=0)
    quantity: Number = Field(..., ge=0)

    @property
    def total_amount(self) -> float:
        return self.price * self.quantity


class StockAverageRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    purchases: List[Purchase] = Field(default_factory=list)
    target_price: Number = Field(0.0, description="Price of a planned extra buy.")
    target_quantity: Number = Field(0.0, description="Shares in the planned extra buy.")
    current_price: Optional[Number] = Field(
        None,
        description="Market price for the profit rate; defaults to the latest purchase price.",
    )


class HoldingSummary(BaseModel):
    average_price: float = 0.0
    total_quantity: float = 0.0
    total_amount: float = 0.0


class AdditionalPurchase(BaseModel):
    """Holdings after a planned extra buy."""

    average_price: float
    total_quantity: float
    total_amount: float
    additional_investment: float
    average_change_percent: float


class StockAverageResponse(BaseModel):
    holdings: HoldingSummary
    profit_rate: float
    projection: Optional[AdditionalPurchase] = None
