"""Average purchase cost ("averaging down") calculations."""

from typing import Optional, Sequence

from calctools.schemas.stock_average import (
    AdditionalPurchase,
    HoldingSummary,
    Purchase,
    StockAverageRequest,
    StockAverageResponse,
)


def summarize_holdings(purchases: Sequence[Purchase]) -> HoldingSummary:
    """Total shares, total cost and the weighted average price."""
    total_quantity = sum(p.quantity for p in purchases)
    total_amount = sum(p.total_amount for p in purchases)
    if total_quantity <= 0:
        return HoldingSummary()
    return HoldingSummary(
        average_price=total_amount / total_quantity,
        total_quantity=total_quantity,
        total_amount=total_amount,
    )


def project_additional_purchase(
    summary: HoldingSummary, price: float, quantity: float
) -> Optional[AdditionalPurchase]:
    """Holdings after buying ``quantity`` more shares at ``price``.

    Returns None unless both price and quantity are positive.
    """
    if price <= 0 or quantity <= 0:
        return None

    additional = price * quantity
    total_amount = summary.total_amount + additional
    total_quantity = summary.total_quantity + quantity
    average_price = total_amount / total_quantity

    change = 0.0
    if summary.average_price > 0:
        change = (average_price - summary.average_price) / summary.average_price * 100

    return AdditionalPurchase(
        average_price=average_price,
        total_quantity=total_quantity,
        total_amount=total_amount,
        additional_investment=additional,
        average_change_percent=change,
    )


def profit_rate(current_price: float, average_price: float) -> float:
    """Gain or loss of ``current_price`` against the average cost, in percent."""
    if average_price <= 0:
        return 0.0
    return (current_price - average_price) / average_price * 100


def calculate_stock_average(request: StockAverageRequest) -> StockAverageResponse:
    """Summary of the holdings, profit rate and an optional extra-buy projection.

    Without an explicit current price the latest purchase price is used.
    """
    summary = summarize_holdings(request.purchases)

    current_price = request.current_price
    if current_price is None:
        current_price = request.purchases[-1].price if request.purchases else 0.0

    return StockAverageResponse(
        holdings=summary,
        profit_rate=profit_rate(current_price, summary.average_price),
        projection=project_additional_purchase(
            summary, request.target_price, request.target_quantity
        ),
    )
