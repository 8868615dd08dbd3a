from __future__ import annotations

from math import isclose

from calctools.core.stock_average import (
    calculate_stock_average,
    profit_rate,
    project_additional_purchase,
    summarize_holdings,
)
from calctools.schemas.stock_average import HoldingSummary, Purchase, StockAverageRequest


def test_weighted_average_price():
    purchases = [Purchase(price=10000, quantity=10), Purchase(price=8000, quantity=30)]

    summary = summarize_holdings(purchases)

    assert summary.total_quantity == 40
    assert summary.total_amount == 340000
    assert isclose(summary.average_price, 8500)


def test_no_purchases_gives_zeros():
    assert summarize_holdings([]) == HoldingSummary()


def test_zero_quantity_purchases_give_zeros():
    assert summarize_holdings([Purchase(price=5000, quantity=0)]) == HoldingSummary()


def test_buying_lower_pulls_average_down():
    summary = summarize_holdings([Purchase(price=10000, quantity=10)])

    projection = project_additional_purchase(summary, 6000, 10)

    assert projection is not None
    assert isclose(projection.average_price, 8000)
    assert projection.total_quantity == 20
    assert projection.total_amount == 160000
    assert projection.additional_investment == 60000
    assert isclose(projection.average_change_percent, -20)


def test_projection_needs_price_and_quantity():
    summary = summarize_holdings([Purchase(price=10000, quantity=10)])

    assert project_additional_purchase(summary, 0, 10) is None
    assert project_additional_purchase(summary, 6000, 0) is None
    assert project_additional_purchase(summary, -1, 5) is None


def test_projection_from_empty_holdings():
    projection = project_additional_purchase(HoldingSummary(), 5000, 2)

    assert projection is not None
    assert projection.average_price == 5000
    assert projection.average_change_percent == 0


def test_profit_rate():
    assert isclose(profit_rate(11000, 10000), 10)
    assert isclose(profit_rate(9000, 10000), -10)
    assert profit_rate(9000, 0) == 0


def test_profit_rate_defaults_to_latest_purchase_price():
    request = StockAverageRequest(
        purchases=[
            {"price": 10000, "quantity": 10},
            {"price": 7000, "quantity": 10},
        ]
    )

    response = calculate_stock_average(request)

    # average 8500, latest price 7000
    assert isclose(response.holdings.average_price, 8500)
    assert isclose(response.profit_rate, (7000 - 8500) / 8500 * 100)
    assert response.projection is None


def test_explicit_current_price_and_target():
    request = StockAverageRequest(
        purchases=[{"price": 10000, "quantity": 10}],
        current_price="12000",
        target_price="",
        target_quantity="5",
    )

    response = calculate_stock_average(request)

    assert isclose(response.profit_rate, 20)
    assert response.projection is None  # blank target price parses to 0
