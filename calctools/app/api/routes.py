"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, request
from pydantic import BaseModel, ConfigDict, ValidationError

from calctools.core.catalog import list_tools
from calctools.core.compound import calculate_compound
from calctools.core.discount import (
    calculate_reverse_discount,
    calculate_sequential_discount,
    calculate_single_discount,
)
from calctools.core.stock_average import calculate_stock_average
from calctools.core.text_stats import calculate_text_stats
from calctools.domain.session import (
    Action,
    SessionActionError,
    SessionState,
    evaluate,
    initial_state,
    reduce,
)
from calctools.logging_config import get_logger
from calctools.schemas.catalog import ToolCatalog
from calctools.schemas.compound import CompoundRequest
from calctools.schemas.discount import (
    ReverseDiscountRequest,
    SequentialDiscountRequest,
    SingleDiscountRequest,
)
from calctools.schemas.stock_average import StockAverageRequest
from calctools.schemas.text_stats import TextStatsRequest

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


class DispatchRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    state: SessionState = SessionState()
    action: Action


class DispatchResponse(BaseModel):
    state: SessionState
    result: Optional[Dict[str, Any]] = None


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("request rejected", path=request.path, errors=exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(SessionActionError)
def _handle_session_error(exc: SessionActionError):
    logger.info("session action rejected", errors=exc.errors)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/tools")
def tools() -> Any:
    """List the available calculators."""
    return jsonify(ToolCatalog(tools=list_tools()).model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Compound growth with a year-by-year breakdown."""
    payload = CompoundRequest.model_validate(_payload())
    result = calculate_compound(payload)
    return jsonify(result.model_dump())


@api_bp.post("/calc/discount/single")
def single_discount() -> Any:
    payload = SingleDiscountRequest.model_validate(_payload())
    return jsonify(calculate_single_discount(payload).model_dump())


@api_bp.post("/calc/discount/sequential")
def sequential_discount() -> Any:
    payload = SequentialDiscountRequest.model_validate(_payload())
    return jsonify(calculate_sequential_discount(payload).model_dump())


@api_bp.post("/calc/discount/reverse")
def reverse_discount() -> Any:
    payload = ReverseDiscountRequest.model_validate(_payload())
    return jsonify(calculate_reverse_discount(payload).model_dump())


@api_bp.post("/calc/stock-average")
def stock_average() -> Any:
    payload = StockAverageRequest.model_validate(_payload())
    return jsonify(calculate_stock_average(payload).model_dump())


@api_bp.post("/calc/text-stats")
def text_stats() -> Any:
    payload = TextStatsRequest.model_validate(_payload())
    return jsonify(calculate_text_stats(payload).model_dump())


@api_bp.get("/session")
def session() -> Any:
    """Fresh session state with the default form values."""
    return jsonify(initial_state().model_dump())


@api_bp.post("/session/dispatch")
def dispatch() -> Any:
    """Apply one action to the given state and evaluate the selected tool."""
    payload = DispatchRequest.model_validate(_payload())
    state = reduce(payload.state, payload.action)
    result = evaluate(state)
    response = DispatchResponse(
        state=state,
        result=result.model_dump() if result is not None else None,
    )
    return jsonify(response.model_dump())
