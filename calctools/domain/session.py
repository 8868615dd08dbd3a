"""Calculator session state and the reducer that updates it.

A session holds what a user has typed into each tool's form. State objects
are frozen; :func:`reduce` returns a new state for every action and
:func:`evaluate` runs the selected tool on the current form values.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from calctools.core.catalog import TOOL_IDS, ToolId
from calctools.core.compound import calculate_compound
from calctools.core.discount import calculate_discount_overview
from calctools.core.stock_average import calculate_stock_average
from calctools.core.text_stats import calculate_text_stats
from calctools.logging_config import get_logger
from calctools.schemas.compound import CompoundRequest
from calctools.schemas.discount import (
    ReverseDiscountRequest,
    SequentialDiscountRequest,
    SingleDiscountRequest,
)
from calctools.schemas.inputs import parse_number
from calctools.schemas.stock_average import Purchase, StockAverageRequest
from calctools.schemas.text_stats import TextStatsRequest

logger = get_logger(__name__)


class SessionActionError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _as_text(value: Any) -> Any:
    """Form fields hold raw text; numbers sent by a client are kept as typed."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


FieldText = Annotated[str, BeforeValidator(_as_text)]


# -----------------------------
# State
# -----------------------------


class CompoundForm(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: FieldText = "1000000"
    rate: FieldText = "5"
    years: FieldText = "10"
    monthly_deposit: FieldText = "100000"


class DiscountForm(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    original_price: FieldText = "10000"
    discount_rate: FieldText = "20"
    discounts: Tuple[FieldText, ...] = ("20",)
    reverse_original: FieldText = ""
    reverse_final: FieldText = ""


class PurchaseRow(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    price: float = Field(..., gt=0)
    quantity: float = Field(..., gt=0)


class StockForm(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    purchases: Tuple[PurchaseRow, ...] = (PurchaseRow(id=1, price=10000, quantity=10),)
    new_price: FieldText = ""
    new_quantity: FieldText = ""
    target_price: FieldText = ""
    target_quantity: FieldText = ""


class TextForm(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = ""


class SessionState(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    selected_tool: Optional[ToolId] = None
    compound: CompoundForm = CompoundForm()
    discount: DiscountForm = DiscountForm()
    stock: StockForm = StockForm()
    text: TextForm = TextForm()


FormName = Literal["compound", "discount", "stock", "text"]

# fields a set_field action may overwrite, per form
_SCALAR_FIELDS = {
    "compound": ("principal", "rate", "years", "monthly_deposit"),
    "discount": ("original_price", "discount_rate", "reverse_original", "reverse_final"),
    "stock": ("new_price", "new_quantity", "target_price", "target_quantity"),
    "text": ("text",),
}


# -----------------------------
# Actions
# -----------------------------


class SelectTool(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["select_tool"] = "select_tool"
    tool: Optional[str] = None


class SetField(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["set_field"] = "set_field"
    form: FormName
    field: str
    value: FieldText = ""


class AddDiscount(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["add_discount"] = "add_discount"


class RemoveDiscount(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["remove_discount"] = "remove_discount"
    index: int


class UpdateDiscount(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["update_discount"] = "update_discount"
    index: int
    value: FieldText = ""


class AddPurchase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["add_purchase"] = "add_purchase"


class RemovePurchase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["remove_purchase"] = "remove_purchase"
    id: int


class Reset(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["reset"] = "reset"


Action = Annotated[
    Union[
        SelectTool,
        SetField,
        AddDiscount,
        RemoveDiscount,
        UpdateDiscount,
        AddPurchase,
        RemovePurchase,
        Reset,
    ],
    Field(discriminator="type"),
]


# -----------------------------
# Reducer
# -----------------------------


def initial_state() -> SessionState:
    return SessionState()


def reduce(state: SessionState, action: Action) -> SessionState:
    """Return the state that results from applying ``action`` to ``state``."""
    logger.debug("session action", action=action.type)

    if isinstance(action, Reset):
        return initial_state()

    if isinstance(action, SelectTool):
        if action.tool is not None and action.tool not in TOOL_IDS:
            raise SessionActionError([f"unknown tool {action.tool!r}"])
        return state.model_copy(update={"selected_tool": action.tool})

    if isinstance(action, SetField):
        if action.field not in _SCALAR_FIELDS[action.form]:
            raise SessionActionError([f"{action.form} has no field {action.field!r}"])
        form = getattr(state, action.form)
        updated = form.model_copy(update={action.field: action.value})
        return state.model_copy(update={action.form: updated})

    if isinstance(action, (AddDiscount, RemoveDiscount, UpdateDiscount)):
        discounts = _next_discounts(state.discount.discounts, action)
        discount = state.discount.model_copy(update={"discounts": discounts})
        return state.model_copy(update={"discount": discount})

    if isinstance(action, AddPurchase):
        return state.model_copy(update={"stock": _add_purchase(state.stock)})

    if isinstance(action, RemovePurchase):
        return state.model_copy(update={"stock": _remove_purchase(state.stock, action.id)})

    raise SessionActionError([f"unsupported action {action.type!r}"])


def _next_discounts(discounts: Tuple[str, ...], action: BaseModel) -> Tuple[str, ...]:
    if isinstance(action, AddDiscount):
        return discounts + ("",)

    if not 0 <= action.index < len(discounts):
        raise SessionActionError([f"no discount at index {action.index}"])

    rows = list(discounts)
    if isinstance(action, RemoveDiscount):
        del rows[action.index]
    else:
        rows[action.index] = action.value
    return tuple(rows)


def _add_purchase(stock: StockForm) -> StockForm:
    """Append the typed purchase; ignored unless price and quantity are positive."""
    price = parse_number(stock.new_price)
    quantity = parse_number(stock.new_quantity)
    if price <= 0 or quantity <= 0:
        return stock

    next_id = max((row.id for row in stock.purchases), default=0) + 1
    row = PurchaseRow(id=next_id, price=price, quantity=quantity)
    return stock.model_copy(
        update={
            "purchases": stock.purchases + (row,),
            "new_price": "",
            "new_quantity": "",
        }
    )


def _remove_purchase(stock: StockForm, purchase_id: int) -> StockForm:
    if not any(row.id == purchase_id for row in stock.purchases):
        raise SessionActionError([f"no purchase with id {purchase_id}"])
    if len(stock.purchases) == 1:
        raise SessionActionError(["cannot remove the last purchase"])

    remaining = tuple(row for row in stock.purchases if row.id != purchase_id)
    return stock.model_copy(update={"purchases": remaining})


# -----------------------------
# Evaluation
# -----------------------------


def evaluate(state: SessionState) -> Optional[BaseModel]:
    """Run the selected tool against the session's form values.

    Form text goes through the request schemas, so blank or unparseable
    fields count as zero. Returns None when no tool is selected.
    """
    tool = state.selected_tool

    if tool == "compound-interest":
        form = state.compound
        return calculate_compound(
            CompoundRequest(
                principal=form.principal,
                rate_percent=form.rate,
                years=form.years,
                periodic_contribution=form.monthly_deposit,
            )
        )

    if tool == "discount-calculator":
        form = state.discount
        return calculate_discount_overview(
            SingleDiscountRequest(
                original_price=form.original_price,
                discount_rate=form.discount_rate,
            ),
            SequentialDiscountRequest(
                original_price=form.original_price,
                rates=list(form.discounts),
            ),
            ReverseDiscountRequest(
                original_price=form.reverse_original,
                final_price=form.reverse_final,
            ),
        )

    if tool == "stock-average":
        form = state.stock
        return calculate_stock_average(
            StockAverageRequest(
                purchases=[Purchase(price=row.price, quantity=row.quantity) for row in form.purchases],
                target_price=form.target_price,
                target_quantity=form.target_quantity,
            )
        )

    if tool == "character-counter":
        return calculate_text_stats(TextStatsRequest(text=state.text.text))

    return None
