"""Available calculator tools, in display order."""

from typing import List, Literal, Optional

from calctools.schemas.catalog import Tool

_TOOLS = (
    Tool(
        id="compound-interest",
        title="Compound interest",
        description="Future value of an investment with monthly deposits.",
        path="/calc/compound",
    ),
    Tool(
        id="character-counter",
        title="Character counter",
        description="Characters, words and bytes in a block of text.",
        path="/calc/text-stats",
    ),
    Tool(
        id="stock-average",
        title="Stock average cost",
        description="Average purchase price and the effect of buying more.",
        path="/calc/stock-average",
    ),
    Tool(
        id="discount-calculator",
        title="Discount calculator",
        description="Single and stacked discounts, and the rate behind a sale price.",
        path="/calc/discount/single",
    ),
)

ToolId = Literal["compound-interest", "character-counter", "stock-average", "discount-calculator"]

TOOL_IDS = tuple(tool.id for tool in _TOOLS)


def list_tools() -> List[Tool]:
    return [tool.model_copy() for tool in _TOOLS]


def get_tool(tool_id: str) -> Optional[Tool]:
    for tool in _TOOLS:
        if tool.id == tool_id:
            return tool.model_copy()
    return None
