from calctools.core.catalog import get_tool, list_tools


def test_tools_are_listed_in_display_order():
    ids = [tool.id for tool in list_tools()]

    assert ids == ["compound-interest", "character-counter", "stock-average", "discount-calculator"]


def test_get_tool():
    tool = get_tool("stock-average")

    assert tool is not None
    assert tool.path == "/calc/stock-average"
    assert get_tool("unit-converter") is None


def test_catalog_entries_are_copies():
    list_tools()[0].title = "changed"

    assert list_tools()[0].title == "Compound interest"
