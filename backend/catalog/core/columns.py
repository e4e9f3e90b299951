"""Catalog Columns: grid column table and display-value formatting.

Invariants:
    - COLUMNS order is the grid's column order
    - format_price raises FormatError for non-numeric or non-finite values
    - format_row never raises: a FormatError is logged and replaced by "N/A"
"""

import math
from dataclasses import asdict, dataclass

from catalog.core.errors import FormatError
from catalog.core.repository_protocols import EventLogger

PLACEHOLDER = "N/A"

_CURRENCY_SYMBOLS = {
    "HKD": "HK$",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


@dataclass(frozen=True)
class ColumnSpec:
    field: str
    header_name: str
    width: int = 150
    type: str = "string"
    editable: bool = False
    resizable: bool = False


COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("id", "ID"),
    ColumnSpec("categories", "Categories", width=250),
    ColumnSpec("name", "Name"),
    ColumnSpec("inStock", "In Stock", type="boolean"),
    ColumnSpec("price", "Price", type="number"),
)


def column_definitions() -> list[dict]:
    return [asdict(c) for c in COLUMNS]


def format_price(value: object, currency: str = "HKD") -> str:
    """Render a price with two decimals and the currency symbol."""
    if isinstance(value, bool) or value is None:
        raise FormatError(f"Price is not numeric: {value!r}", field="price")
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise FormatError(
            f"Price is not numeric: {value!r}", field="price", cause=e,
        )
    if not math.isfinite(amount):
        raise FormatError(f"Price is not finite: {value!r}", field="price")
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_row(row: dict, events: EventLogger, currency: str = "HKD") -> dict:
    """Display values for one record; unknown keys pass through unchanged."""
    shown = dict(row)
    categories = row.get("categories")
    if isinstance(categories, list):
        shown["categories"] = ", ".join(str(c) for c in categories)
    if "price" in row:
        try:
            shown["price"] = format_price(row["price"], currency)
        except FormatError as e:
            events.error("Failed to format price", e)
            shown["price"] = PLACEHOLDER
    return shown
