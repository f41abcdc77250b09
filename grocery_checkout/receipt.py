"""Receipt formatting utilities."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import structlog

from .checkout import CheckoutResult
from .models import BasketItem
from .money import DEFAULT_CURRENCY_SYMBOL

log = structlog.get_logger(__name__)

SEPARATOR = "=" * 37
ITEM_COL_WIDTH = 15
QUANTITY_COL_WIDTH = 12
PRICE_COL_WIDTH = 12
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _summary_line(label: str, amount, symbol: str, sign: str = "") -> str:
    value = f"{sign}{symbol}{amount:.2f}"
    return f"{label:<{ITEM_COL_WIDTH}} {value:>{QUANTITY_COL_WIDTH + PRICE_COL_WIDTH}}"


def format_receipt(
    result: CheckoutResult,
    lines: Iterable[BasketItem],
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    timestamp: Optional[datetime] = None,
) -> str:
    """Format a human-readable receipt for a checkout result."""
    lines = list(lines)
    timestamp = timestamp or datetime.now()
    log.debug("formatting_receipt", lines=len(lines), discounts=len(result.discounts))

    out = [
        SEPARATOR,
        "GROCERY STORE CHECKOUT RECEIPT",
        SEPARATOR,
        f"Timestamp: {timestamp.strftime(TIMESTAMP_FORMAT)}",
        "",
        f"{'Item':<{ITEM_COL_WIDTH}} {'Quantity':<{QUANTITY_COL_WIDTH}} {'Price':>{PRICE_COL_WIDTH}}",
        SEPARATOR,
    ]

    for line in lines:
        price = f"{currency_symbol}{line.line_total:.2f}"
        out.append(
            f"{line.item.name:<{ITEM_COL_WIDTH}} {line.quantity:<{QUANTITY_COL_WIDTH}} {price:>{PRICE_COL_WIDTH}}"
        )

    out.append(SEPARATOR)
    out.append(_summary_line("Subtotal:", result.subtotal, currency_symbol))
    out.append("")

    if result.has_discounts:
        out.append("Discounts:")
        out.append("-" * len(SEPARATOR))
        for discount in result.discounts:
            amount = f"-{currency_symbol}{discount.amount:.2f}"
            out.append(
                f"{discount.item.name:<{ITEM_COL_WIDTH}} ({discount.description:<20}) {amount:>{PRICE_COL_WIDTH}}"
            )
        out.append(SEPARATOR)
        out.append(_summary_line("Total Discount:", result.total_discount, currency_symbol, sign="-"))
        out.append("")

    out.append(SEPARATOR)
    out.append(_summary_line("TOTAL:", result.total, currency_symbol))
    out.append(SEPARATOR)

    return "\n".join(out) + "\n"
