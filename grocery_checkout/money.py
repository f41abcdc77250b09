"""Exact decimal money helpers.

Every amount in the engine is a ``Decimal`` at a fixed scale of two
fractional digits. Floats are only accepted at the boundary and are
converted through their shortest ``repr``, never through binary value.
Inputs finer than a penny are rejected rather than rounded.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from .errors import ValidationError

CURRENCY_SCALE = Decimal("0.01")
ZERO = Decimal("0.00")
MAX_AMOUNT = Decimal("999999999999.99")
DEFAULT_CURRENCY_SYMBOL = "£"


def to_money(value: Any) -> Decimal:
    """Convert value to a Decimal at the currency scale.

    Raises:
        ValidationError: If the value is missing, boolean, non-numeric,
            not finite, larger than MAX_AMOUNT or has more than two
            fractional digits.
    """
    if value is None:
        raise ValidationError("amount is required")
    if isinstance(value, bool):
        raise ValidationError(f"amount must be numeric: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError(f"amount must be numeric: {value!r}") from None
    else:
        raise ValidationError(f"amount must be numeric: {value!r}")

    if not amount.is_finite():
        raise ValidationError(f"amount must be finite: {value!r}")
    if amount.copy_abs() > MAX_AMOUNT:
        raise ValidationError(f"amount out of range: {value!r}")

    try:
        scaled = amount.quantize(CURRENCY_SCALE)
    except InvalidOperation:
        raise ValidationError(f"amount out of range: {value!r}") from None
    if scaled != amount:
        raise ValidationError(f"amount has more than two decimal places: {value!r}")
    return scaled


def multiply(unit_price: Decimal, quantity: int) -> Decimal:
    """Exact price x quantity at the currency scale."""
    # integer digits of both factors plus the two fractional digits
    digits = max(unit_price.adjusted(), 0) + 1 + len(str(abs(quantity))) + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return (unit_price * quantity).quantize(CURRENCY_SCALE, rounding=ROUND_HALF_UP)


def total(amounts) -> Decimal:
    """Sum an iterable of amounts, starting from ZERO."""
    return sum(amounts, ZERO)


def format_money(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render an amount for display, e.g. ``£1.50`` or ``-£0.50``."""
    if not isinstance(amount, Decimal):
        amount = to_money(amount)
    if amount < 0:
        return f"-{symbol}{-amount:.2f}"
    return f"{symbol}{amount:.2f}"
