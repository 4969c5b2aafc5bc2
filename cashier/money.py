"""Exact decimal money helpers.

Amounts are plain ``Decimal`` values. Arithmetic on them is never rounded;
rounding only happens when an amount is formatted for display.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from cashier.constant import CURRENCY

Amount = Decimal

ZERO = Decimal("0")
_CENTS = Decimal("0.01")
_WHOLE = Decimal("1")


def to_amount(value: Decimal | int | str) -> Decimal:
    """Convert ``value`` to an exact Decimal, refusing binary floats."""
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Amounts must be Decimal, int or str, not {type(value).__name__}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as exc:
            raise ValueError(f"Not a valid amount: {value!r}") from exc
    else:
        raise TypeError(f"Amounts must be Decimal, int or str, not {type(value).__name__}")
    if not amount.is_finite():
        raise ValueError(f"Not a valid amount: {value!r}")
    return amount


def round_cents(amount: Decimal) -> Decimal:
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, currency: str | None = CURRENCY) -> str:
    """Format an amount with two decimals and an optional currency suffix."""
    text = f"{round_cents(amount):.2f}"
    if currency:
        return f"{text} {currency}"
    return text


def format_percent(rate: Decimal) -> str:
    """Format a fractional rate as a whole percentage, e.g. 0.12 -> '12%'."""
    return f"{(rate * 100).quantize(_WHOLE, rounding=ROUND_HALF_UP):.0f}%"
