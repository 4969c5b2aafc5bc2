"""Payment validation and change computation."""

from __future__ import annotations

from decimal import Decimal

from cashier.errors import InsufficientPaymentError
from cashier.money import ZERO


def compute_change(amount_paid: Decimal, total_price: Decimal) -> Decimal:
    """Return the change owed for ``amount_paid`` against ``total_price``.

    Raises :class:`InsufficientPaymentError` when the payment falls short.
    Nothing else is touched; depositing into the drawer is up to the caller.
    """
    change = amount_paid - total_price
    if change < ZERO:
        raise InsufficientPaymentError(
            shortfall=total_price - amount_paid,
            amount_paid=amount_paid,
            total_price=total_price,
        )
    return change
