"""Customer discount lookup."""

from __future__ import annotations

from decimal import Decimal

NO_DISCOUNT = Decimal("1")


class DiscountService:
    """Placeholder discount database.

    Every customer gets the neutral factor. Totals are never multiplied by it.
    """

    def lookup(self, customer_id: str) -> Decimal:
        return NO_DISCOUNT
