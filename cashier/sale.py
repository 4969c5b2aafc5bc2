"""A single sale in progress."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from cashier.cash_drawer import CashDrawer
from cashier.errors import SaleClosedError
from cashier.item_ledger import ItemLedger
from cashier.models import CatalogEntry, LineItem, PaymentResult
from cashier.money import ZERO, format_amount, to_amount
from cashier.payment import compute_change


def _time_of_sale_now() -> str:
    return datetime.now().strftime("%Y-%m-%d_%H:%M")


class Sale:
    """One customer transaction, from the first scanned item until payment.

    Running totals are updated on every successful registration. VAT is summed
    per unit from each entry's own rate, so items with different rates can be
    mixed in one sale.

    A sale is paid exactly once. :meth:`finalize` validates the payment before
    anything is deposited, so a short payment leaves both the sale and the cash
    drawer untouched and can simply be retried.
    """

    def __init__(self, drawer: CashDrawer, time_of_sale: str | None = None) -> None:
        self._drawer = drawer
        self._time_of_sale = time_of_sale or _time_of_sale_now()
        self._ledger = ItemLedger()
        self._running_total = ZERO
        self._running_vat = ZERO
        self._finalized = False

    @property
    def time_of_sale(self) -> str:
        return self._time_of_sale

    @property
    def running_total(self) -> Decimal:
        """Total price so far, VAT included. Provisional until the sale is paid."""
        return self._running_total

    @property
    def running_vat(self) -> Decimal:
        return self._running_vat

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def item_exists(self, item_id: str) -> bool:
        return self._ledger.contains(item_id)

    def line_items(self) -> list[LineItem]:
        return self._ledger.snapshot()

    def register_new(self, entry: CatalogEntry | None) -> str:
        """Add a first unit of ``entry`` and return the item and totals summary."""
        self._ensure_open()
        added = self._ledger.add_new(entry)
        self._add_unit(entry)
        return added + self._totals_summary()

    def increase_quantity(self, item_id: str) -> str:
        """Add one more unit of a registered item and return the item and totals summary."""
        self._ensure_open()
        added = self._ledger.increase_quantity(item_id)
        self._add_unit(self._ledger.lookup(item_id))
        return added + self._totals_summary()

    def finalize(self, amount_paid: Decimal | int | str) -> PaymentResult:
        """Take payment, deposit the total into the drawer and describe the paid sale.

        The sale counts as paid as soon as the drawer is credited. An error from
        a revenue observer still reaches the caller, but the sale stays closed.
        """
        self._ensure_open()
        amount_paid = to_amount(amount_paid)
        change = compute_change(amount_paid, self._running_total)
        self._finalized = True
        self._drawer.deposit(self._running_total)
        return PaymentResult(
            time_of_sale=self._time_of_sale,
            line_items=tuple(self._ledger.snapshot()),
            amount_paid=amount_paid,
            change=change,
            total_price=self._running_total,
            total_vat=self._running_vat,
        )

    def _add_unit(self, entry: CatalogEntry) -> None:
        self._running_total += entry.price
        self._running_vat += entry.unit_vat

    def _totals_summary(self) -> str:
        return (
            f"Total cost (incl. VAT): {format_amount(self._running_total)}\n"
            f"Total VAT: {format_amount(self._running_vat)}\n\n"
        )

    def _ensure_open(self) -> None:
        if self._finalized:
            raise SaleClosedError(self._time_of_sale)
