"""Domain models for the register."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from cashier.money import ZERO, to_amount


@dataclass(frozen=True)
class CatalogEntry:
    """A sellable item as described by the inventory."""

    item_id: str
    name: str
    description: str
    price: Decimal
    vat_rate: Decimal

    def __post_init__(self) -> None:
        price = to_amount(self.price)
        vat_rate = to_amount(self.vat_rate)
        if not self.item_id:
            raise ValueError("item_id must not be empty")
        if price < ZERO:
            raise ValueError(f"price must not be negative, got {price}")
        if not (ZERO <= vat_rate <= 1):
            raise ValueError(f"vat_rate must be between 0 and 1, got {vat_rate}")
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "vat_rate", vat_rate)

    @property
    def unit_vat(self) -> Decimal:
        return self.price * self.vat_rate


@dataclass(frozen=True)
class LineItem:
    """One catalog entry of a sale together with its quantity."""

    entry: CatalogEntry
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.entry.price * self.quantity

    @property
    def line_vat(self) -> Decimal:
        return self.entry.unit_vat * self.quantity


@dataclass(frozen=True)
class PaymentResult:
    """Everything the receipt printer and accounting need about a paid sale."""

    time_of_sale: str
    line_items: tuple[LineItem, ...]
    amount_paid: Decimal
    change: Decimal
    total_price: Decimal
    total_vat: Decimal
