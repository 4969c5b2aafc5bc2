"""Items registered to the sale in progress."""

from __future__ import annotations

from cashier.errors import DuplicateItemError, InvalidItemError, UnknownItemError
from cashier.models import CatalogEntry, LineItem
from cashier.money import format_amount, format_percent


def added_item_summary(entry: CatalogEntry, quantity: int) -> str:
    """Describe an item that was just added to a sale."""
    return (
        f"Added 1 item with ID {entry.item_id}:\n"
        f"Item Name: {entry.name}\n"
        f"Price: {format_amount(entry.price)}\n"
        f"VAT: {format_percent(entry.vat_rate)}\n"
        f"Description: {entry.description}\n"
        f"Quantity: {quantity}\n\n"
    )


class ItemLedger:
    """Tracks which catalog entries belong to one sale and how many of each.

    Entries and quantities are kept in two dicts keyed by item id. Both always
    hold exactly the same keys, and dict ordering keeps registration order for
    :meth:`snapshot`.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        self._quantities: dict[str, int] = {}

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, item_id: str) -> bool:
        return item_id in self._entries

    def add_new(self, entry: CatalogEntry | None) -> str:
        """Record ``entry`` with quantity 1 and return its summary."""
        if entry is None:
            raise InvalidItemError()
        if entry.item_id in self._entries:
            raise DuplicateItemError(entry.item_id)
        self._entries[entry.item_id] = entry
        self._quantities[entry.item_id] = 1
        return added_item_summary(entry, 1)

    def increase_quantity(self, item_id: str) -> str:
        """Add one more unit of an already registered item and return its summary."""
        entry = self._entries.get(item_id)
        if entry is None:
            raise UnknownItemError(item_id)
        self._quantities[item_id] += 1
        return added_item_summary(entry, self._quantities[item_id])

    def lookup(self, item_id: str) -> CatalogEntry | None:
        return self._entries.get(item_id)

    def quantity(self, item_id: str) -> int:
        return self._quantities.get(item_id, 0)

    def snapshot(self) -> list[LineItem]:
        """Return the registered items, in registration order, as a detached list."""
        return [LineItem(entry, self._quantities[item_id]) for item_id, entry in self._entries.items()]
