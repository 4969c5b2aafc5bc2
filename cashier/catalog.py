"""Item catalog backed by an inventory file or the built-in rows."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from cashier.config import INVENTORY_PATH
from cashier.constant import CONNECTIVITY_SENTINEL_ID, DEFAULT_CATALOG_ROWS, INVENTORY_SOURCE_NAME
from cashier.errors import ConnectivityError, ItemNotFoundError
from cashier.models import CatalogEntry


def _entry_from_row(row: tuple[str, str, str, str, str] | list[str]) -> CatalogEntry:
    name, item_id, description, price, vat_rate = row
    return CatalogEntry(
        item_id=item_id,
        name=name.replace("_", " "),
        description=description.replace("_", " "),
        price=price,
        vat_rate=vat_rate,
    )


def parse_inventory(lines: Iterable[str]) -> list[CatalogEntry]:
    """Parse inventory rows of the form ``name id description price vat_rate``.

    Underscores inside name and description stand for spaces. Blank lines and
    ``#`` comments are skipped.
    """
    entries: list[CatalogEntry] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) != 5:
            raise ValueError(f"Inventory line {line_no}: expected 5 fields, got {len(fields)}")
        try:
            entries.append(_entry_from_row(fields))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Inventory line {line_no}: {exc}") from exc
    return entries


class ItemCatalog:
    """Read-only lookup of sellable items by id."""

    def __init__(self, entries: Iterable[CatalogEntry], source: str = INVENTORY_SOURCE_NAME) -> None:
        self.source = source
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries:
            key = entry.item_id.lower()
            if key in self._entries:
                raise ValueError(f"Duplicate catalog id: {entry.item_id}")
            self._entries[key] = entry

    @classmethod
    def from_file(cls, path: str | Path) -> ItemCatalog:
        with Path(path).open("r", encoding="utf-8") as fh:
            return cls(parse_inventory(fh))

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def lookup(self, item_id: str) -> CatalogEntry:
        """Return the entry for ``item_id`` (case-insensitive)."""
        key = item_id.strip().lower()
        if key == CONNECTIVITY_SENTINEL_ID:
            raise ConnectivityError(self.source)
        entry = self._entries.get(key)
        if entry is None:
            raise ItemNotFoundError(item_id, self.source)
        return entry

    def search(self, query: str) -> list[CatalogEntry]:
        """Entries whose id or name contains ``query``, in catalog order."""
        q = query.strip().lower()
        if not q:
            return self.entries()
        return [entry for entry in self._entries.values() if q in entry.item_id.lower() or q in entry.name.lower()]


def load_catalog(path: str | Path | None = INVENTORY_PATH) -> ItemCatalog:
    """Load the catalog from ``path``, or the built-in rows when no path is configured."""
    if path:
        return ItemCatalog.from_file(path)
    return ItemCatalog(_entry_from_row(row) for row in DEFAULT_CATALOG_ROWS)
