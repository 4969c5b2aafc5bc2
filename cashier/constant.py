"""Editable static catalog and register data."""

from __future__ import annotations

CURRENCY = "SEK"

# Looking up this id simulates an unreachable inventory backend.
CONNECTIVITY_SENTINEL_ID = "error"
INVENTORY_SOURCE_NAME = "External Inventory System"

# Rows use the inventory file layout: name, id, description, price, vat rate.
DEFAULT_CATALOG_ROWS: list[tuple[str, str, str, str, str]] = [
    ("Milk", "1", "Whole milk 1 l, 3% fat", "14.90", "0.12"),
    ("Bread", "2", "Rye sourdough loaf 750 g", "39.00", "0.12"),
    ("Coffee", "3", "Dark roast ground coffee 450 g", "64.50", "0.12"),
    ("Newspaper", "4", "Daily morning edition", "35.00", "0.06"),
    ("Batteries", "5", "AA alkaline, 4-pack", "49.90", "0.25"),
    ("Umbrella", "6", "Compact folding umbrella", "129.00", "0.25"),
]
