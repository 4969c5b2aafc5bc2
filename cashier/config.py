"""Runtime configuration defaults for logging, catalog loading and printing."""

from __future__ import annotations

import os


def setting(name: str, default: str | None = None) -> str | None:
    """Return an environment override for ``name`` or ``default`` when unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or default


INVENTORY_PATH = setting("CASHIER_INVENTORY_PATH")
ERROR_LOG_PATH = setting("CASHIER_ERROR_LOG_PATH", "out/error_log.txt")
REVENUE_LOG_PATH = setting("CASHIER_REVENUE_LOG_PATH", "out/total_revenue.txt")
DEBUG_LOG_PATH = setting("CASHIER_DEBUG_LOG_PATH", "/tmp/cashier-debug.log")

PRINTER_ENABLED = (setting("CASHIER_PRINTER_ENABLED") or "").lower() in {"1", "true", "yes", "on"}
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
PRINTER_TAIL_SPACER_PX = 70
