"""Rendering helpers for sale lines, receipts and error messages."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from cashier.errors import (
    ConnectivityError,
    DuplicateItemError,
    InsufficientPaymentError,
    ItemNotFoundError,
    NoActiveSaleError,
    SaleClosedError,
    UnknownItemError,
)
from cashier.models import LineItem, PaymentResult
from cashier.money import format_amount, format_percent

RECEIPT_BEGIN = "------------------ Begin receipt -------------------"
RECEIPT_END = "------------------ End receipt ---------------------"


def vat_badge_style(rate: Decimal) -> str:
    """Return a consistent badge style per VAT band."""
    if rate >= Decimal("0.25"):
        return "bold #ffffff on #b23a48"
    if rate >= Decimal("0.12"):
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def line_item_text(line: LineItem) -> str:
    entry = line.entry
    return (
        f"{entry.name} {line.quantity} x {format_amount(entry.price, None)}"
        f" = {format_amount(line.line_total)}"
    )


def format_line_item(line: LineItem) -> Text:
    """Render a sale line with a colored VAT tag."""
    text = Text()
    text.append(format_percent(line.entry.vat_rate), style=vat_badge_style(line.entry.vat_rate))
    text.append(f" {line_item_text(line)}")
    return text


def format_totals(total: Decimal, vat: Decimal) -> Text:
    text = Text()
    text.append("Total: ", style="bold")
    text.append(format_amount(total))
    text.append("   VAT: ", style="bold")
    text.append(format_amount(vat))
    return text


def receipt_lines(result: PaymentResult) -> list[str]:
    """Plain receipt lines, shared by the console and the thermal printer."""
    lines = [RECEIPT_BEGIN, f"Time of Sale: {result.time_of_sale}", ""]
    lines.extend(line_item_text(line) for line in result.line_items)
    lines.extend(
        [
            f"Total: {format_amount(result.total_price)}",
            f"VAT: {format_amount(result.total_vat)}",
            "",
            f"Cash: {format_amount(result.amount_paid)}",
            f"Change: {format_amount(result.change)}",
            RECEIPT_END,
        ]
    )
    return lines


def format_receipt(result: PaymentResult) -> Text:
    """Render a receipt with the totals and change highlighted."""
    text = Text()
    for idx, line in enumerate(receipt_lines(result)):
        if idx > 0:
            text.append("\n")
        if line.startswith(("Total:", "Change:")):
            text.append(line, style="bold")
        elif line in {RECEIPT_BEGIN, RECEIPT_END}:
            text.append(line, style="dim")
        else:
            text.append(line)
    return text


def describe_error(exc: Exception) -> str:
    """Turn a register error into a message for the cashier."""
    if isinstance(exc, ItemNotFoundError):
        return f"Item not found in inventory: {exc.item_id}"
    if isinstance(exc, ConnectivityError):
        return f"Connection could not be established with {exc.source}. Please try again later."
    if isinstance(exc, InsufficientPaymentError):
        return f"Insufficient payment. The paid amount is {format_amount(exc.shortfall)} below total price."
    if isinstance(exc, (DuplicateItemError, UnknownItemError, SaleClosedError, NoActiveSaleError)):
        return str(exc)
    return f"An error has occurred: {exc}"
