"""Receipt printer collaborator."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from cashier.models import PaymentResult
from cashier.rendering import format_receipt


class Receipt:
    """A receipt opened when a sale starts and filled in once it is paid."""

    def __init__(self, time_of_sale: str) -> None:
        if not time_of_sale:
            raise ValueError("A receipt needs the time of sale.")
        self.time_of_sale = time_of_sale
        self.result: PaymentResult | None = None

    def fill(self, result: PaymentResult) -> Text:
        if result.time_of_sale != self.time_of_sale:
            raise ValueError(
                f"Receipt opened for {self.time_of_sale} cannot print sale from {result.time_of_sale}"
            )
        self.result = result
        return format_receipt(result)


class ReceiptPrinter:
    """Render receipts, optionally echoing them to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console
        self.current_receipt: Receipt | None = None
        self.last_printed: Text | None = None

    def create_receipt(self, time_of_sale: str) -> Receipt:
        self.current_receipt = Receipt(time_of_sale)
        return self.current_receipt

    def print_receipt(self, result: PaymentResult) -> Text:
        if self.current_receipt is None:
            raise RuntimeError("No receipt has been created. Create a receipt first.")
        rendered = self.current_receipt.fill(result)
        self.last_printed = rendered
        if self.console is not None:
            self.console.print(rendered)
        return rendered
