"""Payment entry modal screen."""

from __future__ import annotations

from decimal import Decimal

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cashier.money import ZERO, format_amount, to_amount

_MAX_DIGITS = 7
_MAX_DECIMALS = 2


def accept_payment_char(value: str, char: str) -> str:
    """Append ``char`` to the typed amount when it keeps the amount well-formed."""
    if char == ".":
        if "." in value:
            return value
        return (value or "0") + "."
    if not char.isdigit():
        return value
    whole, dot, decimals = value.partition(".")
    if dot:
        if len(decimals) >= _MAX_DECIMALS:
            return value
    elif len(whole) >= _MAX_DIGITS:
        return value
    return value + char


class PaymentModal(ModalScreen[Decimal | None]):
    """Prompt for the amount the customer hands over."""

    CSS = """
    PaymentModal {
        align: center middle;
        background: $background 60%;
    }

    #payment-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #payment-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #payment-prompt {
        color: white;
        margin-bottom: 1;
    }

    #payment-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #payment-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #payment-help {
        color: #dddddd;
    }
    """

    def __init__(self, total: Decimal) -> None:
        super().__init__()
        self.total = total
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="payment-dialog"):
            yield Static("Payment", id="payment-title")
            yield Static(f"Total to pay: {format_amount(self.total)}", id="payment-prompt")
            yield Static(id="payment-value")
            yield Static(id="payment-error")
            yield Static("Digits and '.' only. Enter confirm. Backspace delete. Esc/q/Ctrl+C cancel.", id="payment-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.value = accept_payment_char(self.value, event.character)
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        if not self.value or self.value == ".":
            self.error = "Amount is required."
            self._refresh_content()
            return

        amount = to_amount(self.value)
        if amount <= ZERO:
            self.error = "Amount must be greater than zero."
            self._refresh_content()
            return

        self.dismiss(amount)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#payment-value", Static)
        error_widget = self.query_one("#payment-error", Static)
        value_widget.update(self.value or "")
        error_widget.update(self.error or "")
