"""Main Textual app class."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from cashier.config import PRINTER_ENABLED
from cashier.controller import Controller
from cashier.errors import CashierError
from cashier.models import CatalogEntry
from cashier.money import format_amount
from cashier.payment_modal import PaymentModal
from cashier.printer import check_printer_dependencies, print_receipt_ticket
from cashier.rendering import describe_error, format_line_item, format_totals, receipt_lines


class RegisterApp(App):
    """A Textual register for scanning items and taking cash payments.

    The app subscribes to the cash drawer and shows the running revenue.
    """

    TITLE = "Cashier"
    SUB_TITLE = "Process sale"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #sale-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #sale-lines {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #sale-totals {
        height: 1;
        margin-top: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    search_query = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next result"),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "register_selected", "Register item"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+p", "pay", "Pay", priority=True),
        Binding("ctrl+n", "new_sale", "New sale", priority=True),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: Controller, print_tickets: bool = PRINTER_ENABLED) -> None:
        super().__init__()
        self.controller = controller
        self.print_tickets = print_tickets
        self.system_status = ""
        self.revenue = controller.drawer.balance
        self.last_receipt: Text | None = None
        controller.add_revenue_observer(self)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        self.controller.debug_log.write(message)

    def receive(self, balance: Decimal) -> None:
        self.revenue = balance
        self._log_debug(f"revenue balance={format_amount(balance, None)}")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="sale-pane"):
                yield Static("Current Sale", classes="pane-title", id="sale-title")
                yield Static("(no items yet)", id="sale-lines")
                yield Static(id="sale-totals")
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        if self.print_tickets:
            _, msg = check_printer_dependencies()
            self.system_status = msg
            self._log_debug(f"on_mount printer_status={msg!r}")
        self.controller.start_sale()
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, PaymentModal):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character
        if self.input_state == "normal":
            key = char.lower()
            if key == "n":
                self.action_new_sale()
                event.stop()
                return

            if key == "p":
                self.action_pay()
                event.stop()
                return

            if key != "s" and not char.isdigit():
                return

            self.input_state = "active"
            self.search_query = char if char.isdigit() else ""
            self.selected_index = 0
            self._refresh_search()
            event.stop()
            return

        if not (char.isalnum() or char in {" ", "-", "_"}):
            return
        self.search_query += char
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_register_selected(self) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if results:
            item_id = results[self.selected_index].item_id
        elif self.search_query.strip():
            # Let the catalog report unknown ids.
            item_id = self.search_query.strip()
        else:
            return
        self._register_item(item_id)

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_new_sale(self) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        sale = self.controller.start_sale()
        self.last_receipt = None
        self.system_status = f"New sale started {sale.time_of_sale}"
        self._refresh_all()

    def action_pay(self) -> None:
        self._log_debug(f"pay_enter state={self.input_state!r} screen={type(self.screen).__name__}")
        if isinstance(self.screen, PaymentModal):
            return
        if self.input_state != "normal":
            self.system_status = "Pay only in NORMAL mode (Ctrl+C to exit search)"
            self._refresh_search()
            return
        sale = self.controller.current_sale
        if sale is None or not sale.line_items():
            self.system_status = "Nothing to pay"
            self._refresh_search()
            self._log_debug("pay_blocked reason=no_items")
            return

        total = self.controller.end_sale()
        self.push_screen(PaymentModal(total), callback=self._on_payment_entered)

    def _on_payment_entered(self, amount: Decimal | None) -> None:
        if amount is None:
            self.system_status = "Payment cancelled"
            self._refresh_search()
            return

        try:
            result = self.controller.process_sale(amount)
        except CashierError as exc:
            self.system_status = describe_error(exc)
            self._refresh_search()
            self._log_debug(f"pay_failed error={exc!r}")
            return
        except Exception as exc:
            # Already in the error log; a paid sale has been closed by the controller.
            if self.controller.current_sale is None:
                self.system_status = f"Paid, but payment follow-up failed: {exc}"
            else:
                self.system_status = f"Payment failed: {exc}"
            self._log_debug(f"pay_failed error={exc!r}")
            self._refresh_all()
            return

        self.last_receipt = self.controller.printer.last_printed
        self.system_status = f"Paid. Change: {format_amount(result.change)}"
        if self.print_tickets:
            try:
                print_receipt_ticket(receipt_lines(result))
            except Exception as exc:
                self.system_status = f"Paid, change {format_amount(result.change)}, but print failed: {exc}"
                self._log_debug(f"pay_print_failed time={result.time_of_sale} error={exc!r}")
        self._refresh_all()
        self._log_debug(f"pay_done time={result.time_of_sale}")

    def _register_item(self, item_id: str) -> None:
        if self.controller.current_sale is None:
            self.controller.start_sale()
            self.last_receipt = None
        try:
            summary = self.controller.register_item(item_id)
        except CashierError as exc:
            self.system_status = describe_error(exc)
        else:
            self.system_status = summary.strip().splitlines()[0]
        self._refresh_all()

    def _filtered_results(self) -> list[CatalogEntry]:
        return self.controller.catalog.search(self.search_query)

    def _refresh_all(self) -> None:
        self._refresh_sale()
        self._refresh_search()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_sale(self) -> None:
        try:
            lines_widget = self.query_one("#sale-lines", Static)
            totals_widget = self.query_one("#sale-totals", Static)
        except NoMatches:
            return

        sale = self.controller.current_sale
        if sale is None:
            lines_widget.update(self.last_receipt or "(no sale in progress)")
            totals_widget.update("")
            return

        line_items = sale.line_items()
        totals_widget.update(format_totals(sale.running_total, sale.running_vat))
        if not line_items:
            lines_widget.update("(no items yet)")
            return

        visible_rows = self._visible_rows(lines_widget)
        # Keep the most recent lines in view.
        start, end = self._window_bounds(len(line_items), visible_rows, len(line_items) - 1)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_line_item(line_items[idx]))
        lines_widget.update(lines)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        revenue = format_amount(self.revenue)
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"S or digits to search. P pay. N new sale.\n{status}\nRevenue: {revenue}")
            return

        text = Text()
        text.append("ID", style="bold #ffffff on #2f6db5")
        text.append(f": {self.search_query}")
        if self.system_status:
            text.append(f"\n{self.system_status}", style="dim")
        bar.update(text)

    def _refresh_results(self, results: list[CatalogEntry]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("No results (Enter looks up the typed id)")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            entry = results[idx]
            lines.append(f"{pointer}{entry.item_id}  {entry.name}  {format_amount(entry.price)}")

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
