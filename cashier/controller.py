"""Register controller tying the sale core to its collaborators."""

from __future__ import annotations

from decimal import Decimal

from cashier.accounting import AccountingLedger
from cashier.cash_drawer import CashDrawer, RevenueObserver
from cashier.catalog import ItemCatalog
from cashier.discount import DiscountService
from cashier.errors import CashierError, NoActiveSaleError
from cashier.logs import DebugLog, ErrorLog
from cashier.models import PaymentResult
from cashier.money import format_amount, to_amount
from cashier.receipt import ReceiptPrinter
from cashier.sale import Sale


class Controller:
    """Runs one sale at a time against a shared cash drawer.

    Every error raised on the way is written to the error log and then
    re-raised, so the caller decides how to show it.
    """

    def __init__(
        self,
        catalog: ItemCatalog,
        printer: ReceiptPrinter,
        accounting: AccountingLedger,
        discounts: DiscountService,
        drawer: CashDrawer | None = None,
        error_log: ErrorLog | None = None,
        debug_log: DebugLog | None = None,
    ) -> None:
        self.catalog = catalog
        self.printer = printer
        self.accounting = accounting
        self.discounts = discounts
        self.drawer = drawer or CashDrawer()
        self.error_log = error_log or ErrorLog()
        self.debug_log = debug_log or DebugLog()
        self._current_sale: Sale | None = None

    @property
    def current_sale(self) -> Sale | None:
        return self._current_sale

    def add_revenue_observer(self, observer: RevenueObserver) -> None:
        self.drawer.add_observer(observer)

    def start_sale(self) -> Sale:
        """Open a new sale and its receipt. An unpaid sale in progress is dropped."""
        if self._current_sale is not None:
            self.debug_log.write(f"start_sale dropping unpaid sale time={self._current_sale.time_of_sale}")
        sale = Sale(self.drawer)
        self.printer.create_receipt(sale.time_of_sale)
        self._current_sale = sale
        self.debug_log.write(f"start_sale time={sale.time_of_sale}")
        return sale

    def register_item(self, item_id: str) -> str:
        """Register one unit of ``item_id`` and return the sale summary text."""
        try:
            sale = self._require_sale()
            if sale.item_exists(item_id):
                return sale.increase_quantity(item_id)
            entry = self.catalog.lookup(item_id)
            if sale.item_exists(entry.item_id):
                return sale.increase_quantity(entry.item_id)
            return sale.register_new(entry)
        except CashierError as exc:
            self._log_error(exc)
            raise

    def end_sale(self, customer_id: str | None = None) -> Decimal:
        """Return the total to pay. Discounts are looked up but not applied."""
        try:
            sale = self._require_sale()
        except CashierError as exc:
            self._log_error(exc)
            raise
        if customer_id:
            factor = self.discounts.lookup(customer_id)
            self.debug_log.write(f"end_sale customer={customer_id!r} discount_factor={factor} (not applied)")
        self.debug_log.write(f"end_sale total={format_amount(sale.running_total, None)}")
        return sale.running_total

    def process_sale(self, amount_paid: Decimal | int | str) -> PaymentResult:
        """Take payment for the current sale, print the receipt and account for it.

        On a short payment the sale stays open so payment can be retried. When
        a revenue observer fails after the drawer was credited, the error is
        logged and re-raised and the sale is no longer current, since it is paid.
        """
        try:
            sale = self._require_sale()
            result = sale.finalize(to_amount(amount_paid))
        except Exception as exc:
            self._log_error(exc)
            if self._current_sale is not None and self._current_sale.is_finalized:
                self.debug_log.write(f"process_sale paid without receipt time={self._current_sale.time_of_sale}")
                self._current_sale = None
            raise
        self._current_sale = None
        self.debug_log.write(
            f"process_sale time={result.time_of_sale} paid={format_amount(result.amount_paid, None)} "
            f"change={format_amount(result.change, None)} drawer={format_amount(self.drawer.balance, None)}"
        )
        self.printer.print_receipt(result)
        self.accounting.account_sale(result)
        return result

    def _require_sale(self) -> Sale:
        if self._current_sale is None:
            raise NoActiveSaleError()
        return self._current_sale

    def _log_error(self, exc: Exception) -> None:
        self.debug_log.write(f"error {type(exc).__name__}: {exc}")
        self.error_log.log(exc)
