from decimal import Decimal

import pytest

from cashier.accounting import AccountingLedger
from cashier.catalog import ItemCatalog
from cashier.controller import Controller
from cashier.discount import DiscountService
from cashier.errors import ConnectivityError, InsufficientPaymentError, ItemNotFoundError, NoActiveSaleError
from cashier.logs import DebugLog, ErrorLog
from cashier.receipt import ReceiptPrinter


@pytest.fixture
def error_path(tmp_path):
    return tmp_path / "errors.txt"


@pytest.fixture
def controller(tmp_path, error_path, item_a, item_b, drawer):
    debug_log = DebugLog(tmp_path / "debug.log")
    return Controller(
        catalog=ItemCatalog([item_a, item_b]),
        printer=ReceiptPrinter(),
        accounting=AccountingLedger(debug_log),
        discounts=DiscountService(),
        drawer=drawer,
        error_log=ErrorLog(error_path),
        debug_log=debug_log,
    )


def test_register_item_before_start_is_logged(controller, error_path):
    with pytest.raises(NoActiveSaleError):
        controller.register_item("A")
    assert "NoActiveSaleError" in error_path.read_text(encoding="utf-8")


def test_register_item_adds_then_increases(controller):
    controller.start_sale()

    first = controller.register_item("A")
    second = controller.register_item("a")

    assert "Quantity: 1" in first
    assert "Quantity: 2" in second
    assert controller.current_sale.running_total == Decimal("20.00")
    assert controller.end_sale() == Decimal("20.00")


def test_unknown_item_is_logged_and_reraised(controller, error_path):
    controller.start_sale()
    with pytest.raises(ItemNotFoundError):
        controller.register_item("Z")
    assert "ItemNotFoundError" in error_path.read_text(encoding="utf-8")
    assert controller.current_sale.line_items() == []


def test_unreachable_inventory_is_logged_and_reraised(controller, error_path):
    controller.start_sale()
    with pytest.raises(ConnectivityError):
        controller.register_item("error")
    assert "ConnectivityError" in error_path.read_text(encoding="utf-8")


def test_end_sale_does_not_apply_discount(controller):
    controller.start_sale()
    controller.register_item("B")
    assert controller.end_sale(customer_id="cust-1") == Decimal("15.00")


def test_process_sale_prints_accounts_and_closes_sale(controller, drawer, make_observer):
    observer = make_observer()
    controller.add_revenue_observer(observer)
    sale = controller.start_sale()
    controller.register_item("A")
    controller.register_item("B")

    result = controller.process_sale("30")

    assert result.change == Decimal("5.00")
    assert result.time_of_sale == sale.time_of_sale
    assert drawer.balance == Decimal("25.00")
    assert observer.received == [Decimal("25.00")]
    assert controller.accounting.accounted == [result]
    assert "Change: 5.00 SEK" in controller.printer.last_printed.plain
    assert controller.current_sale is None


def test_short_payment_keeps_sale_open_for_retry(controller, drawer, error_path):
    controller.start_sale()
    controller.register_item("A")

    with pytest.raises(InsufficientPaymentError) as excinfo:
        controller.process_sale(Decimal("5.00"))

    assert excinfo.value.shortfall == Decimal("5.00")
    assert drawer.balance == Decimal("0")
    assert controller.accounting.accounted == []
    assert "InsufficientPaymentError" in error_path.read_text(encoding="utf-8")

    result = controller.process_sale(Decimal("10.00"))
    assert result.change == Decimal("0")
    assert drawer.balance == Decimal("10.00")


def test_consecutive_sales_share_the_drawer(controller, drawer):
    controller.start_sale()
    controller.register_item("A")
    controller.process_sale("10")
    controller.start_sale()
    controller.register_item("B")
    controller.process_sale("20")

    assert drawer.balance == Decimal("25.00")
    assert len(controller.accounting.accounted) == 2


def test_observer_failure_is_logged_and_paid_sale_is_closed(controller, drawer, error_path, failing_once_observer):
    controller.add_revenue_observer(failing_once_observer)
    controller.start_sale()
    controller.register_item("A")

    with pytest.raises(OSError):
        controller.process_sale("10")

    assert "OSError: disk full" in error_path.read_text(encoding="utf-8")
    assert drawer.balance == Decimal("10.00")
    assert controller.current_sale is None
    with pytest.raises(NoActiveSaleError):
        controller.process_sale("10")
    assert drawer.balance == Decimal("10.00")


def test_invalid_amount_is_logged_and_sale_stays_open(controller, drawer, error_path):
    controller.start_sale()
    controller.register_item("A")

    with pytest.raises(ValueError):
        controller.process_sale("ten")

    assert "ValueError" in error_path.read_text(encoding="utf-8")
    assert controller.current_sale is not None
    assert drawer.balance == Decimal("0")
