"""Entry point for the cashier register."""

from __future__ import annotations

import argparse
from decimal import Decimal

from rich.console import Console

from cashier.accounting import AccountingLedger
from cashier.cash_drawer import CashDrawer
from cashier.catalog import load_catalog
from cashier.config import INVENTORY_PATH
from cashier.controller import Controller
from cashier.discount import DiscountService
from cashier.errors import CashierError
from cashier.logs import DebugLog, ErrorLog
from cashier.money import format_amount
from cashier.observers import TotalRevenueFileOutput, TotalRevenueView
from cashier.receipt import ReceiptPrinter
from cashier.rendering import describe_error

# Scripted sale: repeats, an unknown-to-the-sale item and a simulated outage.
AUTO_ITEM_IDS = ("1", "5", "4", "1", "5", "3", "error")
AUTO_PAYMENT = Decimal("700")


def build_controller(
    console: Console | None = None,
    inventory_path: str | None = INVENTORY_PATH,
    revenue_file: TotalRevenueFileOutput | None = None,
    error_log: ErrorLog | None = None,
    debug_log: DebugLog | None = None,
) -> Controller:
    """Wire the controller with its collaborators and the file revenue sink."""
    debug_log = debug_log or DebugLog()
    controller = Controller(
        catalog=load_catalog(inventory_path),
        printer=ReceiptPrinter(console),
        accounting=AccountingLedger(debug_log),
        discounts=DiscountService(),
        drawer=CashDrawer(),
        error_log=error_log,
        debug_log=debug_log,
    )
    controller.add_revenue_observer(revenue_file or TotalRevenueFileOutput())
    return controller


def run_auto(controller: Controller, console: Console) -> None:
    """Run one scripted sale on the console."""
    controller.add_revenue_observer(TotalRevenueView(console))
    controller.start_sale()
    for item_id in AUTO_ITEM_IDS:
        try:
            console.print(controller.register_item(item_id), end="", markup=False, highlight=False)
        except CashierError as exc:
            console.print(describe_error(exc), style="bold red")

    total = controller.end_sale()
    console.print(f"Sale ended. Total price: {format_amount(total)}")
    try:
        controller.process_sale(AUTO_PAYMENT)
    except CashierError as exc:
        console.print(describe_error(exc), style="bold red")


def main(argv: list[str] | None = None) -> None:
    """Run the register, as a Textual app or as a scripted console demo."""
    parser = argparse.ArgumentParser(description="Cashier - point-of-sale register")
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Run a scripted sale on the console instead of the interactive register",
    )
    parser.add_argument(
        "--inventory",
        default=INVENTORY_PATH,
        help="Inventory file (name id description price vat_rate per line); built-in catalog if omitted",
    )
    args = parser.parse_args(argv)

    if args.auto:
        console = Console()
        run_auto(build_controller(console, inventory_path=args.inventory), console)
        return

    from cashier.register_app import RegisterApp

    RegisterApp(build_controller(inventory_path=args.inventory)).run()


if __name__ == "__main__":
    main()
