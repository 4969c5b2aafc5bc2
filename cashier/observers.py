"""Revenue sinks that subscribe to the cash drawer."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from rich.console import Console

from cashier.config import REVENUE_LOG_PATH
from cashier.money import format_amount


class TotalRevenueView:
    """Show the drawer balance on the console after every payment."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def receive(self, balance: Decimal) -> None:
        self.console.print(f"Total revenue since program start: [bold]{format_amount(balance)}[/bold]")


class TotalRevenueFileOutput:
    """Append the drawer balance to a file after every payment."""

    def __init__(self, path: str | Path = REVENUE_LOG_PATH) -> None:
        self.path = Path(path)

    def receive(self, balance: Decimal) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(f"New payment recorded. Current cash in register: {format_amount(balance)}\n")
