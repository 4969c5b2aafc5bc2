import io
from decimal import Decimal

from rich.console import Console

from cashier.logs import DebugLog, ErrorLog
from cashier.errors import ItemNotFoundError
from cashier.observers import TotalRevenueFileOutput, TotalRevenueView


def test_revenue_view_prints_balance():
    buffer = io.StringIO()
    view = TotalRevenueView(Console(file=buffer, width=120, force_terminal=False))

    view.receive(Decimal("25"))

    assert buffer.getvalue().strip() == "Total revenue since program start: 25.00 SEK"


def test_revenue_file_output_appends(tmp_path):
    path = tmp_path / "out" / "revenue.txt"
    sink = TotalRevenueFileOutput(path)

    sink.receive(Decimal("10"))
    sink.receive(Decimal("12.5"))

    assert path.read_text(encoding="utf-8").splitlines() == [
        "New payment recorded. Current cash in register: 10.00 SEK",
        "New payment recorded. Current cash in register: 12.50 SEK",
    ]


def test_error_log_records_error_type_and_message(tmp_path):
    path = tmp_path / "logs" / "errors.txt"
    log = ErrorLog(path)

    log.log(ItemNotFoundError("99", "External Inventory System"))

    line = path.read_text(encoding="utf-8").strip()
    assert "ItemNotFoundError: Item with identifier '99' could not be found in External Inventory System." in line


def test_debug_log_appends_timestamped_lines(tmp_path):
    path = tmp_path / "debug.log"
    log = DebugLog(path)

    log.write("first")
    log.write("second")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [line.split(" ", 1)[1] for line in lines] == ["first", "second"]


def test_debug_log_ignores_unwritable_path(tmp_path):
    DebugLog(tmp_path).write("goes nowhere")
