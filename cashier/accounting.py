"""External accounting system integration."""

from __future__ import annotations

from cashier.logs import DebugLog
from cashier.models import PaymentResult
from cashier.money import format_amount


class AccountingLedger:
    """Record paid sales for bookkeeping.

    Nothing is sent anywhere; accounted results are kept in memory and traced
    to the debug log.
    """

    def __init__(self, debug_log: DebugLog | None = None) -> None:
        self.debug_log = debug_log or DebugLog()
        self.accounted: list[PaymentResult] = []

    def account_sale(self, result: PaymentResult) -> None:
        self.accounted.append(result)
        self.debug_log.write(
            f"account_sale time={result.time_of_sale} total={format_amount(result.total_price, None)} "
            f"vat={format_amount(result.total_vat, None)}"
        )
