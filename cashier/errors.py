"""Error types raised by the sale core and its collaborators."""

from __future__ import annotations

from decimal import Decimal


class CashierError(Exception):
    """Base class for every error raised by the register."""


class InvalidItemError(CashierError):
    """A missing catalog entry was handed to the item ledger."""

    def __init__(self, message: str = "Cannot add a missing item.") -> None:
        super().__init__(message)


class DuplicateItemError(CashierError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item with ID {item_id} already exists in the sale.")
        self.item_id = item_id


class UnknownItemError(CashierError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item with ID {item_id} does not exist in the sale.")
        self.item_id = item_id


class InsufficientPaymentError(CashierError):
    """The tendered amount does not cover the total price."""

    def __init__(self, shortfall: Decimal, amount_paid: Decimal, total_price: Decimal) -> None:
        super().__init__(
            f"Paid {amount_paid} does not cover total {total_price}; {shortfall} is missing."
        )
        self.shortfall = shortfall
        self.amount_paid = amount_paid
        self.total_price = total_price


class ItemNotFoundError(CashierError):
    def __init__(self, item_id: str, source: str) -> None:
        super().__init__(f"Item with identifier '{item_id}' could not be found in {source}.")
        self.item_id = item_id
        self.source = source


class ConnectivityError(CashierError):
    """The backing store of a collaborator could not be reached."""

    def __init__(self, source: str) -> None:
        super().__init__(f"{source} could not be reached.")
        self.source = source


class SaleClosedError(CashierError):
    def __init__(self, time_of_sale: str) -> None:
        super().__init__(f"Sale started at {time_of_sale} is already paid.")
        self.time_of_sale = time_of_sale


class NoActiveSaleError(CashierError):
    def __init__(self) -> None:
        super().__init__("No sale is in progress. Start a new sale first.")
