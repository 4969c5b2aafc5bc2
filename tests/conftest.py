"""Shared fixtures for register tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cashier.cash_drawer import CashDrawer
from cashier.models import CatalogEntry


class RecordingObserver:
    """Revenue observer that remembers every balance it was sent."""

    def __init__(self, name: str = "observer", journal: list | None = None) -> None:
        self.name = name
        self.received: list[Decimal] = []
        self.journal = journal

    def receive(self, balance: Decimal) -> None:
        self.received.append(balance)
        if self.journal is not None:
            self.journal.append((self.name, balance))


class FailingOnceObserver:
    """Revenue observer whose first delivery fails, like a sink on a full disk."""

    def __init__(self) -> None:
        self.calls = 0
        self.received: list[Decimal] = []

    def receive(self, balance: Decimal) -> None:
        self.calls += 1
        if self.calls == 1:
            raise OSError("disk full")
        self.received.append(balance)


@pytest.fixture
def item_a() -> CatalogEntry:
    return CatalogEntry("A", "Apple juice", "Fresh pressed 1 l", Decimal("10.00"), Decimal("0.12"))


@pytest.fixture
def item_b() -> CatalogEntry:
    return CatalogEntry("B", "Book", "Paperback novel", Decimal("15.00"), Decimal("0.06"))


@pytest.fixture
def drawer() -> CashDrawer:
    return CashDrawer()


@pytest.fixture
def make_observer():
    return RecordingObserver


@pytest.fixture
def failing_once_observer() -> FailingOnceObserver:
    return FailingOnceObserver()

