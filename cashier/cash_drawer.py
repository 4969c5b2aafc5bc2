"""Cash drawer shared by consecutive sales."""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Protocol

from cashier.money import ZERO


class RevenueObserver(Protocol):
    """Anything that wants to hear the drawer balance after each deposit."""

    def receive(self, balance: Decimal) -> None: ...


class CashDrawer:
    """Cumulative cash balance that notifies its observers on every deposit."""

    def __init__(self) -> None:
        self._balance = ZERO
        self._observers: list[RevenueObserver] = []
        # Balance update and notification form one unit. Reentrant so an
        # observer may read or deposit from inside receive.
        self._lock = threading.RLock()

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def observers(self) -> tuple[RevenueObserver, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: RevenueObserver) -> None:
        """Subscribe ``observer`` to every later deposit."""
        with self._lock:
            self._observers.append(observer)

    def deposit(self, amount: Decimal) -> Decimal:
        """Add ``amount`` and notify observers, in subscription order, of the new balance."""
        with self._lock:
            self._balance += amount
            balance = self._balance
            for observer in self._observers:
                observer.receive(balance)
        return balance
