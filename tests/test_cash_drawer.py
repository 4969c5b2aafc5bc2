from decimal import Decimal

import pytest


def test_new_drawer_is_empty(drawer):
    assert drawer.balance == Decimal("0")
    assert drawer.observers == ()


def test_deposit_without_observers_updates_balance(drawer):
    assert drawer.deposit(Decimal("12.50")) == Decimal("12.50")
    assert drawer.balance == Decimal("12.50")


def test_observers_get_cumulative_balance_in_subscription_order(drawer, make_observer):
    journal = []
    first = make_observer("display", journal)
    second = make_observer("file", journal)
    drawer.add_observer(first)
    drawer.add_observer(second)

    drawer.deposit(Decimal("10.00"))
    drawer.deposit(Decimal("2.50"))

    assert journal == [
        ("display", Decimal("10.00")),
        ("file", Decimal("10.00")),
        ("display", Decimal("12.50")),
        ("file", Decimal("12.50")),
    ]
    assert first.received == [Decimal("10.00"), Decimal("12.50")]


def test_observer_added_later_only_sees_later_deposits(drawer, make_observer):
    drawer.deposit(Decimal("5"))
    late = make_observer()
    drawer.add_observer(late)

    drawer.deposit(Decimal("1"))

    assert late.received == [Decimal("6")]


def test_observer_failure_propagates_after_balance_update(drawer):
    class Broken:
        def receive(self, balance):
            raise OSError("disk full")

    drawer.add_observer(Broken())
    with pytest.raises(OSError):
        drawer.deposit(Decimal("3"))
    assert drawer.balance == Decimal("3")


def test_observer_may_read_balance_during_notification(drawer):
    seen = []

    class Reader:
        def receive(self, balance):
            seen.append((balance, drawer.balance))

    drawer.add_observer(Reader())
    drawer.deposit(Decimal("4"))

    assert seen == [(Decimal("4"), Decimal("4"))]
