import pytest

from cashier.errors import DuplicateItemError, InvalidItemError, UnknownItemError
from cashier.item_ledger import ItemLedger


def test_new_ledger_is_empty():
    ledger = ItemLedger()
    assert len(ledger) == 0
    assert not ledger.contains("A")
    assert ledger.lookup("A") is None
    assert ledger.snapshot() == []


def test_add_new_records_quantity_one(item_a):
    ledger = ItemLedger()
    summary = ledger.add_new(item_a)

    assert ledger.contains("A")
    assert "A" in ledger
    assert ledger.quantity("A") == 1
    assert ledger.lookup("A") is item_a
    assert "Added 1 item with ID A:" in summary
    assert "Item Name: Apple juice" in summary
    assert "Price: 10.00 SEK" in summary
    assert "VAT: 12%" in summary
    assert "Description: Fresh pressed 1 l" in summary
    assert "Quantity: 1" in summary


def test_add_new_rejects_missing_entry():
    with pytest.raises(InvalidItemError):
        ItemLedger().add_new(None)


def test_add_new_twice_fails_and_leaves_ledger_unchanged(item_a):
    ledger = ItemLedger()
    ledger.add_new(item_a)

    with pytest.raises(DuplicateItemError) as excinfo:
        ledger.add_new(item_a)

    assert excinfo.value.item_id == "A"
    assert ledger.quantity("A") == 1
    assert len(ledger) == 1


def test_increase_quantity_reports_new_quantity(item_a):
    ledger = ItemLedger()
    ledger.add_new(item_a)

    summary = ledger.increase_quantity("A")

    assert ledger.quantity("A") == 2
    assert "Quantity: 2" in summary


def test_increase_quantity_of_unknown_item_creates_nothing():
    ledger = ItemLedger()
    with pytest.raises(UnknownItemError) as excinfo:
        ledger.increase_quantity("Z")

    assert excinfo.value.item_id == "Z"
    assert not ledger.contains("Z")
    assert ledger.quantity("Z") == 0


def test_snapshot_keeps_registration_order_and_is_detached(item_a, item_b):
    ledger = ItemLedger()
    ledger.add_new(item_b)
    ledger.add_new(item_a)
    ledger.increase_quantity("B")

    snapshot = ledger.snapshot()
    assert [(line.entry.item_id, line.quantity) for line in snapshot] == [("B", 2), ("A", 1)]

    snapshot.clear()
    ledger.increase_quantity("A")
    assert [(line.entry.item_id, line.quantity) for line in ledger.snapshot()] == [("B", 2), ("A", 2)]
