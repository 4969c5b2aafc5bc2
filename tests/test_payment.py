from decimal import Decimal

import pytest

from cashier.errors import InsufficientPaymentError
from cashier.payment import compute_change


def test_change_is_paid_minus_total():
    assert compute_change(Decimal("30.00"), Decimal("25.00")) == Decimal("5.00")


def test_exact_payment_gives_zero_change():
    assert compute_change(Decimal("25.00"), Decimal("25.00")) == Decimal("0")


def test_short_payment_reports_shortfall():
    with pytest.raises(InsufficientPaymentError) as excinfo:
        compute_change(Decimal("5.00"), Decimal("10.00"))

    assert excinfo.value.shortfall == Decimal("5.00")
    assert excinfo.value.amount_paid == Decimal("5.00")
    assert excinfo.value.total_price == Decimal("10.00")
