"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from restobill.domain.exceptions import InvalidQuantityError, ValidationError
from restobill.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_subtraction(self):
        result = Money.of("10") - Money.of("3")
        assert result == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_apply_rate_rounds_half_up_to_cents(self):
        assert Money.of("130").apply_rate(Decimal("0.05")) == Money.of("6.50")
        assert Money.of("0.30").apply_rate(Decimal("0.05")) == Money.of("0.02")
        assert Money.of("1109.50").apply_rate(Decimal("0.10")) == Money.of("110.95")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("9.5")) == "9.50"

    def test_greater_than(self):
        assert Money.of("10.01") > Money.of("10")
        assert not Money.of("10") > Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(2.5)

    def test_addition(self):
        assert Quantity(1) + Quantity(2) == Quantity(3)

    def test_str(self):
        assert str(Quantity(7)) == "7"
