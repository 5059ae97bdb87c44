"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from workshop.domain.exceptions import ValidationError
from workshop.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("150000"))
        assert m.amount == Decimal("150000")
        assert m.currency == "UZS"

    def test_of_factory_from_string(self):
        assert Money.of("25000").amount == Decimal("25000")

    def test_of_factory_strips_whitespace(self):
        assert Money.of(" 1200 ").amount == Decimal("1200")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_text(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_factory_rejects_empty(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("Infinity")

    def test_zero_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "UZS") + Money(Decimal("5"), "USD")

    def test_decimal_sum_is_exact(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.1")
        assert total == Money.of("1.0")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
