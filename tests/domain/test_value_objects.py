"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money, ProductId


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_normalizes_to_two_places(self):
        m = Money(Decimal("10.5"))
        assert m.amount == Decimal("10.50")
        assert str(m.amount) == "10.50"

    def test_rounds_half_up(self):
        assert Money(Decimal("2.345")).amount == Decimal("2.35")
        assert Money(Decimal("2.344")).amount == Decimal("2.34")
        assert Money(Decimal("-2.345")).amount == Decimal("-2.35")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10.00")

    def test_of_factory_from_float_uses_decimal_repr(self):
        assert Money.of(25.99).amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.0)

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("Infinity"))

    def test_negative_amount_allowed(self):
        m = Money.of("-10")
        assert m.amount == Decimal("-10.00")
        assert m.is_negative()

    def test_zero_is_not_negative(self):
        assert not Money.of("0").is_negative()
        assert not Money.of("-0.001").is_negative()

    def test_rounding_to_zero_drops_the_sign(self):
        m = Money.of("-0.001")
        assert str(m) == "0.00"
        assert not m.amount.is_signed()
        assert str(Money.of("1.10") - Money.of("1.10")) == "0.00"

    def test_amounts_wider_than_default_precision(self):
        m = Money(Decimal("12345678901234567890123456789.99"))
        assert str(m) == "12345678901234567890123456789.99"

        m = Money(Decimal("1234567890123456789012345678901234.565"))
        assert str(m) == "1234567890123456789012345678901234.57"

        assert str(Money.of("1E+30")) == "1000000000000000000000000000000.00"

    def test_wide_arithmetic_is_exact(self):
        big = Money.of("99999999999999999999999999999.99")
        assert str(big + Money.of("0.01")) == "100000000000000000000000000000.00"
        assert str(big - Money.of("0.99")) == "99999999999999999999999999999.00"

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")
        assert Money.of("1.10").add(Money.of("2.20")) == Money.of("3.30")

    def test_subtraction_may_go_negative(self):
        result = Money.of("5") - Money.of("10")
        assert result == Money.of("-5")
        assert result.is_negative()
        assert Money.of("10").subtract(Money.of("3")) == Money.of("7")

    def test_equality_and_hash_use_normalized_value(self):
        a = Money(Decimal("10"))
        b = Money(Decimal("10.000"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("-1") <= Money.of("0")

    def test_is_immutable(self):
        m = Money.of("1")
        with pytest.raises(AttributeError):
            m.amount = Decimal("2")

    def test_str(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("-9.5")) == "-9.50"


# ── ProductId ────────────────────────────────────────────────────────────────


class TestProductId:

    def test_generate_is_uuid_text(self):
        pid = ProductId.generate()
        assert len(pid.value) == 36
        assert pid.value.count("-") == 4

    def test_generate_is_unique(self):
        assert len({ProductId.generate() for _ in range(100)}) == 100

    def test_of_wraps_verbatim(self):
        assert ProductId.of("not-a-uuid").value == "not-a-uuid"
        assert str(ProductId.of("abc")) == "abc"

    def test_equality_by_value(self):
        assert ProductId.of("42") == ProductId("42")
        assert ProductId.of("42") != ProductId.of("42 ")
