"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class TestMoney:

    def test_document_prices_parse_exactly(self):
        assert Money.of("25.99").amount == Decimal("25.99")
        assert Money.of(89.99).amount == Decimal("89.99")
        assert Money.of(10).currency == "USD"

    def test_unparseable_price(self):
        with pytest.raises(ValidationError, match="Not a price"):
            Money.of("ten dollars")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["-1", "NaN", "Infinity"])
    def test_negative_or_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="non-negative"):
            Money(Decimal(raw))

    def test_line_arithmetic(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_only_whole_counts_multiply(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            Money.of("7.50") * True

    def test_percent_rounds_half_up_to_cents(self):
        assert Money.of("25.00").percent(Decimal("0.08")) == Money.of("2.00")
        # 0.0625 * 0.08 = 0.005 -> 0.01
        assert Money.of("0.0625").percent(Decimal("0.08")) == Money.of("0.01")

    def test_currency_mismatch(self):
        with pytest.raises(ValidationError, match="Currency mismatch"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_ordering(self):
        assert Money.of("99.99") < Money.of("100.00")
        assert Money.of("100.01") > Money.of("100.00")
        assert Money.of("100") >= Money.of("100.00")
        assert Money.zero() <= Money.of("0")

    def test_display(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


class TestQuantity:

    @pytest.mark.parametrize("value", [0, -3])
    def test_below_one_rejected(self, value):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(value)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="whole number"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
