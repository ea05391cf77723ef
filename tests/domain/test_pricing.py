"""Unit tests for the pricing policy."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.pricing import PricingPolicy
from storefront.domain.model.value_objects import Money


class TestShipping:

    def test_fee_at_or_below_threshold(self):
        policy = PricingPolicy()
        assert policy.shipping(Money.of("25.00")) == Money.of("9.99")
        assert policy.shipping(Money.of("100.00")) == Money.of("9.99")

    def test_free_strictly_above_threshold(self):
        assert PricingPolicy().shipping(Money.of("100.01")) == Money.zero()

    def test_custom_threshold_and_fee(self):
        policy = PricingPolicy(
            free_shipping_threshold=Money.of("50"), shipping_fee=Money.of("4.50")
        )
        assert policy.shipping(Money.of("50")) == Money.of("4.50")
        assert policy.shipping(Money.of("60")) == Money.zero()


class TestTax:

    def test_no_tax_by_default(self):
        assert PricingPolicy().tax(Money.of("150.00")) == Money.zero()

    def test_flat_rate(self):
        policy = PricingPolicy(tax_rate=Decimal("0.08"))
        assert policy.tax(Money.of("150.00")) == Money.of("12.00")

    def test_rate_of_one_or_more_rejected(self):
        with pytest.raises(ValidationError, match="Tax rate"):
            PricingPolicy(tax_rate=Decimal("1"))
