"""Unit tests for the Product record."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProduct:

    def test_original_price_defaults_to_price(self):
        p = make_product(price="12.00")
        assert p.original_price == Money.of("12.00")
        assert p.discount_percent == 0

    def test_discount_percent(self):
        p = make_product(price="89.99", original_price="129.99")
        assert p.discount_percent == 31

    def test_original_price_below_price_rejected(self):
        with pytest.raises(ValidationError, match="below its price"):
            make_product(price="20.00", original_price="10.00")

    def test_rating_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="Rating"):
            Product(
                id="1",
                name="Widget",
                price=Money.of("1"),
                category="Misc",
                rating=Decimal("5.5"),
            )

    def test_negative_review_count_rejected(self):
        with pytest.raises(ValidationError, match="Review count"):
            Product(id="1", name="Widget", price=Money.of("1"), category="Misc", review_count=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            make_product(name="  ")

    def test_is_immutable(self):
        p = make_product()
        with pytest.raises(AttributeError):
            p.price = Money.of("1.00")  # type: ignore[misc]
