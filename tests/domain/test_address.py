"""Unit tests for ShippingAddress validation."""

import pytest

from storefront.domain.exceptions import ValidationError
from tests.fakes import make_address


class TestShippingAddress:

    def test_complete_address_validates(self):
        make_address().validate()

    def test_missing_fields_listed(self):
        address = make_address(city="", phone="   ")
        assert address.missing_fields() == ["city", "phone"]
        with pytest.raises(ValidationError, match="missing city, phone"):
            address.validate()

    def test_as_default_returns_copy(self):
        address = make_address()
        default = address.as_default()
        assert default.is_default is True
        assert address.is_default is False

    def test_one_line(self):
        assert make_address().one_line() == "123 Main Street, New York, NY 10001, USA"
