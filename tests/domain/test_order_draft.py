"""Unit tests for OrderDraft creation."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import NotFoundError, OutOfStockError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderDraft, OrderStatus, PaymentMethod
from storefront.domain.model.pricing import PricingPolicy
from storefront.domain.model.value_objects import Money
from tests.fakes import make_address, make_product


def _cart(*products, qty: int = 1) -> Cart:
    cart = Cart()
    for p in products:
        cart.add_item(p, qty)
    return cart


def _create(cart: Cart, address=None, policy=None) -> OrderDraft:
    return OrderDraft.create(
        user_id="u1",
        cart_lines=cart.lines,
        address=address if address is not None else make_address(),
        payment_method=PaymentMethod.CARD,
        policy=policy or PricingPolicy(),
    )


class TestOrderDraftCreation:

    def test_happy_path(self):
        cart = _cart(make_product("1", price="10.00"), qty=2)
        cart.add_item(make_product("2", name="Gadget", price="5.00"))
        draft = _create(cart)
        assert draft.status == OrderStatus.PENDING
        assert draft.subtotal == Money.of("25.00")
        assert draft.shipping == Money.of("9.99")
        assert draft.total == Money.of("34.99")
        assert draft.item_count == 3

    def test_prices_are_frozen(self):
        cart = _cart(make_product("1", price="10.00"))
        draft = _create(cart)
        # The cart moves on; the draft does not.
        cart.clear()
        cart.add_item(make_product("1", price="99.00"))
        assert draft.lines[0].unit_price == Money.of("10.00")
        assert draft.subtotal == Money.of("10.00")

    def test_same_policy_as_cart(self):
        policy = PricingPolicy(tax_rate=Decimal("0.08"))
        cart = Cart(policy)
        cart.add_item(make_product("1", price="75.00"), 2)
        draft = _create(cart, policy=policy)
        assert draft.total == cart.total()

    def test_draft_is_immutable(self):
        draft = _create(_cart(make_product()))
        with pytest.raises(AttributeError):
            draft.status = OrderStatus.SHIPPED  # type: ignore[misc]


class TestOrderDraftValidation:

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            _create(Cart())

    def test_missing_address_rejected(self):
        with pytest.raises(ValidationError, match="shipping address is required"):
            OrderDraft.create("u1", _cart(make_product()).lines, None, PaymentMethod.CARD, PricingPolicy())

    def test_incomplete_address_rejected(self):
        with pytest.raises(ValidationError, match="missing postal_code"):
            _create(_cart(make_product()), address=make_address(postal_code=""))

    def test_out_of_stock_rejected(self):
        cart = _cart(make_product("1"), make_product("2", name="Speaker", in_stock=False))
        with pytest.raises(OutOfStockError, match="Speaker"):
            _create(cart)

    def test_out_of_stock_is_a_not_found_error(self):
        assert issubclass(OutOfStockError, NotFoundError)

    def test_large_cart_is_accepted(self):
        products = [make_product(str(i), name=f"P{i}", price="1.00") for i in range(120)]
        draft = _create(_cart(*products))
        assert len(draft.lines) == 120
        assert draft.subtotal == Money.of("120.00")
        assert draft.shipping == Money.zero()

    def test_user_required(self):
        with pytest.raises(ValidationError, match="signed-in user"):
            OrderDraft.create("", _cart(make_product()).lines, make_address(), PaymentMethod.CARD, PricingPolicy())


class TestPaymentMethod:

    def test_parse(self):
        assert PaymentMethod.parse(" PayPal ") == PaymentMethod.PAYPAL

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Unknown payment method"):
            PaymentMethod.parse("bitcoin")

    def test_titles(self):
        assert PaymentMethod.APPLE_PAY.title == "Apple Pay"
