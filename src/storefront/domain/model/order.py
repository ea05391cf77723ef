"""Order draft and submitted order records.

An OrderDraft is the immutable, priced snapshot of a cart at checkout.
Its line prices are frozen copies, never live links to catalog products,
so a later catalog price change cannot alter a draft already shown to
the shopper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from storefront.domain.exceptions import OutOfStockError, ValidationError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import CartLine
from storefront.domain.model.pricing import PriceBreakdown, PricingPolicy
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CARD = "card"
    PAYPAL = "paypal"
    APPLE_PAY = "apple_pay"

    @property
    def title(self) -> str:
        return _PAYMENT_TITLES[self]

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        try:
            return PaymentMethod(raw.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Unknown payment method '{raw}' (expected one of: {choices})"
            ) from None


_PAYMENT_TITLES = {
    PaymentMethod.CARD: "Credit/Debit Card",
    PaymentMethod.PAYPAL: "PayPal",
    PaymentMethod.APPLE_PAY: "Apple Pay",
}


@dataclass(frozen=True)
class OrderLine:
    """Price snapshot of one cart line at draft time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # frozen at draft time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=line.quantity,
            unit_price=line.product.price,
        )


@dataclass(frozen=True)
class OrderDraft:
    """Immutable, priced order ready for submission.

    Use the ``OrderDraft.create()`` factory — it enforces every checkout
    rule.  The plain constructor exists so stores can reconstitute drafts
    without re-validating them.
    """

    user_id: str
    lines: tuple[OrderLine, ...]
    shipping_address: ShippingAddress
    payment_method: PaymentMethod
    breakdown: PriceBreakdown
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def validate_input(
        cart_lines: Iterable[CartLine],
        address: ShippingAddress | None,
    ) -> list[CartLine]:
        """Checks that need no store: non-empty cart and complete address."""
        lines = list(cart_lines)
        if not lines:
            raise ValidationError("Cart is empty — add at least one item before checkout")
        if address is None:
            raise ValidationError("A shipping address is required")
        address.validate()
        return lines

    @staticmethod
    def create(
        user_id: str,
        cart_lines: Iterable[CartLine],
        address: ShippingAddress | None,
        payment_method: PaymentMethod,
        policy: PricingPolicy,
    ) -> OrderDraft:
        if not user_id:
            raise ValidationError("A signed-in user is required to check out")
        lines = OrderDraft.validate_input(cart_lines, address)

        for line in lines:
            if not line.product.in_stock:
                raise OutOfStockError(f"'{line.product.name}' is out of stock")

        snapshot = tuple(OrderLine.from_cart_line(line) for line in lines)
        return OrderDraft(
            user_id=user_id,
            lines=snapshot,
            shipping_address=address,  # type: ignore[arg-type]
            payment_method=payment_method,
            breakdown=policy.breakdown(snapshot),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        return self.breakdown.subtotal

    @property
    def shipping(self) -> Money:
        return self.breakdown.shipping

    @property
    def tax(self) -> Money:
        return self.breakdown.tax

    @property
    def total(self) -> Money:
        return self.breakdown.total

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)


@dataclass(frozen=True)
class Order:
    """An order as persisted by the order store.

    ``status`` is owned by the store; the client only reads it.
    """

    id: str
    draft: OrderDraft
    status: OrderStatus = OrderStatus.PENDING

    @property
    def user_id(self) -> str:
        return self.draft.user_id

    @property
    def created_at(self) -> datetime:
        return self.draft.created_at

    @property
    def total(self) -> Money:
        return self.draft.total
