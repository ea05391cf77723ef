"""Cart aggregate — what the shopper intends to buy in this session.

The cart is purely local: it never talks to a store.  It holds the
Product records it was given and derives every total on demand.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.domain.model.pricing import DEFAULT_POLICY, PriceBreakdown, PricingPolicy
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

logger = structlog.get_logger(__name__)


@dataclass
class CartLine:
    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Ordered collection of cart lines, at most one per product.

    Invariants:
    - every line has a quantity >= 1 (setting 0 or less removes the line)
    - adding a product already in the cart increments its line
    """

    def __init__(self, policy: PricingPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy
        self._lines: dict[str, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> CartLine:
        qty = Quantity(quantity)
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine(product=product, quantity=qty)
            self._lines[product.id] = line
        else:
            line.quantity = Quantity(line.quantity.value + qty.value)
        return line

    def update_quantity(self, product_id: str, new_quantity: int) -> bool:
        """Set a line's quantity exactly; ``<= 0`` removes the line.

        Returns False (and changes nothing) when the product is not in the
        cart.
        """
        if product_id not in self._lines:
            logger.warning("cart_line_missing", product_id=product_id)
            return False
        if new_quantity <= 0:
            self.remove_item(product_id)
        else:
            self._lines[product_id].quantity = Quantity(new_quantity)
        return True

    def remove_item(self, product_id: str) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def policy(self) -> PricingPolicy:
        return self._policy

    def get_line(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines.values())

    # --- Derived totals -------------------------------------------------------

    def subtotal(self) -> Money:
        return self._policy.subtotal(self._lines.values())

    def shipping_fee(self) -> Money:
        return self._policy.shipping(self.subtotal())

    def tax(self) -> Money:
        return self._policy.tax(self.subtotal())

    def total(self) -> Money:
        return self.breakdown().total

    def breakdown(self) -> PriceBreakdown:
        return self._policy.breakdown(self._lines.values())
