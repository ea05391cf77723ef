"""Product record.

Products are owned by the catalog store.  From the client's point of view
they are immutable: a price change arrives as a new Product read from the
store, never as a mutation of one already held in a cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MAX_RATING = Decimal("5")


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``original_price`` is the pre-discount price shown struck through next
    to ``price``; it defaults to ``price`` when the product is not on sale.
    """

    id: str
    name: str
    price: Money
    category: str
    original_price: Money | None = None
    rating: Decimal = Decimal("0")
    review_count: int = 0
    in_stock: bool = True
    description: str = ""
    image_url: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.original_price is None:
            object.__setattr__(self, "original_price", self.price)
        elif self.original_price < self.price:
            raise ValidationError(
                f"Original price {self.original_price} of {self.name} "
                f"is below its price {self.price}"
            )
        if not Decimal("0") <= self.rating <= MAX_RATING:
            raise ValidationError(f"Rating must be between 0 and 5, got {self.rating}")
        if self.review_count < 0:
            raise ValidationError("Review count cannot be negative")

    @property
    def discount_percent(self) -> int:
        """Whole percentage taken off the original price (0 when not on sale)."""
        original = self.original_price.amount  # type: ignore[union-attr]
        if original == 0 or original == self.price.amount:
            return 0
        off = (original - self.price.amount) / original * 100
        return int(off.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
