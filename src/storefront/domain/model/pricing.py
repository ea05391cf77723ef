"""Pricing policy — the single set of fee rules used by cart and checkout.

The cart page and the order draft both price through the same
``PricingPolicy`` instance, so a shopper never sees one total in the cart
and a different one at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Protocol

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

FREE_SHIPPING_THRESHOLD = Money(Decimal("100.00"))
FLAT_SHIPPING_FEE = Money(Decimal("9.99"))


class PricedLine(Protocol):
    @property
    def line_total(self) -> Money: ...


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    shipping: Money
    tax: Money

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping + self.tax


@dataclass(frozen=True)
class PricingPolicy:
    """Fee rules.

    - shipping is free when the subtotal is *strictly* above
      ``free_shipping_threshold``, otherwise ``shipping_fee``
    - tax is ``tax_rate`` of the subtotal, rounded half-up to cents
    """

    free_shipping_threshold: Money = FREE_SHIPPING_THRESHOLD
    shipping_fee: Money = FLAT_SHIPPING_FEE
    tax_rate: Decimal = field(default=Decimal("0"))

    def __post_init__(self) -> None:
        if not Decimal("0") <= self.tax_rate < Decimal("1"):
            raise ValidationError(f"Tax rate must be in [0, 1), got {self.tax_rate}")

    def subtotal(self, lines: Iterable[PricedLine]) -> Money:
        result = Money.zero(self.shipping_fee.currency)
        for line in lines:
            result = result + line.line_total
        return result

    def shipping(self, subtotal: Money) -> Money:
        if subtotal > self.free_shipping_threshold:
            return Money.zero(subtotal.currency)
        return self.shipping_fee

    def tax(self, subtotal: Money) -> Money:
        return subtotal.percent(self.tax_rate)

    def breakdown(self, lines: Iterable[PricedLine]) -> PriceBreakdown:
        subtotal = self.subtotal(lines)
        return PriceBreakdown(
            subtotal=subtotal,
            shipping=self.shipping(subtotal),
            tax=self.tax(subtotal),
        )


DEFAULT_POLICY = PricingPolicy()
