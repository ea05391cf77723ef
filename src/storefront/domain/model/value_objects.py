"""Money and Quantity, the value types every price and cart line is built from.

Both are frozen and validate on construction, so a negative price or an
empty cart line cannot be represented at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import total_ordering

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")
DEFAULT_CURRENCY = "USD"


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative price in one currency.

    Sums and multiples are exact Decimal arithmetic; the only rounding
    step is ``percent``, which lands on whole cents.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, not {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount < 0:
            raise ValidationError(f"Price must be a finite, non-negative amount, got {self.amount}")

    @classmethod
    def of(cls, amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build from a price as it appears in a document (string or number)."""
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise ValidationError(f"Not a price: {amount!r}") from None
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(Decimal("0.00"), currency)

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other).amount, self.currency)

    def __mul__(self, count: int) -> Money:
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(
                f"Money can only be multiplied by a whole count, not {type(count).__name__}"
            )
        return Money(self.amount * count, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same_currency(other).amount

    def percent(self, rate: Decimal) -> Money:
        """``rate`` is a fraction (``0.08`` for 8%); the result is rounded half-up to cents."""
        share = (self.amount * rate).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(share, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _same_currency(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(f"Currency mismatch: {self.currency} vs {other.currency}")
        return other


@dataclass(frozen=True)
class Quantity:
    """Units of one product on a cart or order line; never below one."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Quantity must be a whole number, got {self.value!r}")
        if self.value < 1:
            raise ValidationError(f"Quantity must be at least 1, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
