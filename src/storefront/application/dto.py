"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the screens/CLI and the application layer
without exposing domain internals.  Money values are pre-formatted
strings such as ``"$15.00"``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: a product ID and how many of it to buy."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str
    original_price: str
    discount_percent: int
    rating: str
    review_count: int
    in_stock: bool
    is_favorited: bool = False


@dataclass(frozen=True)
class PriceSummaryDTO:
    subtotal: str
    shipping: str
    tax: str
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    status: str
    items: list[OrderLineDTO]
    summary: PriceSummaryDTO
    payment_method: str
    ship_to: str
    created_at: str


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output of a successful checkout."""

    order_id: str
    status: str
    item_count: int
    summary: PriceSummaryDTO


@dataclass(frozen=True)
class AddressDTO:
    id: str
    name: str
    one_line: str
    phone: str
    is_default: bool


@dataclass(frozen=True)
class ProfileDTO:
    uid: str
    name: str
    email: str
    phone: str
