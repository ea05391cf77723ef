"""Document <-> domain mapping for the backend's JSON documents.

Field names follow the document store's existing collections
(``products``, ``wishlist``, ``orders``, ``addresses``, ``users``), which
use camelCase keys.  Money is written as a decimal string and read from
either a string or a number.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator

from storefront.domain.exceptions import RemoteError, ValidationError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.order import (
    Order,
    OrderDraft,
    OrderLine,
    OrderStatus,
    PaymentMethod,
)
from storefront.domain.model.pricing import PriceBreakdown
from storefront.domain.model.product import Product
from storefront.domain.model.profile import UserProfile
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.model.wishlist import WishlistEntry

Document = dict[str, Any]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# --- Products -----------------------------------------------------------------


def product_from_doc(doc: Document) -> Product:
    with _malformed("product", doc):
        return Product(
            id=str(doc["id"]),
            name=doc["name"],
            price=Money.of(doc["price"]),
            original_price=(
                Money.of(doc["originalPrice"]) if doc.get("originalPrice") is not None else None
            ),
            category=doc.get("category", ""),
            rating=Decimal(str(doc.get("rating", 0))),
            review_count=int(doc.get("reviews", 0)),
            in_stock=bool(doc.get("inStock", True)),
            description=doc.get("description", ""),
            image_url=doc.get("image"),
        )


def product_to_doc(product: Product) -> Document:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "originalPrice": str(product.original_price.amount),  # type: ignore[union-attr]
        "category": product.category,
        "rating": str(product.rating),
        "reviews": product.review_count,
        "inStock": product.in_stock,
        "description": product.description,
        "image": product.image_url,
    }


# --- Wishlist -----------------------------------------------------------------


def wishlist_entry_from_doc(doc: Document) -> WishlistEntry:
    with _malformed("wishlist entry", doc):
        return WishlistEntry(
            id=str(doc["id"]),
            user_id=doc["userId"],
            product_id=str(doc["productId"]),
            created_at=_parse_time(doc.get("createdAt")),
        )


# --- Addresses ----------------------------------------------------------------


def address_from_doc(doc: Document) -> ShippingAddress:
    with _malformed("address", doc):
        return ShippingAddress(
            id=str(doc["id"]) if doc.get("id") is not None else None,
            name=doc.get("name", ""),
            street=doc.get("address", ""),
            city=doc.get("city", ""),
            region=doc.get("state", ""),
            postal_code=doc.get("zip", ""),
            country=doc.get("country", ""),
            phone=doc.get("phone", ""),
            is_default=bool(doc.get("isDefault", False)),
        )


def address_to_doc(address: ShippingAddress) -> Document:
    return {
        "name": address.name,
        "address": address.street,
        "city": address.city,
        "state": address.region,
        "zip": address.postal_code,
        "country": address.country,
        "phone": address.phone,
        "isDefault": address.is_default,
    }


# --- Profiles ----------------------------------------------------------------


def profile_from_doc(doc: Document) -> UserProfile:
    with _malformed("user", doc):
        return UserProfile(
            uid=str(doc.get("uid") or doc["id"]),
            email=_text(doc, "email"),
            full_name=_text(doc, "fullName"),
            phone=_text(doc, "phone"),
        )


def profile_to_doc(profile: UserProfile) -> Document:
    return {
        "uid": profile.uid,
        "email": profile.email,
        "fullName": profile.full_name,
        "phone": profile.phone,
    }


# --- Orders -------------------------------------------------------------------


def draft_to_doc(draft: OrderDraft) -> Document:
    return {
        "userId": draft.user_id,
        "items": [
            {
                "productId": line.product_id,
                "name": line.product_name,
                "price": str(line.unit_price.amount),
                "quantity": line.quantity.value,
            }
            for line in draft.lines
        ],
        "shippingAddress": address_to_doc(draft.shipping_address),
        "paymentMethod": draft.payment_method.value,
        "subtotal": str(draft.subtotal.amount),
        "shipping": str(draft.shipping.amount),
        "tax": str(draft.tax.amount),
        "total": str(draft.total.amount),
        "status": draft.status.value,
        "createdAt": draft.created_at.isoformat(),
    }


def order_from_doc(doc: Document) -> Order:
    with _malformed("order", doc):
        lines = tuple(
            OrderLine(
                product_id=str(item["productId"]),
                product_name=item["name"],
                quantity=Quantity(int(item["quantity"])),
                unit_price=Money.of(item["price"]),
            )
            for item in doc["items"]
        )
        draft = OrderDraft(
            user_id=doc["userId"],
            lines=lines,
            shipping_address=address_from_doc(doc.get("shippingAddress", {})),
            payment_method=PaymentMethod(doc["paymentMethod"]),
            breakdown=PriceBreakdown(
                subtotal=Money.of(doc["subtotal"]),
                shipping=Money.of(doc["shipping"]),
                tax=Money.of(doc.get("tax", "0")),
            ),
            created_at=_parse_time(doc.get("createdAt")),
        )
        return Order(
            id=str(doc["id"]),
            draft=draft,
            status=_parse_status(doc.get("status", "pending")),
        )


# --- Internal helpers -----------------------------------------------------------


def _parse_status(raw: object) -> OrderStatus:
    if not isinstance(raw, str):
        raise ValueError(f"status must be a string, got {raw!r}")
    return OrderStatus(raw.strip().lower())


def _text(doc: Document, key: str) -> str:
    value = doc.get(key) or ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _parse_time(raw: object) -> datetime:
    if not raw:
        return datetime.now(timezone.utc)
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be an ISO-8601 string, got {raw!r}")
    parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@contextmanager
def _malformed(kind: str, doc: Document) -> Iterator[None]:
    """Turn a bad document into a RemoteError naming what was being read."""
    try:
        yield
    except (
        AttributeError, KeyError, TypeError, ValueError, InvalidOperation, ValidationError,
    ) as exc:
        raise RemoteError(
            f"Malformed {kind} document {doc.get('id', '?')!r}: {exc}"
        ) from exc
