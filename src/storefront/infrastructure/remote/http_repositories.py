"""Backend-API implementations of the store interfaces."""

from __future__ import annotations

from typing import Any

from storefront.domain.exceptions import NotFoundError, RemoteError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.order import Order, OrderDraft
from storefront.domain.model.product import Product
from storefront.domain.model.profile import UserProfile
from storefront.domain.model.wishlist import WishlistEntry
from storefront.domain.repository.address_repository import AddressRepository
from storefront.domain.repository.auth_provider import AuthProvider
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.infrastructure.documents import (
    address_from_doc,
    address_to_doc,
    draft_to_doc,
    order_from_doc,
    product_from_doc,
    profile_from_doc,
    profile_to_doc,
    utc_now_iso,
    wishlist_entry_from_doc,
)
from storefront.infrastructure.remote.backend_client import BackendClient, segment


class HttpCatalogRepository(CatalogRepository):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def get_product(self, product_id: str) -> Product | None:
        doc = await self._client.get(f"/products/{segment(product_id)}")
        return product_from_doc(doc) if doc is not None else None

    async def list_products(self, limit: int, after: str | None = None) -> list[Product]:
        if after is None:
            return await self._query({"orderBy": "createdAt", "limit": limit})
        params = {"orderBy": "createdAt", "limit": limit, "startAfter": after}
        docs = await self._client.get("/products", params=params)
        if docs is None:
            # Cursor document is gone.
            raise NotFoundError(f"Product '{after}' not found")
        return [product_from_doc(d) for d in _as_list(docs, "/products")]

    async def list_by_category(self, category: str, limit: int) -> list[Product]:
        return await self._query({"category": category, "limit": limit})

    async def search_by_name_prefix(self, text: str, limit: int) -> list[Product]:
        return await self._query({"prefix": text, "limit": limit})

    async def _query(self, params: dict[str, Any]) -> list[Product]:
        docs = await self._client.get("/products", params=params, missing=())
        return [product_from_doc(d) for d in _as_list(docs, "/products")]


class HttpWishlistRepository(WishlistRepository):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def list_for_user(self, user_id: str) -> list[WishlistEntry]:
        path = f"/users/{segment(user_id)}/wishlist"
        docs = await self._client.get(path, missing=())
        return [wishlist_entry_from_doc(d) for d in _as_list(docs, path)]

    async def add(self, user_id: str, product_id: str) -> str:
        created = await self._client.post(
            "/wishlist",
            {"userId": user_id, "productId": product_id, "createdAt": utc_now_iso()},
        )
        return _created_id(created, "/wishlist")

    async def remove(self, entry_id: str) -> None:
        if not await self._client.delete(f"/wishlist/{segment(entry_id)}"):
            raise NotFoundError(f"Wishlist entry '{entry_id}' not found")


class HttpOrderRepository(OrderRepository):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def create(self, draft: OrderDraft) -> str:
        created = await self._client.post("/orders", draft_to_doc(draft))
        return _created_id(created, "/orders")

    async def get_by_id(self, order_id: str) -> Order | None:
        doc = await self._client.get(f"/orders/{segment(order_id)}")
        return order_from_doc(doc) if doc is not None else None

    async def list_by_user(self, user_id: str) -> list[Order]:
        path = f"/users/{segment(user_id)}/orders"
        docs = await self._client.get(path, missing=())
        return [order_from_doc(d) for d in _as_list(docs, path)]


class HttpAddressRepository(AddressRepository):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def list_for_user(self, user_id: str) -> list[ShippingAddress]:
        path = f"/users/{segment(user_id)}/addresses"
        docs = await self._client.get(path, missing=())
        return [address_from_doc(d) for d in _as_list(docs, path)]

    async def add(self, user_id: str, address: ShippingAddress) -> str:
        payload = address_to_doc(address)
        payload.update(userId=user_id, createdAt=utc_now_iso())
        created = await self._client.post("/addresses", payload)
        return _created_id(created, "/addresses")

    async def update(self, address: ShippingAddress) -> None:
        if address.id is None:
            raise NotFoundError("Cannot update an address that was never saved")
        payload = address_to_doc(address)
        payload["updatedAt"] = utc_now_iso()
        if not await self._client.put(f"/addresses/{segment(address.id)}", payload):
            raise NotFoundError(f"Address '{address.id}' not found")

    async def delete(self, address_id: str) -> None:
        if not await self._client.delete(f"/addresses/{segment(address_id)}"):
            raise NotFoundError(f"Address '{address_id}' not found")


class HttpProfileRepository(ProfileRepository):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def get(self, user_id: str) -> UserProfile | None:
        path = f"/users/{segment(user_id)}"
        doc = await self._client.get(path)
        if doc is None:
            return None
        if not isinstance(doc, dict):
            raise RemoteError(f"Expected a user document from {path}")
        return profile_from_doc({"uid": user_id, **doc})

    async def save(self, profile: UserProfile) -> None:
        # The backend merges the body into the stored document.
        payload = profile_to_doc(profile)
        payload["updatedAt"] = utc_now_iso()
        if not await self._client.put(f"/users/{segment(profile.uid)}", payload):
            raise NotFoundError(f"User '{profile.uid}' not found")


class HttpAuthProvider(AuthProvider):

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def current_user_id(self) -> str | None:
        me = await self._client.get("/auth/me", missing=(401, 404))
        if not me:
            return None
        uid = me.get("uid") if isinstance(me, dict) else None
        return str(uid) if uid else None


# --- Response helpers -----------------------------------------------------------


def _as_list(docs: Any, path: str) -> list[dict[str, Any]]:
    if docs is None:
        return []
    if not isinstance(docs, list):
        raise RemoteError(f"Expected a list of documents from {path}")
    return docs


def _created_id(created: Any, path: str) -> str:
    if not isinstance(created, dict) or not created.get("id"):
        raise RemoteError(f"{path} did not return the new document id")
    return str(created["id"])
