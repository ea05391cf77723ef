"""JSON-file-backed implementation of WishlistRepository."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.wishlist import WishlistEntry
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.infrastructure.documents import utc_now_iso, wishlist_entry_from_doc
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonWishlistRepository(WishlistRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def list_for_user(self, user_id: str) -> list[WishlistEntry]:
        return [
            wishlist_entry_from_doc(d)
            for d in self._collection.load()
            if d.get("userId") == user_id
        ]

    async def add(self, user_id: str, product_id: str) -> str:
        return self._collection.insert(
            {"userId": user_id, "productId": product_id, "createdAt": utc_now_iso()}
        )

    async def remove(self, entry_id: str) -> None:
        if not self._collection.delete(entry_id):
            raise NotFoundError(f"Wishlist entry '{entry_id}' not found")
