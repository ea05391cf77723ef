"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.documents import product_from_doc, product_to_doc, utc_now_iso
from storefront.infrastructure.persistence.json_collection import Document, JsonCollection


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- CatalogRepository interface ------------------------------------------

    async def get_product(self, product_id: str) -> Product | None:
        doc = self._collection.find(product_id)
        return product_from_doc(doc) if doc is not None else None

    async def list_products(self, limit: int, after: str | None = None) -> list[Product]:
        return self._newest_first(self._collection.load(), limit, after)

    async def list_by_category(self, category: str, limit: int) -> list[Product]:
        docs = [d for d in self._collection.load() if d.get("category") == category]
        return self._newest_first(docs, limit)

    async def search_by_name_prefix(self, text: str, limit: int) -> list[Product]:
        # Case-sensitive, like the document store's range query on ``name``.
        docs = [d for d in self._collection.load() if d.get("name", "").startswith(text)]
        docs.sort(key=lambda d: d.get("name", ""))
        return [product_from_doc(d) for d in docs[:limit]]

    # --- Seeding --------------------------------------------------------------

    def save(self, product: Product) -> None:
        existing = self._collection.find(product.id)
        doc = product_to_doc(product)
        doc["createdAt"] = (existing or {}).get("createdAt") or utc_now_iso()
        doc["updatedAt"] = utc_now_iso()
        self._collection.upsert(doc)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _newest_first(
        docs: list[Document], limit: int, after: str | None = None
    ) -> list[Product]:
        docs = sorted(docs, key=lambda d: d.get("createdAt", ""), reverse=True)
        if after is not None:
            ids = [d.get("id") for d in docs]
            if after not in ids:
                raise NotFoundError(f"Product '{after}' not found")
            docs = docs[ids.index(after) + 1 :]
        return [product_from_doc(d) for d in docs[:limit]]
