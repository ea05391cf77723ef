"""Abstract catalog store.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (HTTP backend, JSON file
store) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def list_products(self, limit: int, after: str | None = None) -> list[Product]:
        """Return up to *limit* products, newest first.

        *after* is the ID of the last product on the previous page; the
        page then starts with the product listed right after it.  Raises
        NotFoundError if that product does not exist.
        """

    @abstractmethod
    async def list_by_category(self, category: str, limit: int) -> list[Product]:
        """Return up to *limit* products in *category*, newest first."""

    @abstractmethod
    async def search_by_name_prefix(self, text: str, limit: int) -> list[Product]:
        """Return up to *limit* products whose name starts with *text*."""
