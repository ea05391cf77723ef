"""Application service: Browse Catalog use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote
from storefront.domain.service.wishlist_reconciler import WishlistReconciler

DEFAULT_LIMIT = 20


class CatalogHandler:
    """Product lookups for the home, category, search and detail screens.

    When a wishlist reconciler is given, every returned product carries
    its cached ``is_favorited`` flag.
    """

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        wishlist: WishlistReconciler | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._wishlist = wishlist
        self._timeout = timeout

    async def get_product(self, product_id: str) -> Product:
        product = await call_remote(
            self._catalog_repo.get_product(product_id),
            action="fetch product",
            timeout=self._timeout,
        )
        if product is None:
            raise NotFoundError(f"Product '{product_id}' not found")
        return product

    async def show(self, product_id: str) -> ProductDTO:
        return self._to_dto(await self.get_product(product_id))

    async def list_products(
        self, limit: int = DEFAULT_LIMIT, after: str | None = None
    ) -> list[ProductDTO]:
        """Newest products first; pass the last ID of a page as *after* for the next."""
        _check_limit(limit)
        products = await call_remote(
            self._catalog_repo.list_products(limit, after),
            action="fetch products",
            timeout=self._timeout,
        )
        return [self._to_dto(p) for p in products]

    async def list_by_category(
        self, category: str, limit: int = DEFAULT_LIMIT
    ) -> list[ProductDTO]:
        _check_limit(limit)
        if not category or not category.strip():
            raise ValidationError("Category name is required")
        products = await call_remote(
            self._catalog_repo.list_by_category(category.strip(), limit),
            action="fetch products by category",
            timeout=self._timeout,
        )
        return [self._to_dto(p) for p in products]

    async def search(self, text: str, limit: int = DEFAULT_LIMIT) -> list[ProductDTO]:
        """Prefix search on product name; blank text yields no results."""
        _check_limit(limit)
        if not text or not text.strip():
            return []
        products = await call_remote(
            self._catalog_repo.search_by_name_prefix(text.strip(), limit),
            action="search products",
            timeout=self._timeout,
        )
        return [self._to_dto(p) for p in products]

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            original_price=str(product.original_price),
            discount_percent=product.discount_percent,
            rating=f"{product.rating:.1f}",
            review_count=product.review_count,
            in_stock=product.in_stock,
            is_favorited=(
                self._wishlist is not None and self._wishlist.is_favorited(product.id)
            ),
        )


def _check_limit(limit: int) -> None:
    if limit <= 0:
        raise ValidationError("Limit must be positive")
