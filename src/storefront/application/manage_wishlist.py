"""Application service: Wishlist screen use cases."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.browse_catalog import CatalogHandler
from storefront.application.session import ShopperSession
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT

logger = structlog.get_logger(__name__)


class WishlistHandler:

    def __init__(
        self,
        session: ShopperSession,
        catalog_repo: CatalogRepository,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._catalog_repo = catalog_repo
        self._timeout = timeout

    async def favorites(self) -> list[ProductDTO]:
        """Favorited products in the order they were added, skipping any
        deleted from the catalog."""
        user_id = self._session.require_user()
        await self._session.wishlist.load(user_id)

        catalog = CatalogHandler(self._catalog_repo, self._session.wishlist, self._timeout)
        products: list[ProductDTO] = []
        for product_id in self._session.wishlist.product_ids_by_age():
            try:
                products.append(await catalog.show(product_id))
            except NotFoundError:
                logger.info("wishlist_product_missing", product_id=product_id)
        return products

    async def toggle(self, product_id: str) -> bool:
        return await self._session.toggle_favorite(product_id)

    async def remove(self, product_id: str) -> None:
        self._session.require_user()
        await self._session.wishlist.remove(product_id)
