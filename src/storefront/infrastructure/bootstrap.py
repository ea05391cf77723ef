"""Composition root — wires concrete stores to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from storefront.application.session import ShopperSession
from storefront.domain.repository.address_repository import AddressRepository
from storefront.domain.repository.auth_provider import AuthProvider
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.infrastructure.config import StorefrontSettings
from storefront.infrastructure.local_auth import StaticAuthProvider
from storefront.infrastructure.persistence.json_address_repository import JsonAddressRepository
from storefront.infrastructure.persistence.json_catalog_repository import JsonCatalogRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_profile_repository import JsonProfileRepository
from storefront.infrastructure.persistence.json_wishlist_repository import JsonWishlistRepository
from storefront.infrastructure.remote.backend_client import BackendClient
from storefront.infrastructure.remote.http_repositories import (
    HttpAddressRepository,
    HttpAuthProvider,
    HttpCatalogRepository,
    HttpOrderRepository,
    HttpProfileRepository,
    HttpWishlistRepository,
)


@dataclass
class Stores:
    catalog: CatalogRepository
    wishlist: WishlistRepository
    orders: OrderRepository
    addresses: AddressRepository
    profiles: ProfileRepository
    auth: AuthProvider
    client: BackendClient | None = None

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.aclose()


def build_stores(
    settings: StorefrontSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Stores:
    if settings.uses_backend:
        client = BackendClient(
            settings.backend_url,  # type: ignore[arg-type]
            timeout=settings.timeout,
            api_token=settings.api_token,
            transport=transport,
        )
        return Stores(
            catalog=HttpCatalogRepository(client),
            wishlist=HttpWishlistRepository(client),
            orders=HttpOrderRepository(client),
            addresses=HttpAddressRepository(client),
            profiles=HttpProfileRepository(client),
            auth=HttpAuthProvider(client),
            client=client,
        )

    return Stores(
        catalog=json_catalog_repository(settings),
        wishlist=JsonWishlistRepository(JsonCollection(settings.data_dir / "wishlist.json")),
        orders=JsonOrderRepository(JsonCollection(settings.data_dir / "orders.json")),
        addresses=JsonAddressRepository(JsonCollection(settings.data_dir / "addresses.json")),
        profiles=JsonProfileRepository(JsonCollection(settings.data_dir / "users.json")),
        auth=StaticAuthProvider(settings.user_id),
    )


def json_catalog_repository(settings: StorefrontSettings) -> JsonCatalogRepository:
    return JsonCatalogRepository(JsonCollection(settings.data_dir / "products.json"))


def build_session(settings: StorefrontSettings, stores: Stores) -> ShopperSession:
    return ShopperSession(
        auth=stores.auth,
        wishlist_repo=stores.wishlist,
        policy=settings.pricing_policy(),
        timeout=settings.timeout,
    )
