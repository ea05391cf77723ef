"""Shopper session — the explicitly owned state of one signed-in user.

Screens receive a ShopperSession instead of reaching for shared globals.
It owns the cart (never persisted; it always starts empty) and the
wishlist cache, and knows who the current user is.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import AuthenticationRequiredError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderDraft
from storefront.domain.model.pricing import DEFAULT_POLICY, PricingPolicy
from storefront.domain.repository.auth_provider import AuthProvider
from storefront.domain.repository.wishlist_repository import WishlistRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote
from storefront.domain.service.wishlist_reconciler import WishlistReconciler

logger = structlog.get_logger(__name__)


class ShopperSession:

    def __init__(
        self,
        auth: AuthProvider,
        wishlist_repo: WishlistRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._auth = auth
        self._wishlist_repo = wishlist_repo
        self._timeout = timeout
        self._user_id: str | None = None
        self.cart = Cart(policy)
        self.wishlist = WishlistReconciler(wishlist_repo, timeout)
        self.pending_draft: OrderDraft | None = None

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def policy(self) -> PricingPolicy:
        return self.cart.policy

    async def start(self) -> str | None:
        """Resolve the signed-in user and load their wishlist.

        Called on app start and again after login.
        """
        self._user_id = await call_remote(
            self._auth.current_user_id(),
            action="read current user",
            timeout=self._timeout,
        )
        if self._user_id is not None:
            await self.wishlist.load(self._user_id)
        logger.info("session_started", user_id=self._user_id)
        return self._user_id

    def sign_out(self) -> None:
        self._user_id = None
        self.cart.clear()
        self.pending_draft = None
        self.wishlist = WishlistReconciler(self._wishlist_repo, self._timeout)

    def require_user(self) -> str:
        if self._user_id is None:
            raise AuthenticationRequiredError("Please login to continue")
        return self._user_id

    async def toggle_favorite(self, product_id: str) -> bool:
        return await self.wishlist.toggle(self.require_user(), product_id)
