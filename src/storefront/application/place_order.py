"""Application service: Checkout use case.

Freezes the session cart into an OrderDraft and hands it to the order
store.  This is the only place that coordinates the catalog (stock and
price re-check) with order creation.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from storefront.application.dto import OrderConfirmationDTO, PriceSummaryDTO
from storefront.application.session import ShopperSession
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import OrderDraft, PaymentMethod
from storefront.domain.model.pricing import DEFAULT_POLICY, PricingPolicy
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        order_repo: OrderRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._order_repo = order_repo
        self._policy = policy
        self._timeout = timeout

    async def build_draft(
        self,
        user_id: str,
        cart_lines: Iterable[CartLine],
        address: ShippingAddress | None,
        payment_method: PaymentMethod,
    ) -> OrderDraft:
        """Build an immutable, priced draft from the cart.

        Steps:
        1. Validate what needs no store (non-empty cart, full address).
        2. Re-read every product; a missing product aborts checkout.
        3. Let OrderDraft check stock and freeze the *current* prices.
        """
        lines = OrderDraft.validate_input(cart_lines, address)

        fresh_lines: list[CartLine] = []
        for line in lines:
            product = await call_remote(
                self._catalog_repo.get_product(line.product_id),
                action=f"load product '{line.product_id}'",
                timeout=self._timeout,
            )
            if product is None:
                raise NotFoundError(
                    f"'{line.product.name}' is no longer available"
                )
            fresh_lines.append(CartLine(product=product, quantity=line.quantity))

        return OrderDraft.create(
            user_id=user_id,
            cart_lines=fresh_lines,
            address=address,
            payment_method=payment_method,
            policy=self._policy,
        )

    async def submit(self, draft: OrderDraft) -> str:
        """Persist the draft as a ``pending`` order and return its ID.

        Not idempotent: submitting the same draft twice may create two
        orders if the store does not deduplicate.
        """
        order_id = await call_remote(
            self._order_repo.create(draft),
            action="submit order",
            timeout=self._timeout,
        )
        logger.info(
            "order_submitted",
            order_id=order_id,
            user_id=draft.user_id,
            total=str(draft.total),
        )
        return order_id

    async def place_order(
        self,
        session: ShopperSession,
        address: ShippingAddress | None,
        payment_method: PaymentMethod,
    ) -> OrderConfirmationDTO:
        """Build, submit, then clear the cart.

        The cart is cleared only after the store accepted the order.  If
        submission fails the draft stays on the session for
        ``retry_submit``.
        """
        user_id = session.require_user()
        draft = await self.build_draft(user_id, session.cart.lines, address, payment_method)
        session.pending_draft = draft
        return await self.retry_submit(session)

    async def retry_submit(self, session: ShopperSession) -> OrderConfirmationDTO:
        draft = session.pending_draft
        if draft is None:
            raise NotFoundError("There is no order waiting to be submitted")
        try:
            order_id = await self.submit(draft)
        except Exception:
            logger.warning("order_submit_failed", user_id=draft.user_id, exc_info=True)
            raise
        session.pending_draft = None
        session.cart.clear()
        return self._to_dto(order_id, draft)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order_id: str, draft: OrderDraft) -> OrderConfirmationDTO:
        return OrderConfirmationDTO(
            order_id=order_id,
            status=draft.status.value,
            item_count=draft.item_count,
            summary=PriceSummaryDTO(
                subtotal=str(draft.subtotal),
                shipping=str(draft.shipping),
                tax=str(draft.tax),
                total=str(draft.total),
            ),
        )
