"""Abstract order store (append-only from the client's side)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderDraft


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, draft: OrderDraft) -> str:
        """Persist a draft with status ``pending`` and return the order ID."""

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    async def list_by_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, newest first."""
