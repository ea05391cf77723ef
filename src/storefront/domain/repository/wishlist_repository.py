"""Abstract wishlist store (append/delete only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.wishlist import WishlistEntry


class WishlistRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[WishlistEntry]:
        """Return every wishlist entry of a user."""

    @abstractmethod
    async def add(self, user_id: str, product_id: str) -> str:
        """Create an entry and return its ID."""

    @abstractmethod
    async def remove(self, entry_id: str) -> None:
        """Delete an entry by ID."""
