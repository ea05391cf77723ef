"""Abstract address book store."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.address import ShippingAddress


class AddressRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[ShippingAddress]:
        """Return a user's saved addresses, default first."""

    @abstractmethod
    async def add(self, user_id: str, address: ShippingAddress) -> str:
        """Save a new address and return its ID."""

    @abstractmethod
    async def update(self, address: ShippingAddress) -> None:
        """Overwrite a saved address (matched by ``address.id``)."""

    @abstractmethod
    async def delete(self, address_id: str) -> None:
        """Delete a saved address."""
