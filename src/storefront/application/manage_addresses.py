"""Application service: Address Book use cases.

A user has at most one default address.  The first address saved
becomes the default, and deleting the default promotes the next one.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from storefront.application.dto import AddressDTO
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.repository.address_repository import AddressRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote

logger = structlog.get_logger(__name__)


class AddressBookHandler:

    def __init__(
        self,
        address_repo: AddressRepository,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._address_repo = address_repo
        self._timeout = timeout

    async def addresses(self, user_id: str) -> list[ShippingAddress]:
        saved = await call_remote(
            self._address_repo.list_for_user(user_id),
            action="fetch addresses",
            timeout=self._timeout,
        )
        return sorted(saved, key=lambda a: not a.is_default)

    async def list_addresses(self, user_id: str) -> list[AddressDTO]:
        return [self._to_dto(a) for a in await self.addresses(user_id)]

    async def default_address(self, user_id: str) -> ShippingAddress | None:
        saved = await self.addresses(user_id)
        return saved[0] if saved else None

    async def add(self, user_id: str, address: ShippingAddress) -> str:
        address.validate()
        saved = await self.addresses(user_id)
        make_default = address.is_default or not saved

        address_id = await call_remote(
            self._address_repo.add(user_id, address.as_default(make_default)),
            action="add address",
            timeout=self._timeout,
        )
        if make_default:
            await self._clear_default(saved, keep=address_id)
        logger.info("address_added", user_id=user_id, address_id=address_id)
        return address_id

    async def set_default(self, user_id: str, address_id: str) -> None:
        saved = await self.addresses(user_id)
        target = _find(saved, address_id)
        if not target.is_default:
            await self._update(target.as_default(True))
        await self._clear_default(saved, keep=address_id)

    async def delete(self, user_id: str, address_id: str) -> None:
        saved = await self.addresses(user_id)
        target = _find(saved, address_id)
        await call_remote(
            self._address_repo.delete(address_id),
            action="delete address",
            timeout=self._timeout,
        )
        remaining = [a for a in saved if a.id != address_id]
        if target.is_default and remaining:
            await self._update(remaining[0].as_default(True))
        logger.info("address_deleted", user_id=user_id, address_id=address_id)

    # --- Internal helpers -----------------------------------------------------

    async def _clear_default(self, saved: list[ShippingAddress], keep: str) -> None:
        for address in saved:
            if address.is_default and address.id != keep:
                await self._update(replace(address, is_default=False))

    async def _update(self, address: ShippingAddress) -> None:
        await call_remote(
            self._address_repo.update(address),
            action="update address",
            timeout=self._timeout,
        )

    @staticmethod
    def _to_dto(address: ShippingAddress) -> AddressDTO:
        return AddressDTO(
            id=address.id or "",
            name=address.name,
            one_line=address.one_line(),
            phone=address.phone,
            is_default=address.is_default,
        )


def _find(saved: list[ShippingAddress], address_id: str) -> ShippingAddress:
    for address in saved:
        if address.id == address_id:
            return address
    raise NotFoundError(f"Address '{address_id}' not found")
