"""JSON-file-backed implementation of AddressRepository."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.repository.address_repository import AddressRepository
from storefront.infrastructure.documents import address_from_doc, address_to_doc, utc_now_iso
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonAddressRepository(AddressRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def list_for_user(self, user_id: str) -> list[ShippingAddress]:
        addresses = [
            address_from_doc(d)
            for d in self._collection.load()
            if d.get("userId") == user_id
        ]
        return sorted(addresses, key=lambda a: not a.is_default)

    async def add(self, user_id: str, address: ShippingAddress) -> str:
        doc = address_to_doc(address)
        doc.update(userId=user_id, createdAt=utc_now_iso())
        return self._collection.insert(doc)

    async def update(self, address: ShippingAddress) -> None:
        if address.id is None:
            raise NotFoundError("Cannot update an address that was never saved")
        doc = address_to_doc(address)
        doc["updatedAt"] = utc_now_iso()
        if not self._collection.replace(address.id, doc):
            raise NotFoundError(f"Address '{address.id}' not found")

    async def delete(self, address_id: str) -> None:
        if not self._collection.delete(address_id):
            raise NotFoundError(f"Address '{address_id}' not found")
