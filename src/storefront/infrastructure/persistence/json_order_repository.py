"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from storefront.domain.model.order import Order, OrderDraft
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.documents import draft_to_doc, order_from_doc, utc_now_iso
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def create(self, draft: OrderDraft) -> str:
        doc = draft_to_doc(draft)
        doc["updatedAt"] = utc_now_iso()
        return self._collection.insert(doc)

    async def get_by_id(self, order_id: str) -> Order | None:
        doc = self._collection.find(order_id)
        return order_from_doc(doc) if doc is not None else None

    async def list_by_user(self, user_id: str) -> list[Order]:
        orders = [
            order_from_doc(d)
            for d in self._collection.load()
            if d.get("userId") == user_id
        ]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders
