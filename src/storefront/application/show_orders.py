"""Application service: Order History use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineDTO, PriceSummaryDTO
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.remote_call import DEFAULT_TIMEOUT, call_remote


class OrderHistoryHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._order_repo = order_repo
        self._timeout = timeout

    async def list_for_user(self, user_id: str) -> list[OrderDTO]:
        orders = await call_remote(
            self._order_repo.list_by_user(user_id),
            action="fetch orders",
            timeout=self._timeout,
        )
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [self._to_dto(o) for o in orders]

    async def get(self, order_id: str) -> OrderDTO:
        order = await call_remote(
            self._order_repo.get_by_id(order_id),
            action="fetch order",
            timeout=self._timeout,
        )
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        draft = order.draft
        return OrderDTO(
            id=order.id,
            status=order.status.value,
            items=[
                OrderLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in draft.lines
            ],
            summary=PriceSummaryDTO(
                subtotal=str(draft.subtotal),
                shipping=str(draft.shipping),
                tax=str(draft.tax),
                total=str(draft.total),
            ),
            payment_method=draft.payment_method.title,
            ship_to=draft.shipping_address.one_line(),
            created_at=draft.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
