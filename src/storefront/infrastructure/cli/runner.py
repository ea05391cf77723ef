"""Glue between synchronous click commands and the async handlers."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click

from storefront.application.dto import ItemSpec
from storefront.application.session import ShopperSession
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Stores, build_session, build_stores
from storefront.infrastructure.config import StorefrontSettings

T = TypeVar("T")

Action = Callable[[StorefrontSettings, Stores, ShopperSession], Awaitable[T]]


def run(action: Action[T]) -> T:
    """Open the stores, start a session, run *action*, close the stores.

    Domain errors become click errors so the user sees a one-line message
    instead of a traceback.
    """

    async def _main() -> T:
        settings = StorefrontSettings.from_env()
        stores = build_stores(settings)
        try:
            session = build_session(settings, stores)
            await session.start()
            return await action(settings, stores, session)
        finally:
            await stores.aclose()

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def parse_items(raw: str) -> list[ItemSpec]:
    """Parse '1:3,7:1' into a list of ItemSpec."""
    items: list[ItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append(ItemSpec(product_id=product_id.strip(), quantity=qty))
    return items
