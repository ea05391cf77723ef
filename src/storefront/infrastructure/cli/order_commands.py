"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import CatalogHandler
from storefront.application.dto import OrderDTO, PriceSummaryDTO
from storefront.application.manage_addresses import AddressBookHandler
from storefront.application.place_order import CheckoutHandler
from storefront.application.show_orders import OrderHistoryHandler
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.order import PaymentMethod
from storefront.infrastructure.cli.runner import parse_items, run


def _display_summary(summary: PriceSummaryDTO) -> None:
    click.echo(f"  {'Subtotal':<27} {summary.subtotal:>20}")
    click.echo(f"  {'Shipping':<27} {summary.shipping:>20}")
    click.echo(f"  {'Tax':<27} {summary.tax:>20}")
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {summary.total:>20}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo(f"Ship to:  {dto.ship_to}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<32} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<32} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*60}")
    _display_summary(dto.summary)


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option(
    "--payment",
    default=PaymentMethod.CARD.value,
    show_default=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option("--address-id", default=None, help="Saved address to ship to (default address if omitted).")
def checkout(items: str, payment: str, address_id: str | None) -> None:
    """Put items in a cart and place the order."""
    specs = parse_items(items)

    async def action(settings, stores, session):
        user_id = session.require_user()
        catalog = CatalogHandler(stores.catalog, session.wishlist, settings.timeout)
        for spec in specs:
            session.cart.add_item(await catalog.get_product(spec.product_id), spec.quantity)

        book = AddressBookHandler(stores.addresses, settings.timeout)
        if address_id is None:
            address = await book.default_address(user_id)
            if address is None:
                raise ValidationError("No saved address — add one with 'storefront addresses add'")
        else:
            matches = [a for a in await book.addresses(user_id) if a.id == address_id]
            if not matches:
                raise NotFoundError(f"Address '{address_id}' not found")
            address = matches[0]

        handler = CheckoutHandler(
            stores.catalog, stores.orders, session.policy, settings.timeout
        )
        return await handler.place_order(session, address, PaymentMethod.parse(payment))

    dto = run(action)
    click.echo(f"Order #{dto.order_id} placed  (status={dto.status}, {dto.item_count} items)")
    click.echo()
    _display_summary(dto.summary)


@click.command("list")
def order_list() -> None:
    """List your orders, newest first."""

    async def action(settings, stores, session):
        return await OrderHistoryHandler(stores.orders, settings.timeout).list_for_user(
            session.require_user()
        )

    orders = run(action)
    if not orders:
        click.echo("No orders yet.")
        return
    click.echo(f"  {'Order':<22} {'Placed':<22} {'Status':<12} {'Total':>10}")
    click.echo(f"  {'-'*69}")
    for o in orders:
        click.echo(f"  {o.id:<22} {o.created_at:<22} {o.status:<12} {o.summary.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""

    async def action(settings, stores, session):
        return await OrderHistoryHandler(stores.orders, settings.timeout).get(order_id)

    _display_order(run(action))
