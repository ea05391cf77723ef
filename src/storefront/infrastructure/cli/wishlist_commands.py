"""CLI commands for the wishlist."""

from __future__ import annotations

import click

from storefront.application.manage_wishlist import WishlistHandler
from storefront.infrastructure.cli.product_commands import display_products
from storefront.infrastructure.cli.runner import run


@click.command("list")
def wishlist_list() -> None:
    """List favorited products."""

    async def action(settings, stores, session):
        return await WishlistHandler(session, stores.catalog, settings.timeout).favorites()

    display_products(run(action))


@click.command("toggle")
@click.argument("product_id")
def wishlist_toggle(product_id: str) -> None:
    """Add a product to the wishlist, or remove it if already there."""

    async def action(settings, stores, session):
        return await WishlistHandler(session, stores.catalog, settings.timeout).toggle(product_id)

    if run(action):
        click.echo(f"Product {product_id} added to wishlist.")
    else:
        click.echo(f"Product {product_id} removed from wishlist.")
