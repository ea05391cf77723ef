"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import DEFAULT_LIMIT, CatalogHandler
from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.bootstrap import json_catalog_repository
from storefront.infrastructure.cli.runner import run
from storefront.infrastructure.seed import seed_catalog


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return
    click.echo(f"  {'ID':<6} {'Product':<32} {'Category':<20} {'Price':>10} {'Stock':>6}")
    click.echo(f"  {'-'*78}")
    for p in products:
        heart = " *" if p.is_favorited else ""
        stock = "yes" if p.in_stock else "no"
        click.echo(
            f"  {p.id:<6} {p.name + heart:<32} {p.category:<20} {p.price:>10} {stock:>6}"
        )


def _catalog(stores, session) -> CatalogHandler:
    return CatalogHandler(stores.catalog, session.wishlist)


@click.command("list")
@click.option("--limit", default=DEFAULT_LIMIT, show_default=True, help="Maximum products.")
@click.option("--after", default=None, metavar="ID", help="Start after this product.")
def product_list(limit: int, after: str | None) -> None:
    """List the newest products, one page at a time."""

    async def action(settings, stores, session):
        return await _catalog(stores, session).list_products(limit, after=after)

    products = run(action)
    display_products(products)
    if len(products) == limit:
        click.echo(f"More: storefront products list --after {products[-1].id}")


@click.command("show")
@click.argument("product_id")
def product_show(product_id: str) -> None:
    """Show one product."""

    async def action(settings, stores, session):
        return await _catalog(stores, session).show(product_id)

    p = run(action)
    click.echo(f"{p.name}  ({p.category})")
    if p.discount_percent:
        click.echo(f"Price:   {p.price}  (was {p.original_price}, {p.discount_percent}% off)")
    else:
        click.echo(f"Price:   {p.price}")
    click.echo(f"Rating:  {p.rating} ({p.review_count} reviews)")
    click.echo(f"Stock:   {'in stock' if p.in_stock else 'out of stock'}")
    click.echo(f"Wishlist: {'yes' if p.is_favorited else 'no'}")


@click.command("search")
@click.argument("text")
@click.option("--limit", default=DEFAULT_LIMIT, show_default=True, help="Maximum products.")
def product_search(text: str, limit: int) -> None:
    """Find products whose name starts with TEXT."""

    async def action(settings, stores, session):
        return await _catalog(stores, session).search(text, limit)

    display_products(run(action))


@click.command("category")
@click.argument("name")
@click.option("--limit", default=DEFAULT_LIMIT, show_default=True, help="Maximum products.")
def product_category(name: str, limit: int) -> None:
    """List products in a category."""

    async def action(settings, stores, session):
        return await _catalog(stores, session).list_by_category(name, limit)

    display_products(run(action))


@click.command("seed")
def product_seed() -> None:
    """Load the sample catalog into the local JSON store."""

    async def action(settings, stores, session):
        if settings.uses_backend:
            raise ValidationError("Seeding is only supported for the local JSON store")
        return seed_catalog(json_catalog_repository(settings))

    count = run(action)
    click.echo(f"Seeded {count} products.")
