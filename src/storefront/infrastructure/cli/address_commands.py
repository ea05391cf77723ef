"""CLI commands for the address book."""

from __future__ import annotations

import click

from storefront.application.manage_addresses import AddressBookHandler
from storefront.domain.model.address import ShippingAddress
from storefront.infrastructure.cli.runner import run


def _book(settings, stores) -> AddressBookHandler:
    return AddressBookHandler(stores.addresses, settings.timeout)


@click.command("list")
def address_list() -> None:
    """List saved addresses (default first)."""

    async def action(settings, stores, session):
        return await _book(settings, stores).list_addresses(session.require_user())

    addresses = run(action)
    if not addresses:
        click.echo("No saved addresses.")
        return
    for a in addresses:
        marker = " (default)" if a.is_default else ""
        click.echo(f"[{a.id}] {a.name}{marker}")
        click.echo(f"    {a.one_line}")
        click.echo(f"    {a.phone}")


@click.command("add")
@click.option("--name", required=True, help="Recipient's full name.")
@click.option("--street", required=True, help="Street address.")
@click.option("--city", required=True)
@click.option("--region", required=True, help="State or province.")
@click.option("--postal-code", required=True)
@click.option("--country", required=True)
@click.option("--phone", required=True)
@click.option("--default", "is_default", is_flag=True, default=False, help="Make it the default.")
def address_add(
    name: str,
    street: str,
    city: str,
    region: str,
    postal_code: str,
    country: str,
    phone: str,
    is_default: bool,
) -> None:
    """Save a new shipping address."""
    address = ShippingAddress(
        name=name,
        street=street,
        city=city,
        region=region,
        postal_code=postal_code,
        country=country,
        phone=phone,
        is_default=is_default,
    )

    async def action(settings, stores, session):
        return await _book(settings, stores).add(session.require_user(), address)

    click.echo(f"Address {run(action)} saved.")


@click.command("default")
@click.argument("address_id")
def address_default(address_id: str) -> None:
    """Make ADDRESS_ID the default address."""

    async def action(settings, stores, session):
        await _book(settings, stores).set_default(session.require_user(), address_id)

    run(action)
    click.echo(f"Address {address_id} is now the default.")


@click.command("delete")
@click.argument("address_id")
def address_delete(address_id: str) -> None:
    """Delete a saved address."""

    async def action(settings, stores, session):
        await _book(settings, stores).delete(session.require_user(), address_id)

    run(action)
    click.echo(f"Address {address_id} deleted.")
