import click

from storefront.infrastructure.cli.address_commands import (
    address_add,
    address_default,
    address_delete,
    address_list,
)
from storefront.infrastructure.cli.order_commands import checkout, order_list, order_show
from storefront.infrastructure.cli.profile_commands import profile_show, profile_update
from storefront.infrastructure.cli.product_commands import (
    product_category,
    product_list,
    product_search,
    product_seed,
    product_show,
)
from storefront.infrastructure.cli.wishlist_commands import wishlist_list, wishlist_toggle
from storefront.infrastructure.logging_setup import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Storefront — catalog, wishlist and checkout"""
    configure_logging(verbose)


@cli.group()
def products() -> None:
    """Browse the catalog."""


@cli.group()
def wishlist() -> None:
    """Manage your wishlist."""


@cli.group()
def orders() -> None:
    """View your orders."""


@cli.group()
def addresses() -> None:
    """Manage shipping addresses."""


@cli.group()
def profile() -> None:
    """View and edit your profile."""


# Register subcommands
cli.add_command(checkout)
products.add_command(product_category)
products.add_command(product_list)
products.add_command(product_search)
products.add_command(product_seed)
products.add_command(product_show)
wishlist.add_command(wishlist_list)
wishlist.add_command(wishlist_toggle)
orders.add_command(order_list)
orders.add_command(order_show)
addresses.add_command(address_add)
addresses.add_command(address_default)
addresses.add_command(address_delete)
addresses.add_command(address_list)
profile.add_command(profile_show)
profile.add_command(profile_update)
