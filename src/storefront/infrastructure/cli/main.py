import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.order_commands import (
    order_add,
    order_complete,
    order_create,
    order_refresh,
    order_remove,
    order_show,
    order_update,
)
from storefront.infrastructure.cli.purchasable_commands import (
    purchasable_add,
    purchasable_delete,
    purchasable_list,
    purchasable_update,
)
from storefront.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Storefront: line-item pricing and stock checks."""
    setup_logging(settings(), verbose=verbose)


@cli.group()
def order() -> None:
    """Manage orders and their line items."""


@cli.group()
def purchasable() -> None:
    """Manage purchasables."""


# Register subcommands
order.add_command(order_add)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_refresh)
order.add_command(order_remove)
order.add_command(order_show)
order.add_command(order_update)
purchasable.add_command(purchasable_add)
purchasable.add_command(purchasable_delete)
purchasable.add_command(purchasable_list)
purchasable.add_command(purchasable_update)
