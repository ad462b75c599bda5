import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.stock_commands import (
    stock_check,
    stock_decrease,
    stock_increase,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Catalog — product and stock management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_check)
stock.add_command(stock_decrease)
stock.add_command(stock_increase)
