"""CLI commands for stock levels."""

from __future__ import annotations

import click

from catalog.application.check_availability import CheckAvailabilityHandler
from catalog.application.decrease_stock import DecreaseStockHandler
from catalog.application.increase_stock import IncreaseStockHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("increase")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units received.")
def stock_increase(product_id: str, amount: int) -> None:
    """Add units to a product's stock."""
    handler = IncreaseStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.quantity}")


@click.command("decrease")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units removed.")
def stock_decrease(product_id: str, amount: int) -> None:
    """Remove units from a product's stock."""
    handler = DecreaseStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.quantity}")


@click.command("check")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", "requested", type=int, default=1, show_default=True,
              help="Units the order needs.")
def stock_check(product_id: str, requested: int) -> None:
    """Check whether a product can cover an order."""
    handler = CheckAvailabilityHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, requested=requested)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    verdict = "can" if dto.can_fulfill else "cannot"
    click.echo(
        f"'{dto.product_name}' {verdict} fulfill {dto.requested} "
        f"(in stock: {dto.in_stock})"
    )
