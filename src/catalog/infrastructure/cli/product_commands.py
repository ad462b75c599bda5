"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import ALLOWED_CURRENCIES, DEFAULT_CURRENCY
from catalog.infrastructure.bootstrap import product_repository

_CURRENCY = click.Choice(ALLOWED_CURRENCIES, case_sensitive=False)


def _echo_product(dto: ProductDTO) -> None:
    click.echo(f"Product:     {dto.name}")
    click.echo(f"ID:          {dto.id}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Quantity:    {dto.quantity}{'' if dto.available else '  (out of stock)'}")
    if dto.description:
        click.echo(f"Description: {dto.description}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--currency", type=_CURRENCY, default=DEFAULT_CURRENCY, show_default=True)
@click.option("--quantity", type=int, default=0, show_default=True, help="Initial stock.")
@click.option("--description", default=None, help="Free-text description.")
def product_add(
    name: str, price: str, currency: str, quantity: int, description: str | None
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name,
            price=price,
            quantity=quantity,
            currency=currency,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--search", default=None, help="Only names containing this text.")
@click.option("--available", "available_only", is_flag=True, help="Only products in stock.")
def product_list(search: str | None, available_only: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle(search=search, available_only=available_only)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Price':>14} {'Qty':>6}")
    click.echo("-" * 84)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name:<24} {p.price:>14} {p.quantity:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--currency", type=_CURRENCY, default=None, help="New currency.")
@click.option("--quantity", type=int, default=None, help="New stock level.")
@click.option("--description", default=None, help="New description ('' clears it).")
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    currency: str | None,
    quantity: int | None,
    description: str | None,
) -> None:
    """Update a product's details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            currency=currency,
            quantity=quantity,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated")
    _echo_product(dto)
