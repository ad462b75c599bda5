"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "19.99 USD"
    quantity: int
    description: str | None
    available: bool
    created_at: str
    updated_at: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=str(product.name),
            price=product.price.format(),
            quantity=product.quantity,
            description=product.description,
            available=product.is_available(),
            created_at=product.created_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
            updated_at=product.updated_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
        )


@dataclass(frozen=True)
class AvailabilityDTO:
    """Output: whether a product can cover a requested quantity."""

    product_id: str
    product_name: str
    in_stock: int
    requested: int
    available: bool
    can_fulfill: bool
