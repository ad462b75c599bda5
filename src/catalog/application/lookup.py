"""Shared lookup used by every use case that addresses a product by ID."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


def get_product_or_raise(product_repo: ProductRepository, product_id: str) -> Product:
    """Resolve a raw ID string to a stored product.

    Raises InvalidProductIdError for malformed IDs and
    EntityNotFoundError when nothing is stored under the ID.
    """
    product = product_repo.get_by_id(ProductId.from_string(product_id))
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product
