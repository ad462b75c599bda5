"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.domain.clock import Clock
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import DEFAULT_CURRENCY, Money, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock | None = None) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(
        self,
        name: str,
        price: str,
        quantity: int = 0,
        currency: str = DEFAULT_CURRENCY,
        description: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product_name = ProductName(name)

        existing = self._product_repo.get_by_name(str(product_name))
        if existing is not None:
            raise ValidationError(f"Product '{product_name}' already exists")

        product = Product.create(
            name=product_name,
            price=Money.of(price, currency),
            quantity=quantity,
            description=description,
            clock=self._clock,
        )
        self._product_repo.save(product)

        logger.info("Added product %s (%s)", product.id, product.name)
        return ProductDTO.from_product(product)
