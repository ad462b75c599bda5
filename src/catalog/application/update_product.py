"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | None = None,
        currency: str | None = None,
        quantity: int | None = None,
        description: str | None = None,
    ) -> ProductDTO:
        """Update a product's details.

        Any argument left as ``None`` keeps its current value. All new
        values are validated before the product is touched. A new currency
        needs a new price; the stored amount is never re-tagged.
        """
        product = get_product_or_raise(self._product_repo, product_id)

        new_name = ProductName(name) if name is not None else product.name
        if new_name != product.name:
            clash = self._product_repo.get_by_name(str(new_name))
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{new_name}' already exists")

        if price is not None:
            new_currency = currency if currency is not None else product.price.currency
            new_price = Money.of(price, new_currency)
        else:
            if currency is not None and currency.upper() != product.price.currency:
                raise ValidationError(
                    f"Changing currency from {product.price.currency} to "
                    f"{currency.upper()} requires a new price"
                )
            new_price = product.price

        product.update(
            name=new_name,
            price=new_price,
            quantity=quantity if quantity is not None else product.quantity,
            description=description if description is not None else product.description,
        )
        self._product_repo.save(product)

        logger.info("Updated product %s", product.id)
        return ProductDTO.from_product(product)
