"""Application service: Decrease Stock use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DecreaseStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, amount: int) -> ProductDTO:
        """Take *amount* units of a product out of stock.

        Nothing is saved if the product does not hold enough units.
        """
        product = get_product_or_raise(self._product_repo, product_id)
        product.decrease_quantity(amount)
        self._product_repo.save(product)

        logger.info(
            "Stock of %s decreased by %d to %d", product.id, amount, product.quantity
        )
        return ProductDTO.from_product(product)
