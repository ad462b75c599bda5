"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, search: str | None = None, available_only: bool = False) -> list[ProductDTO]:
        """List products sorted by name.

        *search* keeps products whose name contains it, ignoring case.
        *available_only* drops products that are out of stock.
        """
        products = self._product_repo.list_all()
        if search:
            products = [p for p in products if p.name.contains(search)]
        if available_only:
            products = [p for p in products if p.is_available()]
        products.sort(key=lambda p: str(p.name).casefold())
        return [ProductDTO.from_product(p) for p in products]
