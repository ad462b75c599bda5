"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository
but keeps everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[ProductId, Product] = {}
        self.saved: list[Product] = []
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if str(p.name).casefold() == name.strip().casefold():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product
        self.saved.append(product)
