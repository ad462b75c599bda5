"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from catalog.domain.clock import Clock
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductId, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Keeps the whole catalog in one JSON array.

    Every call re-reads the file, so two repositories pointing at the
    same path see each other's writes. There is no file locking:
    concurrent writers lose updates.
    """

    def __init__(self, file_path: Path, clock: Clock | None = None) -> None:
        self._file_path = file_path
        self._clock = clock
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._load().get(str(product_id))

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.strip().casefold()
        for product in self._load().values():
            if str(product.name).casefold() == wanted:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[str(product.id)] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        logger.debug("Loaded %d products from %s", len(raw), self._file_path)
        return {item["id"]: self._from_record(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_record(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d products to %s", len(raw), self._file_path)

    def _from_record(self, item: dict[str, Any]) -> Product:
        return Product.from_persistence(
            id=ProductId.from_string(item["id"]),
            name=ProductName(item["name"]),
            price=Money.from_minor_units(item["price"], item.get("currency", "USD")),
            quantity=item["quantity"],
            description=item.get("description"),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            clock=self._clock,
        )

    @staticmethod
    def _to_record(product: Product) -> dict[str, Any]:
        return {
            "id": str(product.id),
            "name": str(product.name),
            "price": product.price.to_minor_units(),
            "currency": product.price.currency,
            "quantity": product.quantity,
            "description": product.description,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
