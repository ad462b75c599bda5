"""Application service: Check Availability use case (query)."""

from __future__ import annotations

from catalog.application.dto import AvailabilityDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository


class CheckAvailabilityHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, requested: int = 1) -> AvailabilityDTO:
        if requested <= 0:
            raise ValidationError("Requested quantity must be positive")

        product = get_product_or_raise(self._product_repo, product_id)
        return AvailabilityDTO(
            product_id=str(product.id),
            product_name=str(product.name),
            in_stock=product.quantity,
            requested=requested,
            available=product.is_available(),
            can_fulfill=product.can_fulfill_order(requested),
        )
