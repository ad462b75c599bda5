"""Product aggregate.

Products are the only aggregate of the catalog. Name and price are
value objects that validate themselves; the aggregate adds the stock
rules on top and keeps the modification timestamp current.
"""

from __future__ import annotations

from datetime import datetime

from catalog.domain.clock import SYSTEM_CLOCK, Clock
from catalog.domain.exceptions import (
    InvalidQuantityDecreaseError,
    InvalidQuantityIncreaseError,
    NegativeQuantityError,
    ValidationError,
)
from catalog.domain.model.value_objects import Money, ProductId, ProductName


class Product:
    """Aggregate root for a catalog product.

    Invariants:
    - ``quantity`` is an integer and never negative
    - ``id`` and ``created_at`` never change after construction

    Use ``Product.create()`` for new products and
    ``Product.from_persistence()`` to rebuild stored ones. Every mutator
    validates its input before touching any field, so a rejected call
    leaves the product exactly as it was.

    Instances are not synchronised. Callers sharing one product between
    threads or tasks must serialise mutations themselves.
    """

    def __init__(
        self,
        id: ProductId,
        name: ProductName,
        price: Money,
        quantity: int,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        self._guard_quantity(quantity)

        self._id = id
        self._name = name
        self._price = price
        self._quantity = quantity
        self._description = description
        self._created_at = created_at
        self._updated_at = updated_at
        self._clock = clock

    # --- Named constructors ---------------------------------------------------

    @classmethod
    def create(
        cls,
        name: ProductName,
        price: Money,
        quantity: int,
        description: str | None = None,
        clock: Clock | None = None,
    ) -> Product:
        """Create a brand-new product with a fresh id and timestamps."""
        clock = clock or SYSTEM_CLOCK
        now = clock.now()
        return cls(
            id=ProductId.generate(),
            name=name,
            price=price,
            quantity=quantity,
            description=cls._sanitize_description(description),
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    @classmethod
    def from_persistence(
        cls,
        id: ProductId,
        name: ProductName,
        price: Money,
        quantity: int,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
        clock: Clock | None = None,
    ) -> Product:
        """Rebuild a stored product.

        Id, description and timestamps are trusted as stored; only the
        quantity guard runs again.
        """
        return cls(
            id=id,
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
            clock=clock or SYSTEM_CLOCK,
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: ProductName,
        price: Money,
        quantity: int,
        description: str | None,
    ) -> None:
        """Replace the editable attributes in one step."""
        self._guard_quantity(quantity)
        description = self._sanitize_description(description)

        self._name = name
        self._price = price
        self._quantity = quantity
        self._description = description
        self._touch()

    def increase_quantity(self, amount: int) -> None:
        self._guard_integer(amount, "Quantity increase")
        if amount <= 0:
            raise InvalidQuantityIncreaseError(amount)

        self._quantity += amount
        self._touch()

    def decrease_quantity(self, amount: int) -> None:
        """Take *amount* units out of stock.

        Raises NegativeQuantityError, without changing anything, if
        there are fewer than *amount* units left.
        """
        self._guard_integer(amount, "Quantity decrease")
        if amount <= 0:
            raise InvalidQuantityDecreaseError(amount)

        new_quantity = self._quantity - amount
        self._guard_quantity(new_quantity)

        self._quantity = new_quantity
        self._touch()

    # --- Queries --------------------------------------------------------------

    def is_available(self) -> bool:
        return self._quantity > 0

    def can_fulfill_order(self, requested_quantity: int) -> bool:
        return self._quantity >= requested_quantity

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> ProductId:
        return self._id

    @property
    def name(self) -> ProductName:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        price = self._price.to_float()
        shown = int(price) if price.is_integer() else price
        return f"Product{{id={self._id}, name={self._name}, price={shown}}}"

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!s}, name={self._name.value!r}, "
            f"price={self._price.format()!r}, quantity={self._quantity})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self._updated_at = self._clock.now()

    @classmethod
    def _guard_quantity(cls, quantity: int) -> None:
        cls._guard_integer(quantity, "Product quantity")
        if quantity < 0:
            raise NegativeQuantityError(quantity)

    @staticmethod
    def _guard_integer(value: object, label: str) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"{label} must be an integer, got {type(value).__name__}"
            )

    @staticmethod
    def _sanitize_description(description: str | None) -> str | None:
        if description is None:
            return None
        if not isinstance(description, str):
            raise ValidationError(
                f"Product description must be a string, got {type(description).__name__}"
            )
        trimmed = description.strip()
        return trimmed or None
