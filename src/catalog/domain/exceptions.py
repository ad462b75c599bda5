"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each concrete error keeps the offending values as attributes.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class InvalidProductIdError(ValidationError):

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid UUID format: {value!r}")


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


class NegativeAmountError(ValidationError):

    def __init__(self, amount: object) -> None:
        self.amount = amount
        super().__init__(f"Money amount cannot be negative, got {amount}")


class InvalidCurrencyError(ValidationError):

    def __init__(self, currency: object, allowed: Iterable[str]) -> None:
        self.currency = currency
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid currency: {currency}. Allowed: {', '.join(self.allowed)}"
        )


class CurrencyMismatchError(ValidationError):

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine {left} with {right}")


class NegativeResultError(ValidationError):

    def __init__(self, minuend: int, subtrahend: int) -> None:
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(
            "Money subtraction would result in a negative amount "
            f"({minuend} - {subtrahend} minor units)"
        )


class NegativeMultiplierError(ValidationError):

    def __init__(self, multiplier: object) -> None:
        self.multiplier = multiplier
        super().__init__(f"Multiplier cannot be negative, got {multiplier}")


# ---------------------------------------------------------------------------
# Product name
# ---------------------------------------------------------------------------


class EmptyNameError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Product name cannot be empty")


class NameTooShortError(ValidationError):

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Product name must be at least {minimum} characters, got {length}"
        )


class NameTooLongError(ValidationError):

    def __init__(self, length: int, maximum: int) -> None:
        self.length = length
        self.maximum = maximum
        super().__init__(
            f"Product name must not exceed {maximum} characters, got {length}"
        )


# ---------------------------------------------------------------------------
# Product quantity
# ---------------------------------------------------------------------------


class NegativeQuantityError(ValidationError):

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Product quantity cannot be negative, got {quantity}")


class InvalidQuantityIncreaseError(ValidationError):

    def __init__(self, amount: int) -> None:
        self.amount = amount
        super().__init__(f"Quantity increase must be positive, got {amount}")


class InvalidQuantityDecreaseError(ValidationError):

    def __init__(self, amount: int) -> None:
        self.amount = amount
        super().__init__(f"Quantity decrease must be positive, got {amount}")
