"""Value Objects of the catalog domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from catalog.domain.exceptions import (
    CurrencyMismatchError,
    EmptyNameError,
    InvalidCurrencyError,
    InvalidProductIdError,
    NameTooLongError,
    NameTooShortError,
    NegativeAmountError,
    NegativeMultiplierError,
    NegativeResultError,
    ValidationError,
)


# ── ProductId ────────────────────────────────────────────────────────────────
_HEX_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_UUID_TEXT = re.compile(
    rf"(?:urn:uuid:)?{_HEX_UUID}|\{{{_HEX_UUID}\}}|[0-9a-f]{{32}}",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ProductId:
    """Opaque product identity backed by a UUID."""

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise InvalidProductIdError(self.value)

    @staticmethod
    def generate() -> ProductId:
        """New random identity (UUID v4)."""
        return ProductId(uuid.uuid4())

    @staticmethod
    def from_string(value: str) -> ProductId:
        """Parse a UUID in canonical, braced, ``urn:uuid:`` or bare 32-hex form."""
        if not isinstance(value, str) or not _UUID_TEXT.fullmatch(value):
            raise InvalidProductIdError(value)
        return ProductId(uuid.UUID(value))

    def __str__(self) -> str:
        return str(self.value)


# ── Money ────────────────────────────────────────────────────────────────────

SCALE = 100
DEFAULT_CURRENCY = "USD"
# Fixed allow-list; adding a currency is a code change, not configuration.
ALLOWED_CURRENCIES = ("RUB", "USD", "EUR")


def _exact_product(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
        return a * b


def _round_half_up(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid money amount: {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid money amount: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    The amount is an integer count of minor units (cents, kopecks) so
    arithmetic never accumulates floating-point error. Currency codes
    are normalised to upper case on construction.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Money amount must be an integer number of minor units, "
                f"got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise NegativeAmountError(self.amount)
        if not isinstance(self.currency, str):
            raise InvalidCurrencyError(self.currency, ALLOWED_CURRENCIES)
        upper = self.currency.upper()
        if upper not in ALLOWED_CURRENCIES:
            raise InvalidCurrencyError(self.currency, ALLOWED_CURRENCIES)
        object.__setattr__(self, "currency", upper)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def from_float(amount: float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build Money from an amount in major units, rounding half up to cents."""
        value = _to_decimal(amount)
        if value < 0:
            raise NegativeAmountError(amount)
        return Money(_round_half_up(_exact_product(value, Decimal(SCALE))), currency)

    @staticmethod
    def from_minor_units(minor_units: int, currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(minor_units, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(0, currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory for raw user input such as ``"19.99"``."""
        return Money.from_float(_to_decimal(amount), currency)

    # --- Conversions ----------------------------------------------------------

    def to_float(self) -> float:
        return self.amount / SCALE

    def to_minor_units(self) -> int:
        return self.amount

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise NegativeResultError(self.amount, other.amount)
        return Money(result, self.currency)

    def multiply(self, multiplier: int | float | Decimal) -> Money:
        """Scale by a non-negative factor; fractional results round half up."""
        factor = _to_decimal(multiplier)
        if factor < 0:
            raise NegativeMultiplierError(multiplier)
        return Money(_round_half_up(_exact_product(Decimal(self.amount), factor)), self.currency)

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, multiplier: object) -> Money:
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float, Decimal)):
            return NotImplemented
        return self.multiply(multiplier)

    # --- Comparison -----------------------------------------------------------

    def greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def less_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Display --------------------------------------------------------------

    def format(self) -> str:
        """Two decimals and the currency code, e.g. ``"19.99 USD"``."""
        whole, cents = divmod(self.amount, SCALE)
        return f"{whole}.{cents:02d} {self.currency}"

    def __str__(self) -> str:
        return self.format()

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Can only combine Money with Money, got {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)


# ── ProductName ──────────────────────────────────────────────────────────────

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class ProductName:
    """A trimmed product name between 2 and 255 characters long.

    Lengths count Unicode code points, so "Кофе" is four characters
    regardless of how many bytes it takes in UTF-8.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Product name must be a string, got {type(self.value).__name__}"
            )
        trimmed = self.value.strip()
        if not trimmed:
            raise EmptyNameError()
        if len(trimmed) < NAME_MIN_LENGTH:
            raise NameTooShortError(len(trimmed), NAME_MIN_LENGTH)
        if len(trimmed) > NAME_MAX_LENGTH:
            raise NameTooLongError(len(trimmed), NAME_MAX_LENGTH)
        object.__setattr__(self, "value", trimmed)

    @staticmethod
    def from_string(value: str) -> ProductName:
        return ProductName(value)

    def contains(self, substring: str) -> bool:
        """Case-insensitive substring search."""
        return substring.casefold() in self.value.casefold()

    def length(self) -> int:
        return len(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
