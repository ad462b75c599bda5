"""Unit tests for the Product aggregate."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.clock import ManualClock
from catalog.domain.exceptions import (
    InvalidQuantityDecreaseError,
    InvalidQuantityIncreaseError,
    NegativeQuantityError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductId, ProductName

START = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_product(
    quantity: int = 5,
    description: str | None = None,
    clock: ManualClock | None = None,
) -> Product:
    """Helper to build a valid product on a manual clock."""
    return Product.create(
        name=ProductName("Widget"),
        price=Money.from_float(15.00),
        quantity=quantity,
        description=description,
        clock=clock or ManualClock(START),
    )


class TestProductCreation:

    def test_happy_path(self):
        product = _make_product(quantity=5, description="A widget")
        assert product.name == ProductName("Widget")
        assert product.price == Money.of("15.00")
        assert product.quantity == 5
        assert product.description == "A widget"

    def test_generates_fresh_id(self):
        assert _make_product().id != _make_product().id
        assert isinstance(_make_product().id, ProductId)

    def test_timestamps_come_from_clock(self):
        product = _make_product()
        assert product.created_at == START
        assert product.updated_at == START

    def test_default_clock_is_wall_time(self):
        before = datetime.now(timezone.utc)
        product = Product.create(ProductName("Widget"), Money.of("1"), 0)
        assert before <= product.created_at <= datetime.now(timezone.utc)

    def test_zero_quantity_accepted(self):
        assert _make_product(quantity=0).quantity == 0

    def test_zero_price_accepted(self):
        product = Product.create(ProductName("Freebie"), Money.zero(), 1)
        assert product.price.is_zero()

    def test_negative_quantity_rejected(self):
        with pytest.raises(NegativeQuantityError, match="cannot be negative, got -1") as exc:
            _make_product(quantity=-1)
        assert exc.value.quantity == -1

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _make_product(quantity=2.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw, expected", [
        (None, None),
        ("", None),
        ("   ", None),
        ("  Blue widget  ", "Blue widget"),
    ])
    def test_description_is_sanitized(self, raw, expected):
        assert _make_product(description=raw).description == expected


class TestProductFromPersistence:

    def test_keeps_stored_fields(self):
        pid = ProductId.generate()
        created = START - timedelta(days=10)
        product = Product.from_persistence(
            id=pid,
            name=ProductName("Gadget"),
            price=Money.from_minor_units(2500, "EUR"),
            quantity=3,
            description="  stored as-is ",
            created_at=created,
            updated_at=START,
        )
        assert product.id == pid
        assert product.created_at == created
        assert product.updated_at == START
        assert product.description == "  stored as-is "

    def test_negative_quantity_rejected(self):
        with pytest.raises(NegativeQuantityError):
            Product.from_persistence(
                ProductId.generate(), ProductName("Gadget"), Money.of("1"),
                -5, None, START, START,
            )

    def test_round_trip_through_accessors(self):
        original = _make_product(quantity=7, description="Round trip")
        restored = Product.from_persistence(
            id=original.id,
            name=original.name,
            price=original.price,
            quantity=original.quantity,
            description=original.description,
            created_at=original.created_at,
            updated_at=original.updated_at,
        )
        assert restored.id == original.id
        assert restored.name == original.name
        assert restored.price == original.price
        assert restored.quantity == original.quantity
        assert restored.description == original.description
        assert restored.created_at == original.created_at
        assert restored.updated_at == original.updated_at
        assert str(restored) == str(original)


class TestProductUpdate:

    def test_replaces_fields_and_touches(self):
        clock = ManualClock(START)
        product = _make_product(clock=clock)
        clock.advance(60)

        product.update(
            name=ProductName("Widget Pro"),
            price=Money.from_float(20, "EUR"),
            quantity=12,
            description="  Improved ",
        )

        assert product.name == ProductName("Widget Pro")
        assert product.price == Money.from_minor_units(2000, "EUR")
        assert product.quantity == 12
        assert product.description == "Improved"
        assert product.updated_at == START + timedelta(seconds=60)
        assert product.created_at == START

    def test_empty_description_cleared(self):
        product = _make_product(description="Old")
        product.update(product.name, product.price, product.quantity, "")
        assert product.description is None

    def test_negative_quantity_leaves_product_untouched(self):
        clock = ManualClock(START)
        product = _make_product(quantity=5, description="Keep", clock=clock)
        clock.advance(60)

        with pytest.raises(NegativeQuantityError):
            product.update(ProductName("Changed"), Money.of("99"), -1, "Changed")

        assert product.name == ProductName("Widget")
        assert product.price == Money.of("15")
        assert product.quantity == 5
        assert product.description == "Keep"
        assert product.updated_at == START

    def test_non_string_description_leaves_product_untouched(self):
        clock = ManualClock(START)
        product = _make_product(quantity=5, description="Keep", clock=clock)
        clock.advance(60)

        with pytest.raises(ValidationError, match="description must be a string"):
            product.update(ProductName("Changed"), Money.of("99"), 7, 123)  # type: ignore[arg-type]

        assert (str(product.name), product.quantity) == ("Widget", 5)
        assert product.price == Money.of("15")
        assert product.description == "Keep"
        assert product.updated_at == START

    def test_non_string_description_rejected_on_create(self):
        with pytest.raises(ValidationError, match="description must be a string"):
            _make_product(description=["not", "text"])  # type: ignore[arg-type]


class TestProductQuantity:

    def test_increase(self):
        clock = ManualClock(START)
        product = _make_product(quantity=5, clock=clock)
        clock.advance(1)
        product.increase_quantity(3)
        assert product.quantity == 8
        assert product.updated_at > product.created_at

    def test_decrease(self):
        product = _make_product(quantity=5)
        product.decrease_quantity(5)
        assert product.quantity == 0
        assert not product.is_available()

    def test_decrease_below_zero_rejected_and_state_kept(self):
        clock = ManualClock(START)
        product = _make_product(quantity=5, clock=clock)
        clock.advance(1)
        product.increase_quantity(3)
        touched_at = product.updated_at
        clock.advance(1)

        with pytest.raises(NegativeQuantityError, match="got -2"):
            product.decrease_quantity(10)

        assert product.quantity == 8
        assert product.updated_at == touched_at

    @pytest.mark.parametrize("amount", [0, -1])
    def test_non_positive_increase_rejected(self, amount):
        product = _make_product()
        with pytest.raises(InvalidQuantityIncreaseError, match="must be positive"):
            product.increase_quantity(amount)
        assert product.quantity == 5

    @pytest.mark.parametrize("amount", [0, -1])
    def test_non_positive_decrease_rejected(self, amount):
        product = _make_product()
        with pytest.raises(InvalidQuantityDecreaseError, match="must be positive"):
            product.decrease_quantity(amount)
        assert product.quantity == 5

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _make_product().increase_quantity(True)  # type: ignore[arg-type]


class TestProductQueries:

    def test_is_available(self):
        assert _make_product(quantity=1).is_available()
        assert not _make_product(quantity=0).is_available()

    @pytest.mark.parametrize("requested, expected", [(0, True), (4, True), (5, True), (6, False)])
    def test_can_fulfill_order(self, requested, expected):
        assert _make_product(quantity=5).can_fulfill_order(requested) is expected

    def test_str(self):
        product = _make_product()
        assert str(product) == f"Product{{id={product.id}, name=Widget, price=15}}"

    def test_str_keeps_fractional_price(self):
        product = Product.create(ProductName("Widget"), Money.of("19.99"), 1)
        assert str(product).endswith(", name=Widget, price=19.99}")

    def test_accessors_are_read_only(self):
        product = _make_product()
        with pytest.raises(AttributeError):
            product.quantity = 100  # type: ignore[misc]
