"""
Pytest configuration and fixtures for the shopping cart line item tests.

This module provides:
- Discountable and Shippable capability objects
- A stand-in external model and lookup for association tests
- Number formatting defaults independent of the environment
"""

from typing import Any

import pytest

from shoppingcart.domain.value_objects.number_format import NumberFormat


# ============================================================================
# Capability Objects
# ============================================================================
class DiscountObject:
    """Discountable test object recording the options it receives."""

    def __init__(self, id: int | str = 1, name: str = "Discount item name", value: Any = 10.00):
        self.id = id
        self.name = name
        self.value = value
        self.received_options: list[Any] = []

    def get_discountable_identifier(self, options: dict[str, Any] | None = None) -> int | str:
        self.received_options.append(options)
        return self.id

    def get_discountable_description(self, options: dict[str, Any] | None = None) -> str:
        self.received_options.append(options)
        return self.name

    def get_discountable_value(self, options: dict[str, Any] | None = None) -> Any:
        self.received_options.append(options)
        return self.value


class ShippingObject:
    """Shippable test object."""

    def __init__(self, id: int | str = 1, name: str = "Standard Shipping", price: Any = 5.00):
        self.id = id
        self.name = name
        self.price = price

    def get_shippable_identifier(self) -> int | str:
        return self.id

    def get_shippable_description(self) -> str:
        return self.name

    def get_shippable_price(self) -> Any:
        return self.price


class CarrierModel:
    """Stand-in for an external entity a shipping item is associated with."""

    def __init__(self, id: int | str):
        self.id = id


# ============================================================================
# Fixtures
# ============================================================================
@pytest.fixture
def discount_object_factory() -> type[DiscountObject]:
    """Class used to build Discountable objects with custom values."""
    return DiscountObject


@pytest.fixture
def shipping_object_factory() -> type[ShippingObject]:
    """Class used to build Shippable objects with custom values."""
    return ShippingObject


@pytest.fixture
def carrier_model_class() -> type[CarrierModel]:
    """External model class shipping items can be associated with."""
    return CarrierModel


@pytest.fixture
def carrier_lookup() -> Any:
    """
    Lookup resolving associated carriers.

    Records every call in ``carrier_lookup.calls``.
    """
    calls: list[tuple[str, Any]] = []

    def lookup(model_type: str, identifier: Any) -> CarrierModel:
        calls.append((model_type, identifier))
        return CarrierModel(identifier)

    lookup.calls = calls  # type: ignore[attr-defined]
    return lookup


@pytest.fixture
def default_number_format() -> NumberFormat:
    """Number format with the built-in defaults (2 decimals, '.' and ',')."""
    return NumberFormat()
