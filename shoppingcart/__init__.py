"""Discount and shipping line items for shopping carts."""

from shoppingcart.domain.entities import DiscountItem, ShippingItem
from shoppingcart.domain.exceptions import (
    AssociatedModelError,
    DomainException,
    InvalidArgumentError,
)
from shoppingcart.domain.value_objects import NumberFormat

__version__ = "0.1.0"

__all__ = [
    "AssociatedModelError",
    "DiscountItem",
    "DomainException",
    "InvalidArgumentError",
    "NumberFormat",
    "ShippingItem",
]
