"""Domain exceptions package."""

from shoppingcart.domain.exceptions.base import DomainException
from shoppingcart.domain.exceptions.line_item_exceptions import (
    AssociatedModelError,
    InvalidArgumentError,
    LineItemDomainException,
)

__all__ = [
    # Base
    "DomainException",
    # Line item exceptions
    "LineItemDomainException",
    "InvalidArgumentError",
    "AssociatedModelError",
]
