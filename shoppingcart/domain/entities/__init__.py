"""Domain entities package."""

from shoppingcart.domain.entities.discount_item import DiscountItem
from shoppingcart.domain.entities.shipping_item import ShippingItem

__all__ = [
    "DiscountItem",
    "ShippingItem",
]
