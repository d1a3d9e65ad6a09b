"""Ports package: capabilities and lookups the line items depend on."""

from shoppingcart.application.ports.discountable_port import Discountable
from shoppingcart.application.ports.model_lookup_port import ModelLookupPort
from shoppingcart.application.ports.shippable_port import Shippable

__all__ = [
    "Discountable",
    "ModelLookupPort",
    "Shippable",
]
