"""Domain value objects package."""

from shoppingcart.domain.value_objects.number_format import NumberFormat, format_number

__all__ = [
    "NumberFormat",
    "format_number",
]
