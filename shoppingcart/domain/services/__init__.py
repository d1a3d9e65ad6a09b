"""Domain services package."""

from shoppingcart.domain.services.line_item_validation_service import (
    LineItemValidationService,
)
from shoppingcart.domain.services.row_id_service import RowIdService

__all__ = [
    "LineItemValidationService",
    "RowIdService",
]
