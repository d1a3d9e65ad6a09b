"""Discount item domain entity."""

import copy
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from shoppingcart.domain.exceptions import InvalidArgumentError
from shoppingcart.domain.services.line_item_validation_service import (
    LineItemValidationService,
)
from shoppingcart.domain.services.row_id_service import RowIdService
from shoppingcart.domain.value_objects.number_format import NumberFormat, format_number

if TYPE_CHECKING:
    from shoppingcart.application.ports.discountable_port import Discountable

logger = logging.getLogger(__name__)


@dataclass
class DiscountItem:
    """
    Discount line item.

    A flat discount adjustment attached to a cart. The row identifier is a
    content hash of id, name and value and is used by the cart to merge
    identical discounts.
    """

    id: int | str
    name: str
    value: float
    row_id: str = field(init=False)

    def __post_init__(self) -> None:
        """Validate fields, coerce value and compute the row identifier."""
        LineItemValidationService.validate_identifier(self.id)
        LineItemValidationService.validate_name(self.name)
        self.value = LineItemValidationService.validate_amount(self.value, "value")
        self.row_id = self._generate_row_id(self.id, self.name, self.value)

    @classmethod
    def from_attributes(cls, id: int | str, name: str, value: float) -> "DiscountItem":
        """Create a new instance from the given attributes."""
        return cls(id, name, value)

    @classmethod
    def from_map(cls, attributes: Mapping[str, Any]) -> "DiscountItem":
        """
        Create a new instance from a map holding ``id``, ``name`` and ``value``.

        Args:
            attributes: Map of attributes, e.g. the output of ``to_map``

        Returns:
            New DiscountItem

        Raises:
            InvalidArgumentError: If a key is missing or its value is invalid
        """
        for key, label in (("id", "identifier"), ("name", "name"), ("value", "value")):
            if key not in attributes:
                raise InvalidArgumentError(label, f"Missing required attribute: {key}")

        return cls(attributes["id"], attributes["name"], attributes["value"])

    @classmethod
    def from_discountable(
        cls, item: "Discountable", options: dict[str, Any] | None = None
    ) -> "DiscountItem":
        """
        Create a new instance from a Discountable.

        Args:
            item: Object implementing the Discountable capability
            options: Options passed to each accessor

        Returns:
            New DiscountItem
        """
        options = options or {}
        return cls(
            item.get_discountable_identifier(options),
            item.get_discountable_description(options),
            item.get_discountable_value(options),
        )

    def update_from_attributes(self, attributes: Mapping[str, Any]) -> None:
        """
        Update the discount item from a partial map of attributes.

        Only ``id``, ``name`` and ``value`` present in the map change. The
        update is validated as a whole before anything is written, then the
        row identifier is regenerated.

        Raises:
            InvalidArgumentError: If a provided value is invalid
        """
        new_id = LineItemValidationService.validate_identifier(
            attributes.get("id", self.id)
        )
        new_name = LineItemValidationService.validate_name(
            attributes.get("name", self.name)
        )
        new_value = LineItemValidationService.validate_amount(
            attributes.get("value", self.value), "value"
        )

        self.id = new_id
        self.name = new_name
        self.value = new_value
        self.row_id = self._generate_row_id(self.id, self.name, self.value)

    def value_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted discount value."""
        return format_number(
            self.value, decimals, decimal_point, thousand_separator, number_format
        )

    def copy(self) -> "DiscountItem":
        """Return an independent copy of this discount item."""
        return copy.copy(self)

    def to_map(self) -> dict[str, Any]:
        """
        Get the discount item as a map.

        Returns:
            ``{"rowId", "id", "name", "value"}``
        """
        return {
            "rowId": self.row_id,
            "id": self.id,
            "name": self.name,
            "value": self.value,
        }

    def to_json(self, **options: Any) -> str:
        """
        Convert the discount item to its JSON representation.

        Args:
            options: Keyword arguments forwarded to ``json.dumps``

        Returns:
            Compact JSON object, keys in ``to_map`` order
        """
        options.setdefault("separators", (",", ":"))
        return json.dumps(self.to_map(), **options)

    @staticmethod
    def _generate_row_id(id: int | str, name: str, value: float) -> str:
        row_id = RowIdService.generate(id, name, value)
        logger.debug(f"Generated discount row id {row_id} for id={id!r}")
        return row_id

    def __repr__(self) -> str:
        return (
            f"DiscountItem(row_id={self.row_id!r}, id={self.id!r}, "
            f"name={self.name!r}, value={self.value})"
        )
