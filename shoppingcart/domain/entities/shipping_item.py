"""Shipping item domain entity."""

import copy
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from shoppingcart.domain.exceptions import AssociatedModelError, InvalidArgumentError
from shoppingcart.domain.services.line_item_validation_service import (
    LineItemValidationService,
)
from shoppingcart.domain.services.row_id_service import RowIdService
from shoppingcart.domain.value_objects.number_format import NumberFormat, format_number

if TYPE_CHECKING:
    from shoppingcart.application.ports.model_lookup_port import ModelLookupPort
    from shoppingcart.application.ports.shippable_port import Shippable

logger = logging.getLogger(__name__)


@dataclass
class ShippingItem:
    """
    Shipping line item.

    A shipping charge attached to a cart. ``price`` is the stored base price
    without tax. Tax, subtotal and totals are derived on every access from
    the effective price, which applies free shipping and the shipping
    discount without ever changing ``price`` itself.
    """

    id: int | str
    name: str
    price: float
    qty: float = 1.0
    tax_rate: float = 0.0
    is_free_shipping: bool = False
    shipping_discount: float = 0.0
    associated_model: str | None = None
    row_id: str = field(init=False)
    _model_lookup: "ModelLookupPort | None" = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate fields, coerce amounts and compute the row identifier."""
        LineItemValidationService.validate_identifier(self.id)
        LineItemValidationService.validate_name(self.name)
        self.price = LineItemValidationService.validate_amount(self.price, "price")
        self.qty = LineItemValidationService.validate_quantity(self.qty)
        self.tax_rate = LineItemValidationService.validate_amount(self.tax_rate, "tax rate")
        self.shipping_discount = LineItemValidationService.validate_amount(
            self.shipping_discount, "shipping discount"
        )
        self.is_free_shipping = bool(self.is_free_shipping)
        self.row_id = self._generate_row_id(self.id, self.name, self.price)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------
    @classmethod
    def from_attributes(cls, id: int | str, name: str, price: float) -> "ShippingItem":
        """Create a new instance from the given attributes."""
        return cls(id, name, price)

    @classmethod
    def from_map(cls, attributes: Mapping[str, Any]) -> "ShippingItem":
        """
        Create a new instance from a map.

        ``id``, ``name`` and ``price`` are required. ``qty``, ``taxRate``,
        ``freeShipping`` and ``shippingDiscount`` are applied when present,
        so the output of ``to_map`` round-trips. Derived keys are ignored.

        Raises:
            InvalidArgumentError: If a required key is missing or a value is invalid
        """
        for key, label in (("id", "identifier"), ("name", "name"), ("price", "price")):
            if key not in attributes:
                raise InvalidArgumentError(label, f"Missing required attribute: {key}")

        return cls(
            attributes["id"],
            attributes["name"],
            attributes["price"],
            qty=attributes.get("qty", 1.0),
            tax_rate=attributes.get("taxRate", 0.0),
            is_free_shipping=attributes.get("freeShipping", False),
            shipping_discount=attributes.get("shippingDiscount", 0.0),
        )

    @classmethod
    def from_shippable(cls, item: "Shippable") -> "ShippingItem":
        """Create a new instance from a Shippable."""
        return cls(
            item.get_shippable_identifier(),
            item.get_shippable_description(),
            item.get_shippable_price(),
        )

    # -------------------------------------------------------------------------
    # Derived amounts
    # -------------------------------------------------------------------------
    @property
    def effective_price(self) -> float:
        """Price actually charged: zero with free shipping, else price minus discount."""
        if self.is_free_shipping:
            return 0.0
        return self.price - self.shipping_discount

    @property
    def tax(self) -> float:
        return self.effective_price * (self.tax_rate / 100)

    @property
    def price_tax(self) -> float:
        return self.effective_price + self.tax

    @property
    def subtotal(self) -> float:
        """Price for the whole line without tax."""
        return self.qty * self.effective_price

    @property
    def total(self) -> float:
        """Price for the whole line with tax."""
        return self.qty * self.price_tax

    @property
    def tax_total(self) -> float:
        return self.tax * self.qty

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------
    def price_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """
        Returns the formatted effective price without tax.

        Args:
            decimals: Number of decimals, defaults to the configured value
            decimal_point: Decimal point, defaults to the configured value
            thousand_separator: Thousands separator, defaults to the configured value
            number_format: Injected defaults used instead of the settings

        Returns:
            Formatted price
        """
        return format_number(
            self.effective_price, decimals, decimal_point, thousand_separator, number_format
        )

    def price_tax_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted price with tax."""
        return format_number(
            self.price_tax, decimals, decimal_point, thousand_separator, number_format
        )

    def subtotal_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted subtotal."""
        return format_number(
            self.subtotal, decimals, decimal_point, thousand_separator, number_format
        )

    def total_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted total."""
        return format_number(
            self.total, decimals, decimal_point, thousand_separator, number_format
        )

    def tax_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted tax."""
        return format_number(
            self.tax, decimals, decimal_point, thousand_separator, number_format
        )

    def tax_total_display(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
        number_format: NumberFormat | None = None,
    ) -> str:
        """Returns the formatted tax for the whole line."""
        return format_number(
            self.tax_total, decimals, decimal_point, thousand_separator, number_format
        )

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def set_quantity(self, qty: Any) -> "ShippingItem":
        """
        Set the quantity for this shipping item.

        Raises:
            InvalidArgumentError: If qty is empty or not numeric
        """
        self.qty = LineItemValidationService.validate_quantity(qty)
        return self

    def set_tax_rate(self, tax_rate: Any) -> "ShippingItem":
        """
        Set the tax rate, as a percentage.

        Any numeric rate replaces the current one; non-numeric input is
        rejected and the current rate is kept.

        Raises:
            InvalidArgumentError: If tax_rate is not numeric or not finite
        """
        self.tax_rate = LineItemValidationService.validate_amount(tax_rate, "tax rate")
        return self

    def set_free_shipping(self, is_free_shipping: bool = True) -> "ShippingItem":
        self.is_free_shipping = bool(is_free_shipping)
        return self

    def set_shipping_discount(self, shipping_discount: Any) -> "ShippingItem":
        """
        Set the amount taken off the price.

        Raises:
            InvalidArgumentError: If shipping_discount is not numeric
        """
        self.shipping_discount = LineItemValidationService.validate_amount(
            shipping_discount, "shipping discount"
        )
        return self

    def update_from_attributes(self, attributes: Mapping[str, Any]) -> None:
        """
        Update the shipping item from a partial map of attributes.

        Only ``id``, ``name``, ``price`` and ``qty`` present in the map
        change. The update is validated as a whole before anything is
        written, then the row identifier is regenerated.

        Raises:
            InvalidArgumentError: If a provided value is invalid
        """
        new_id = LineItemValidationService.validate_identifier(
            attributes.get("id", self.id)
        )
        new_name = LineItemValidationService.validate_name(
            attributes.get("name", self.name)
        )
        new_price = LineItemValidationService.validate_amount(
            attributes.get("price", self.price), "price"
        )
        new_qty = LineItemValidationService.validate_quantity(
            attributes.get("qty", self.qty)
        )

        self.id = new_id
        self.name = new_name
        self.price = new_price
        self.qty = new_qty
        self.refresh_row_id()

    def update_from_shippable(self, item: "Shippable") -> None:
        """
        Update id, name and price from a Shippable.

        The row identifier is kept so the cart can still find the row under
        its current key; call ``refresh_row_id`` to rehash.

        Raises:
            InvalidArgumentError: If a value returned by the Shippable is invalid
        """
        new_id = LineItemValidationService.validate_identifier(
            item.get_shippable_identifier()
        )
        new_name = LineItemValidationService.validate_name(
            item.get_shippable_description()
        )
        new_price = LineItemValidationService.validate_amount(
            item.get_shippable_price(), "price"
        )

        self.id = new_id
        self.name = new_name
        self.price = new_price

    def refresh_row_id(self) -> str:
        """Regenerate the row identifier from id, name and price."""
        self.row_id = self._generate_row_id(self.id, self.name, self.price)
        return self.row_id

    # -------------------------------------------------------------------------
    # Associated model
    # -------------------------------------------------------------------------
    def associate(
        self, model: Any, lookup: "ModelLookupPort | None" = None
    ) -> "ShippingItem":
        """
        Associate the shipping item with the given model.

        Args:
            model: Type tag string, class or instance of the external entity
            lookup: Callable resolving ``(model_type, id)`` to the entity

        Returns:
            This shipping item
        """
        if isinstance(model, str):
            self.associated_model = model
        else:
            model_class = model if isinstance(model, type) else type(model)
            self.associated_model = f"{model_class.__module__}.{model_class.__qualname__}"

        if lookup is not None:
            self._model_lookup = lookup

        return self

    @property
    def model(self) -> Any:
        """
        Resolve the associated model through the injected lookup.

        Returns:
            Entity returned by the lookup, None when nothing is associated

        Raises:
            AssociatedModelError: If a model is associated but no lookup was given
        """
        if self.associated_model is None:
            return None

        if self._model_lookup is None:
            raise AssociatedModelError(self.associated_model, "no lookup configured")

        return self._model_lookup(self.associated_model, self.id)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    def copy(self) -> "ShippingItem":
        """Return an independent copy of this shipping item."""
        return copy.copy(self)

    def to_map(self) -> dict[str, Any]:
        """
        Get the shipping item as a map.

        ``price`` is the stored base price; the derived amounts use the
        effective price.
        """
        return {
            "rowId": self.row_id,
            "id": self.id,
            "name": self.name,
            "qty": self.qty,
            "price": self.price,
            "tax": self.tax,
            "subtotal": self.subtotal,
            "freeShipping": self.is_free_shipping,
            "shippingDiscount": self.shipping_discount,
            "taxRate": self.tax_rate,
            "priceTax": self.price_tax,
            "total": self.total,
            "taxTotal": self.tax_total,
        }

    def to_json(self, **options: Any) -> str:
        """
        Convert the shipping item to its JSON representation.

        Args:
            options: Keyword arguments forwarded to ``json.dumps``
        """
        options.setdefault("separators", (",", ":"))
        return json.dumps(self.to_map(), **options)

    @staticmethod
    def _generate_row_id(id: int | str, name: str, price: float) -> str:
        row_id = RowIdService.generate(id, name, price)
        logger.debug(f"Generated shipping row id {row_id} for id={id!r}")
        return row_id

    def __repr__(self) -> str:
        return (
            f"ShippingItem(row_id={self.row_id!r}, id={self.id!r}, name={self.name!r}, "
            f"price={self.price}, qty={self.qty}, tax_rate={self.tax_rate})"
        )
