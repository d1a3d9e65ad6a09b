"""Line item validation domain service."""

import logging
import math
import re
from decimal import Decimal
from typing import Any

from shoppingcart.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class LineItemValidationService:
    """
    Domain service for line item field validation.

    Shared by discount and shipping items so both reject the same inputs:
    empty identifiers and names, and amounts that are not numeric.
    """

    # Signed integer, decimal or exponent notation, surrounding blanks allowed
    NUMERIC_STRING_REGEX = re.compile(
        r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$"
    )

    @staticmethod
    def is_empty(value: Any) -> bool:
        """
        Check whether a value counts as empty.

        ``None``, ``False``, zero, ``""``, ``"0"`` and empty collections are
        empty.
        """
        if value is None or value is False:
            return True
        if isinstance(value, str):
            return value == "" or value == "0"
        if isinstance(value, (int, float, Decimal)):
            return value == 0
        if isinstance(value, (list, tuple, dict, set, frozenset)):
            return len(value) == 0
        return False

    @classmethod
    def is_numeric(cls, value: Any) -> bool:
        """Check whether a value is a number or a numeric string."""
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float, Decimal)):
            return True
        if isinstance(value, str):
            return cls.NUMERIC_STRING_REGEX.match(value) is not None
        return False

    @classmethod
    def validate_identifier(cls, identifier: Any) -> Any:
        """
        Validate a line item identifier.

        Args:
            identifier: Identifier to validate

        Returns:
            The identifier unchanged

        Raises:
            InvalidArgumentError: If identifier is empty
        """
        if cls.is_empty(identifier):
            logger.warning(f"Rejected line item identifier: {identifier!r}")
            raise InvalidArgumentError("identifier")
        return identifier

    @classmethod
    def validate_name(cls, name: Any) -> Any:
        """
        Validate a line item name.

        Raises:
            InvalidArgumentError: If name is empty
        """
        if cls.is_empty(name):
            logger.warning(f"Rejected line item name: {name!r}")
            raise InvalidArgumentError("name")
        return name

    @classmethod
    def validate_amount(cls, amount: Any, field: str) -> float:
        """
        Validate a numeric amount and coerce it to float.

        Args:
            amount: Value, price, discount or tax rate to validate
            field: Field name reported in the error

        Returns:
            Amount as float

        Raises:
            InvalidArgumentError: If amount is not numeric or not finite
        """
        if not cls.is_numeric(amount):
            logger.warning(f"Rejected line item {field}: {amount!r}")
            raise InvalidArgumentError(field)
        return cls._to_finite_float(amount, field)

    @classmethod
    def validate_quantity(cls, qty: Any) -> float:
        """
        Validate a quantity and coerce it to float.

        Raises:
            InvalidArgumentError: If quantity is empty (zero included), not
                numeric or not finite
        """
        if cls.is_empty(qty) or not cls.is_numeric(qty):
            logger.warning(f"Rejected line item quantity: {qty!r}")
            raise InvalidArgumentError("quantity")
        return cls._to_finite_float(qty, "quantity")

    @staticmethod
    def _to_finite_float(value: Any, field: str) -> float:
        # NaN, infinities and ints beyond float range cannot be priced or encoded
        try:
            result = float(value)
        except OverflowError:
            result = math.inf
        if not math.isfinite(result):
            logger.warning(f"Rejected line item {field}: {value!r}")
            raise InvalidArgumentError(field)
        return result
