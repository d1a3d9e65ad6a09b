"""Row identifier domain service."""

import hashlib
import math
from decimal import Decimal
from typing import Any


class RowIdService:
    """
    Domain service computing line item row identifiers.

    A row identifier is the MD5 hex digest of the defining fields of a line
    item concatenated in order. Fields are cast to text the same way the
    storefront platform does, so identifiers stay compatible with rows
    already stored by existing carts (``1 . "Some discount item" . 10.0``
    hashes ``"1Some discount item10"``).
    """

    # Significant digits used when casting floats to text
    FLOAT_PRECISION = 14

    @classmethod
    def generate(cls, *fields: Any) -> str:
        """
        Generate a row identifier from the given fields.

        Args:
            fields: Defining fields, order matters

        Returns:
            Lowercase hex digest, 32 characters
        """
        payload = "".join(cls.stringify(field) for field in fields)
        return hashlib.md5(payload.encode("utf-8")).hexdigest()

    @classmethod
    def stringify(cls, value: Any) -> str:
        """
        Cast a scalar to text for hashing.

        - ``None`` and ``False`` become ``""``, ``True`` becomes ``"1"``
        - Integral floats drop the fractional part (``10.0`` -> ``"10"``)
        - Other floats keep 14 significant digits (``0.1 + 0.2`` -> ``"0.3"``)
        """
        if value is None or value is False:
            return ""
        if value is True:
            return "1"
        if isinstance(value, Decimal):
            value = float(value)
        if isinstance(value, float):
            return cls._stringify_float(value)
        return str(value)

    @classmethod
    def _stringify_float(cls, value: float) -> str:
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"

        text = format(value, f".{cls.FLOAT_PRECISION}G")
        if "E" not in text:
            return text

        mantissa, exponent = text.split("E")
        if "." not in mantissa:
            mantissa += ".0"
        exponent_value = int(exponent)
        return f"{mantissa}E{'+' if exponent_value >= 0 else '-'}{abs(exponent_value)}"
