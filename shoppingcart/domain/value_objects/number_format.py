"""Number format value object."""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import TYPE_CHECKING

from shoppingcart.domain.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from shoppingcart.core.config import Settings


DEFAULT_DECIMALS = 2
DEFAULT_DECIMAL_POINT = "."
DEFAULT_THOUSAND_SEPARATOR = ","


@dataclass(frozen=True)
class NumberFormat:
    """
    Number format value object.

    Immutable set of options used to render monetary amounts: number of
    decimals, decimal point and thousands separator.
    """

    decimals: int = DEFAULT_DECIMALS
    decimal_point: str = DEFAULT_DECIMAL_POINT
    thousand_separator: str = DEFAULT_THOUSAND_SEPARATOR

    def __post_init__(self) -> None:
        """Validate decimals."""
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise InvalidArgumentError("decimals", "Decimals must be an integer.")
        if self.decimals < 0:
            raise InvalidArgumentError("decimals", "Decimals cannot be negative.")

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "NumberFormat":
        """
        Create NumberFormat from configured defaults.

        Args:
            settings: Settings to read from, defaults to the package singleton

        Returns:
            NumberFormat built from the ``format_*`` settings
        """
        if settings is None:
            from shoppingcart.core.config import settings as default_settings

            settings = default_settings

        return cls(
            decimals=settings.format_decimals,
            decimal_point=settings.format_decimal_point,
            thousand_separator=settings.format_thousand_separator,
        )

    def resolve(
        self,
        decimals: int | None = None,
        decimal_point: str | None = None,
        thousand_separator: str | None = None,
    ) -> "NumberFormat":
        """
        Override the options that were explicitly given.

        ``None`` keeps the value of this instance.
        """
        overrides = {
            name: value
            for name, value in (
                ("decimals", decimals),
                ("decimal_point", decimal_point),
                ("thousand_separator", thousand_separator),
            )
            if value is not None
        }
        return replace(self, **overrides) if overrides else self

    def format(self, value: int | float | Decimal) -> str:
        """
        Format a number.

        Rounds half away from zero to ``decimals`` places and groups the
        integer part by thousands.

        Args:
            value: Number to format

        Returns:
            Formatted string, e.g. ``"1,234.50"``

        Raises:
            InvalidArgumentError: If value is not a finite number
        """
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
            with localcontext() as ctx:
                ctx.prec = max(28, amount.adjusted() + self.decimals + 2)
                rounded = amount.quantize(
                    Decimal(1).scaleb(-self.decimals), rounding=ROUND_HALF_UP
                )
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidArgumentError("value", f"Cannot format value: {value!r}")

        if not rounded.is_finite():
            raise InvalidArgumentError("value", f"Cannot format value: {value!r}")

        # -0.00 renders as 0.00
        sign = "-" if rounded < 0 else ""
        integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")

        grouped = f"{int(integer_part):,}".replace(",", self.thousand_separator)
        if self.decimals > 0:
            return f"{sign}{grouped}{self.decimal_point}{fraction_part}"
        return f"{sign}{grouped}"


def format_number(
    value: int | float | Decimal,
    decimals: int | None = None,
    decimal_point: str | None = None,
    thousand_separator: str | None = None,
    number_format: NumberFormat | None = None,
) -> str:
    """
    Format a number for display.

    Explicit arguments win over the injected ``number_format``; without one,
    the configured ``format_*`` settings apply.

    Args:
        value: Number to format
        decimals: Number of decimals
        decimal_point: Decimal point character
        thousand_separator: Thousands separator
        number_format: Injected defaults

    Returns:
        Formatted number
    """
    base = number_format if number_format is not None else NumberFormat.from_settings()
    return base.resolve(decimals, decimal_point, thousand_separator).format(value)
