"""Discountable capability port interface."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Discountable(Protocol):
    """Capability of an object a discount item can be created from."""

    def get_discountable_identifier(self, options: dict[str, Any] | None = None) -> int | str:
        """
        Get the identifier of the discountable object.

        Args:
            options: Options the discount item is created with

        Returns:
            Identifier of the discount
        """
        ...

    def get_discountable_description(self, options: dict[str, Any] | None = None) -> str:
        """
        Get the description or title of the discountable object.

        Args:
            options: Options the discount item is created with

        Returns:
            Discount name
        """
        ...

    def get_discountable_value(self, options: dict[str, Any] | None = None) -> float:
        """
        Get the value of the discountable object.

        Args:
            options: Options the discount item is created with

        Returns:
            Flat discount value
        """
        ...
