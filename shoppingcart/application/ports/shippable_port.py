"""Shippable capability port interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shippable(Protocol):
    """Capability of an object a shipping item can be created from."""

    def get_shippable_identifier(self) -> int | str:
        """Get the identifier of the shipping method."""
        ...

    def get_shippable_description(self) -> str:
        """Get the description or title of the shipping method."""
        ...

    def get_shippable_price(self) -> float:
        """Get the price without tax of the shipping method."""
        ...
