"""Associated model lookup port interface."""

from typing import Any, Protocol


class ModelLookupPort(Protocol):
    """Lookup resolving the external entity a line item is associated with."""

    def __call__(self, model_type: str, identifier: Any) -> Any:
        """
        Find an entity by type and identifier.

        Args:
            model_type: Type tag stored by ``associate``
            identifier: Identifier of the line item

        Returns:
            Entity if found, None otherwise
        """
        ...
