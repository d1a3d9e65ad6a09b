"""Line item domain exceptions."""

from typing import Any

from shoppingcart.domain.exceptions.base import DomainException


class LineItemDomainException(DomainException):
    """Base exception for line item domain errors."""


class InvalidArgumentError(LineItemDomainException, ValueError):
    """Raised when a line item field is missing, empty or not numeric."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(
            message=message or f"Please supply a valid {field}.",
            code="INVALID_ARGUMENT"
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        return payload


class AssociatedModelError(LineItemDomainException):
    """Raised when an associated model cannot be resolved."""

    def __init__(self, model_type: str, reason: str):
        super().__init__(
            message=f"Cannot resolve associated model {model_type}: {reason}",
            code="ASSOCIATED_MODEL_ERROR"
        )
