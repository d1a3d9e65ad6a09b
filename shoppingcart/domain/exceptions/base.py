"""Base domain exception classes."""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all line item domain errors.

    Carries a machine-readable ``code`` next to the human message so the
    cart embedding the line items can map errors to its own responses.
    """

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error payload: ``{"code", "message"}``."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"
