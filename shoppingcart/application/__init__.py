"""Application layer package."""

__all__ = []
