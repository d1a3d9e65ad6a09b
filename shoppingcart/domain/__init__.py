"""Domain layer package.

The domain layer contains the line item value objects, the services they
share for hashing and validation, and the domain exceptions.
"""

__all__ = []
