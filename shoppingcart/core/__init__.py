"""Core package: settings and logging setup."""

from shoppingcart.core.config import Settings, settings
from shoppingcart.core.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_logger",
    "settings",
    "setup_logging",
]
