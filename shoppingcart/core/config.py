"""
Core configuration module using Pydantic Settings.

This module defines the package settings loaded from environment variables.
Number-formatting defaults used by the line item display methods and the
logging setup are read from here.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    Variables use the ``CART_`` prefix (e.g. ``CART_FORMAT_DECIMALS``) and may
    also be provided through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Number Formatting
    # -------------------------------------------------------------------------
    format_decimals: int = Field(default=2, ge=0, le=20)
    format_decimal_point: str = Field(default=".")
    format_thousand_separator: str = Field(default=",")

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/shoppingcart.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)


# Singleton instance of settings
settings = Settings()
