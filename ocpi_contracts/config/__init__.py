"""Configuration module for ocpi-contracts.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from ocpi_contracts.config import get_settings

    settings = get_settings()

    # Access logging settings
    level = settings.logging.log_level

    # Access validation settings
    log_violations = settings.validation.log_violations
"""

from ocpi_contracts.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]
