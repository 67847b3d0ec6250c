"""Core Canary utilities.

This module exports core utilities for use throughout the library.
"""

from canary.core.config import Settings, get_settings
from canary.core.exceptions import CanaryError, InvalidConfigurationError
from canary.core.logging import (
    LoggingContext,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "CanaryError",
    "InvalidConfigurationError",
    "configure_logging",
    "get_logger",
    "LoggingContext",
]
