"""Core Curator utilities.

This module exports core utilities for use throughout the application.
"""

from curator.core.config import Settings, get_settings
from curator.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from curator.core.pagination import Pagination, get_pagination

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "Pagination",
    "get_pagination",
]
