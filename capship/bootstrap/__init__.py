"""
bootstrap/ - Configuration and logging setup
"""

from .config import (
    ValidationConfig,
    CatalogConfig,
    LoggingConfig,
    CapshipConfig,
    load_config,
    get_config,
    reset_config,
)
from .logging_setup import JSONFormatter, setup_logging

__all__ = [
    # Config
    "ValidationConfig",
    "CatalogConfig",
    "LoggingConfig",
    "CapshipConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
]
