"""
Utils package for netsplit.

This module provides logging, configuration and the exception
hierarchy shared by the graph passes.
"""

from .exceptions import (
    NetsplitError,
    UnknownBlobError,
    SplitNameCollisionError,
    InvalidGraphError,
)

from .config import (
    NetsplitConfig,
    RewriteConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, NetsplitLogger

__all__ = [
    # Exceptions
    "NetsplitError",
    "UnknownBlobError",
    "SplitNameCollisionError",
    "InvalidGraphError",

    # Configuration
    "NetsplitConfig",
    "RewriteConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "NetsplitLogger",
]
