"""
bootstrap/ - Configuration and logging setup
"""

from .config import (
    TraversalConfig,
    LoggingConfig,
    ErrserialConfig,
    load_config,
    get_config,
    set_config,
)
from .log import setup_logging, JSONFormatter

__all__ = [
    "TraversalConfig",
    "LoggingConfig",
    "ErrserialConfig",
    "load_config",
    "get_config",
    "set_config",
    "setup_logging",
    "JSONFormatter",
]
