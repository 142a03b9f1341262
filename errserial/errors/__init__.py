"""
errors/ - Error types

Library errors and the exception types produced by deserialization.
"""

from .taxonomy import (
    ErrorCode,
    ErrserialError,
    DepthLimitError,
    SchemaError,
    ConfigError,
)

from .restored import (
    ErrorLike,
    RestoredError,
    NonError,
    prepare_message,
)

__all__ = [
    # Taxonomy
    "ErrorCode",
    "ErrserialError",
    "DepthLimitError",
    "SchemaError",
    "ConfigError",
    # Restored errors
    "ErrorLike",
    "RestoredError",
    "NonError",
    "prepare_message",
]
