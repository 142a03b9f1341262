"""
errors/taxonomy.py - Library error classification

Errors raised by errserial itself. Normal serialization never raises; these
cover the depth guard, schema validation and configuration loading.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(Enum):
    """Specific error codes."""

    # Traversal (1xxx)
    TRAVERSAL_DEPTH = 1001

    # Schema (2xxx)
    SCHEMA_INVALID = 2001

    # Configuration (3xxx)
    CONFIG_INVALID = 3001


class ErrserialError(Exception):
    """Base exception for errserial."""

    default_code: ErrorCode = ErrorCode.SCHEMA_INVALID

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self._error_code = code or self.default_code
        # String form so it survives serialize_error as the reserved `code` field
        self.code = self._error_code.name
        self.details = details or {}

    @property
    def error_code(self) -> ErrorCode:
        return self._error_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "number": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class DepthLimitError(ErrserialError):
    """Raised when a graph is nested deeper than the configured max_depth."""

    default_code = ErrorCode.TRAVERSAL_DEPTH

    def __init__(self, depth: int, max_depth: int):
        super().__init__(
            f"Graph depth {depth} exceeds max_depth={max_depth}",
            details={"depth": depth, "max_depth": max_depth},
        )
        self.depth = depth
        self.max_depth = max_depth


class SchemaError(ErrserialError):
    """Raised when serialized data does not match the ErrorObject shape."""

    default_code = ErrorCode.SCHEMA_INVALID


class ConfigError(ErrserialError):
    """Raised for invalid configuration values."""

    default_code = ErrorCode.CONFIG_INVALID
