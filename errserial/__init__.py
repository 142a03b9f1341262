"""
errserial - Error serialization for plain-data boundaries

Converts exceptions into JSON-compatible data and back, preserving custom
fields and breaking circular references.
"""

from errserial.serializer import serialize_error, serialize_error_object
from errserial.deserializer import deserialize_error
from errserial.schema import ErrorObject
from errserial.errors import (
    ErrorLike,
    RestoredError,
    NonError,
    ErrserialError,
    DepthLimitError,
    SchemaError,
    ConfigError,
)
from errserial.core import CIRCULAR_SENTINEL, NON_ERROR_NAME

__version__ = "1.0.0"

__all__ = [
    "serialize_error",
    "serialize_error_object",
    "deserialize_error",
    "ErrorObject",
    "ErrorLike",
    "RestoredError",
    "NonError",
    "ErrserialError",
    "DepthLimitError",
    "SchemaError",
    "ConfigError",
    "CIRCULAR_SENTINEL",
    "NON_ERROR_NAME",
]
