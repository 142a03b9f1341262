"""
core/values.py - Value classification

Sorts arbitrary Python values into the kinds the traversal engine
distinguishes, and lists the entries of composite values.
"""

from __future__ import annotations
from collections import deque
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Tuple

from pydantic import BaseModel

from errserial.core.constants import ANONYMOUS_FUNCTION_NAME, LAMBDA_NAME


class ValueKind(Enum):
    """Kinds of value seen by the traversal engine."""
    PRIMITIVE = "primitive"
    CALLABLE = "callable"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OBJECT = "object"

    @property
    def is_composite(self) -> bool:
        return self in (ValueKind.MAPPING, ValueKind.SEQUENCE, ValueKind.OBJECT)


_PRIMITIVE_TYPES = (str, bytes, bytearray, bool, int, float, complex, Decimal, Enum)
_SEQUENCE_TYPES = (list, tuple, set, frozenset, deque)

# OSError diagnostics live in C-level attributes, not the instance dict
_OS_ERROR_FIELDS = ("errno", "strerror", "filename", "filename2")


def classify(value: Any) -> ValueKind:
    """Classify a value for traversal."""
    if value is None or isinstance(value, _PRIMITIVE_TYPES):
        return ValueKind.PRIMITIVE
    if isinstance(value, BaseException):
        return ValueKind.OBJECT
    if callable(value):
        return ValueKind.CALLABLE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, _SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    if isinstance(value, BaseModel) or hasattr(value, "__dict__"):
        return ValueKind.OBJECT
    # datetime, uuid and other slot-only values are copied as they are
    return ValueKind.PRIMITIVE


def is_error_like(value: Any) -> bool:
    """True for values that are already errors and need no rebuilding."""
    return isinstance(value, BaseException)


def function_display_name(func: Any) -> str:
    name = getattr(func, "__name__", None)
    if not isinstance(name, str) or not name or name == LAMBDA_NAME:
        return ANONYMOUS_FUNCTION_NAME
    return name


def iter_entries(value: Any, kind: ValueKind) -> Iterable[Tuple[Any, Any]]:
    """
    Visible (key, value) pairs of a composite, in order.

    Objects expose their public instance attributes; names starting with an
    underscore are treated as hidden. OSError also exposes its errno,
    strerror and filenames when set.
    """
    if kind is ValueKind.MAPPING:
        return value.items()
    if kind is ValueKind.SEQUENCE:
        return enumerate(value)

    if getattr(type(value), "__errserial_fields__", False):
        return value.fields().items()
    if isinstance(value, BaseModel):
        declared = type(value).model_fields
        return [
            (key, item) for key, item in value
            if key in value.model_fields_set or key not in declared
        ]
    entries = [
        (key, item) for key, item in vars(value).items()
        if not key.startswith("_")
    ]
    if isinstance(value, OSError):
        own = {key for key, _ in entries}
        entries.extend(
            (key, getattr(value, key)) for key in _OS_ERROR_FIELDS
            if key not in own and getattr(value, key) is not None
        )
    return entries
