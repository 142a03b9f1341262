"""
errserial core

Value model and the circular-reference-safe traversal engine.
"""

from errserial.core.constants import (
    CIRCULAR_SENTINEL,
    NON_ERROR_NAME,
    DEFAULT_ERROR_NAME,
)
from errserial.core.fields import (
    FieldMap,
    ReservedField,
    RESERVED_FIELDS,
)
from errserial.core.values import (
    ValueKind,
    classify,
    is_error_like,
)
from errserial.core.traversal import destroy_circular

__all__ = [
    "CIRCULAR_SENTINEL",
    "NON_ERROR_NAME",
    "DEFAULT_ERROR_NAME",
    "FieldMap",
    "ReservedField",
    "RESERVED_FIELDS",
    "ValueKind",
    "classify",
    "is_error_like",
    "destroy_circular",
]
