"""
errserial/serializer.py - Errors to plain data

serialize_error turns an error (or any value) into JSON-compatible data.
Reserved fields are always written as visible keys so generic JSON
consumers see name, message and stack.
"""

from __future__ import annotations
from typing import Any, Optional, TYPE_CHECKING

from errserial.core.constants import FUNCTION_PLACEHOLDER
from errserial.core.traversal import destroy_circular
from errserial.core.values import ValueKind, classify, function_display_name
from errserial.schema import ErrorObject, validate_error_object

if TYPE_CHECKING:
    from errserial.bootstrap.config import TraversalConfig


def serialize_error(value: Any, config: Optional["TraversalConfig"] = None) -> Any:
    """
    Serialize an error into plain data.

    Composite values are deep-copied with cycles to an ancestor replaced by
    "[Circular]" and callables dropped. A callable passed directly becomes
    "[Function: <name>]". Anything else is returned unchanged.

    Example:
        >>> serialize_error(ValueError("boom"))["message"]
        'boom'
    """
    kind = classify(value)

    if kind.is_composite:
        return destroy_circular(value, force_visible=True, config=config)

    if kind is ValueKind.CALLABLE:
        return FUNCTION_PLACEHOLDER.format(name=function_display_name(value))

    return value


def serialize_error_object(value: Any, config: Optional["TraversalConfig"] = None) -> ErrorObject:
    """Serialize and validate the result as an ErrorObject."""
    return validate_error_object(serialize_error(value, config=config))
