"""
errserial/deserializer.py - Plain data back to errors

deserialize_error rebuilds an exception from plain data. Existing
exceptions pass through untouched, mappings and objects are copied onto a
fresh RestoredError, and everything else is wrapped in a NonError.
"""

from __future__ import annotations
from typing import Any, Optional, TYPE_CHECKING
import logging

from errserial.core.traversal import destroy_circular
from errserial.core.values import ValueKind, classify, is_error_like
from errserial.errors.restored import NonError, RestoredError

if TYPE_CHECKING:
    from errserial.bootstrap.config import TraversalConfig

logger = logging.getLogger(__name__)


def deserialize_error(value: Any, config: Optional["TraversalConfig"] = None) -> BaseException:
    """
    Deserialize plain data into an exception.

    name, message and stack become hidden fields of the result; code and
    every other copied field stay visible.

    Args:
        value: Serialized error data, an ErrorObject, an exception, or any
            other value.
        config: Traversal settings; the loaded configuration when omitted.

    Returns:
        The value itself if it already is an exception, otherwise a
        RestoredError (or NonError for non-mapping input).
    """
    if is_error_like(value):
        return value

    kind = classify(value)
    if kind in (ValueKind.MAPPING, ValueKind.OBJECT):
        error = RestoredError()
        destroy_circular(value, force_visible=False, target=error, config=config)
        return error

    logger.debug(f"Wrapping non-error {type(value).__name__} value in NonError")
    return NonError(value)
