"""
errors/restored.py - Errors rebuilt from plain data

RestoredError is the target deserialize_error writes onto. Its fields carry
a visibility flag: name, message and stack are hidden by default, everything
else is visible. NonError wraps values that were never errors.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, Protocol, runtime_checkable
import json
import traceback

from errserial.core.constants import DEFAULT_ERROR_NAME, NON_ERROR_NAME
from errserial.core.fields import FieldMap, RESERVED_VISIBILITY


@runtime_checkable
class ErrorLike(Protocol):
    """Capability set expected of an error representation."""

    name: str
    message: str
    stack: str


class RestoredError(Exception):
    """
    Exception rebuilt from plain error data.

    Fields are reachable as attributes, by item access, and (visible ones
    only) through fields(). Item access also reaches fields whose names
    collide with Exception attributes such as ``args``.
    """

    # Marks the class for value traversal: entries come from fields()
    __errserial_fields__ = True

    default_name = DEFAULT_ERROR_NAME

    def __init__(self, message: str = ""):
        super().__init__(message)
        self._fields = FieldMap()
        self._fields.define("name", self.default_name, visible=False)
        self._fields.define("message", message, visible=False)

    def define(self, key: str, value: Any, visible: bool = True) -> None:
        """Write a field with an explicit visibility."""
        self._fields.define(key, value, visible=visible)

    def fields(self) -> Dict[str, Any]:
        """Visible fields, in insertion order."""
        return dict(self._fields)

    def is_visible(self, key: str) -> bool:
        return self._fields.is_visible(key)

    @property
    def name(self) -> str:
        return self._fields.get("name", self.default_name)

    @name.setter
    def name(self, value: str) -> None:
        self._fields["name"] = value

    @property
    def message(self) -> str:
        return self._fields.get("message", "")

    @message.setter
    def message(self, value: str) -> None:
        self._fields["message"] = value

    @property
    def stack(self) -> str:
        if "stack" in self._fields:
            return self._fields["stack"]
        header = f"{self.name}: {self.message}" if self.message else str(self.name)
        if self.__traceback__ is None:
            return header
        frames = "".join(traceback.format_tb(self.__traceback__))
        return f"{header}\n{frames}"

    @stack.setter
    def stack(self, value: str) -> None:
        if "stack" in self._fields:
            self._fields["stack"] = value
        else:
            self._fields.define("stack", value, visible=False)

    def __getattr__(self, key: str) -> Any:
        # Only reached when normal attribute lookup fails
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._fields[key]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no field {key!r}"
            ) from None

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith("_") or hasattr(type(self), key):
            super().__setattr__(key, value)
        elif key in self._fields:
            self._fields[key] = value
        else:
            self._fields.define(key, value, visible=RESERVED_VISIBILITY.get(key, True))

    def __delattr__(self, key: str) -> None:
        if key in self._fields:
            del self._fields[key]
        else:
            super().__delattr__(key)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __contains__(self, key: str) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __str__(self) -> str:
        return str(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, message={self.message!r})"


class NonError(RestoredError):
    """Synthetic error carrying a value that was not an error."""

    default_name = NON_ERROR_NAME

    def __init__(self, value: Any):
        super().__init__(prepare_message(value))
        self._value = value

    @property
    def value(self) -> Any:
        """The wrapped value."""
        return self._value


def prepare_message(value: Any) -> str:
    """Compact JSON text of a value, or str() when it cannot be rendered."""
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError):
        return str(value)
