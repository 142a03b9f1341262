"""
core/fields.py - Field visibility model

A FieldMap is a dict whose hidden fields stay readable by name but are left
out of iteration, len(), equality and json.dumps(). Hidden is the Python
stand-in for a non-enumerable property.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple


@dataclass(frozen=True)
class ReservedField:
    """A diagnostic field with a fixed default visibility."""

    name: str
    visible: bool


RESERVED_FIELDS: Tuple[ReservedField, ...] = (
    ReservedField("name", visible=False),
    ReservedField("message", visible=False),
    ReservedField("stack", visible=False),
    ReservedField("code", visible=True),
)

RESERVED_VISIBILITY: Dict[str, bool] = {f.name: f.visible for f in RESERVED_FIELDS}


class FieldMap(dict):
    """
    Mapping with per-field visibility.

    Visible fields are ordinary dict items. Hidden fields live in a side
    table consulted by ``[]``, ``get`` and ``in``.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._hidden: Dict[str, Any] = {}

    def define(self, key: str, value: Any, visible: bool = True) -> None:
        """Write a field with an explicit visibility."""
        if visible:
            self._hidden.pop(key, None)
            super().__setitem__(key, value)
        else:
            super().pop(key, None)
            self._hidden[key] = value

    def is_visible(self, key: str) -> bool:
        return super().__contains__(key)

    def hidden_keys(self) -> Iterator[str]:
        return iter(self._hidden)

    def all_items(self) -> Iterator[Tuple[str, Any]]:
        """Visible items followed by hidden ones."""
        yield from self.items()
        yield from self._hidden.items()

    def __setitem__(self, key, value):
        # Plain assignment keeps an existing field's visibility
        if key in self._hidden:
            self._hidden[key] = value
        else:
            super().__setitem__(key, value)

    def __missing__(self, key):
        try:
            return self._hidden[key]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key) -> bool:
        return super().__contains__(key) or key in self._hidden

    def __delitem__(self, key):
        if key in self._hidden:
            del self._hidden[key]
        else:
            super().__delitem__(key)

    def get(self, key, default=None):
        if super().__contains__(key):
            return super().__getitem__(key)
        return self._hidden.get(key, default)

    def copy(self) -> "FieldMap":
        clone = FieldMap(self)
        clone._hidden = dict(self._hidden)
        return clone

    def __repr__(self) -> str:
        return f"FieldMap({dict.__repr__(self)}, hidden={sorted(self._hidden)})"
