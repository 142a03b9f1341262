"""
core/traversal.py - Circular-reference-safe deep copy

Walks an object graph depth-first and builds a decoupled copy made of
dicts, lists and FieldMaps. A value that is one of its own ancestors on the
current path becomes CIRCULAR_SENTINEL; a value merely shared between
sibling branches is copied once per branch. Callables are dropped.

The walk keeps an explicit frame stack rather than recursing, so graph
depth is bounded by memory, not by the interpreter recursion limit.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Set, Tuple, TYPE_CHECKING
import logging
import traceback

from errserial.core.constants import CIRCULAR_SENTINEL
from errserial.core.fields import FieldMap, RESERVED_FIELDS
from errserial.core.values import ValueKind, classify, iter_entries
from errserial.errors.taxonomy import DepthLimitError

if TYPE_CHECKING:
    from errserial.bootstrap.config import TraversalConfig

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One composite being copied."""

    source: Any
    kind: ValueKind
    target: Any
    entries: Iterator[Tuple[Any, Any]]


def destroy_circular(
    source: Any,
    *,
    force_visible: bool = False,
    target: Any = None,
    config: Optional["TraversalConfig"] = None,
) -> Any:
    """
    Copy a composite value, breaking cycles along the current path.

    Args:
        source: Mapping, sequence or object to copy. Never mutated.
        force_visible: Write the reserved fields (name, message, stack,
            code) as visible fields instead of with their default visibility.
        target: Node to write the root's fields onto. A new dict, list or
            FieldMap is created when omitted.
        config: Traversal settings; the loaded configuration when omitted.

    Returns:
        The populated target.

    Raises:
        DepthLimitError: If config.max_depth is set and exceeded.
    """
    if config is None:
        from errserial.bootstrap.config import get_config
        config = get_config().traversal
    max_depth = config.max_depth

    kind = classify(source)
    if not kind.is_composite:
        raise TypeError(f"destroy_circular expects a composite value, got {type(source).__name__}")

    root = target if target is not None else _new_node(kind, force_visible)
    stack: List[_Frame] = [
        _Frame(source, kind, root, iter(iter_entries(source, kind)))
    ]
    # Identities of the sources on the stack, i.e. the current path.
    # Each source is held by its frame, so its id stays unique while pushed.
    on_path: Set[int] = {id(source)}

    while stack:
        frame = stack[-1]

        for key, value in frame.entries:
            value_kind = classify(value)

            if value_kind is ValueKind.CALLABLE:
                continue

            if not value_kind.is_composite:
                _write(frame.target, key, value)
                continue

            if id(value) in on_path:
                logger.debug(f"Circular reference at key {key!r} replaced")
                _write(frame.target, key, CIRCULAR_SENTINEL)
                continue

            depth = len(stack)
            if max_depth and depth > max_depth:
                logger.warning(f"Traversal aborted at depth {depth} (max_depth={max_depth})")
                raise DepthLimitError(depth, max_depth)

            child = _new_node(value_kind, force_visible)
            _write(frame.target, key, child)
            stack.append(_Frame(
                source=value,
                kind=value_kind,
                target=child,
                entries=iter(iter_entries(value, value_kind)),
            ))
            on_path.add(id(value))
            break
        else:
            _copy_reserved(frame.source, frame.kind, frame.target, force_visible)
            stack.pop()
            on_path.discard(id(frame.source))

    return root


def _new_node(kind: ValueKind, force_visible: bool) -> Any:
    if kind is ValueKind.SEQUENCE:
        return []
    return {} if force_visible else FieldMap()


def _write(target: Any, key: Any, value: Any) -> None:
    if isinstance(target, list):
        # Slots skipped for dropped callables read back as None
        if key >= len(target):
            target.extend([None] * (key - len(target) + 1))
        target[key] = value
    elif hasattr(target, "define"):
        target.define(key, value, visible=True)
    else:
        target[key] = value


def _copy_reserved(source: Any, kind: ValueKind, target: Any, force_visible: bool) -> None:
    """Write string-valued reserved fields, enumerated or not."""
    if kind is ValueKind.SEQUENCE:
        return

    for reserved in RESERVED_FIELDS:
        value = read_reserved(source, kind, reserved.name)
        if not isinstance(value, str):
            continue

        visible = force_visible or reserved.visible
        if hasattr(target, "define"):
            target.define(reserved.name, value, visible=visible)
        else:
            target[reserved.name] = value


def read_reserved(source: Any, kind: ValueKind, field_name: str) -> Any:
    """
    Current value of a reserved field on a mapping or object.

    Exceptions report their class name, str() and formatted traceback as
    name, message and stack unless they define the field themselves.
    Attributes that built-in exception types carry under these names
    (AttributeError.name, ImportError.name) are not error fields.
    """
    if kind is ValueKind.MAPPING:
        return source.get(field_name)

    if not isinstance(source, BaseException):
        return getattr(source, field_name, None)

    if _defines_field(source, field_name):
        return getattr(source, field_name, None)

    if field_name == "name":
        return type(source).__name__
    if field_name == "message":
        return str(source)
    if field_name == "stack":
        return "".join(
            traceback.format_exception(type(source), source, source.__traceback__)
        )
    return None


def _defines_field(error: BaseException, field_name: str) -> bool:
    """True if the field is an instance attribute or declared by a non-builtin class."""
    if field_name in vars(error):
        return True
    if getattr(type(error), "__errserial_fields__", False) and field_name in error:
        return True
    return any(
        field_name in vars(cls)
        for cls in type(error).__mro__
        if cls.__module__ != "builtins"
    )
