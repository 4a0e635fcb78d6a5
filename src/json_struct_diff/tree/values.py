"""JsonKind StrEnum, TaggedValue dataclass and the classify() dispatcher.

``classify`` is the single boundary where dynamically-typed decoded JSON
becomes a tagged value.  Every downstream function matches on
``TaggedValue.kind`` instead of re-inspecting Python types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any

__all__ = [
    "SCALAR_KINDS",
    "JsonKind",
    "TaggedValue",
    "classify",
    "freeze",
    "nesting_depth",
]


class JsonKind(StrEnum):
    """The six JSON value kinds.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : always carried as ``float``
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


SCALAR_KINDS = frozenset(
    {JsonKind.NULL, JsonKind.BOOLEAN, JsonKind.NUMBER, JsonKind.STRING}
)


@dataclass(frozen=True, slots=True)
class TaggedValue:
    """A decoded JSON value paired with its kind.

    Attributes:
        kind:  Which of the six JSON kinds this value is.
        value: ``None``, ``bool``, ``float`` or ``str`` for scalars; the raw
               sequence for arrays; the raw mapping for objects.
    """

    kind: JsonKind
    value: Any

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS


def classify(value: Any) -> TaggedValue:
    """Tag a decoded JSON value with its kind.

    Args:
        value: Output of a conforming JSON decoder (or an equivalent Python
               value built from None, bool, int, float, str, list, tuple and
               str-keyed mapping).

    Returns:
        A ``TaggedValue``.  Integers are widened to ``float``.

    Raises:
        TypeError: If value is not JSON-shaped.  A conforming decoder never
            produces such a value, so this signals a caller bug.
    """
    if value is None:
        return TaggedValue(JsonKind.NULL, None)

    # bool subclasses int; it must be tested before the numeric branch
    if isinstance(value, bool):
        return TaggedValue(JsonKind.BOOLEAN, value)

    if isinstance(value, (int, float)):
        return TaggedValue(JsonKind.NUMBER, float(value))

    if isinstance(value, str):
        return TaggedValue(JsonKind.STRING, value)

    if isinstance(value, (list, tuple)):
        return TaggedValue(JsonKind.ARRAY, value)

    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"Unsupported JSON object key type: {type(key)!r}")
        return TaggedValue(JsonKind.OBJECT, value)

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def nesting_depth(value: Any) -> int:
    """Return how many arrays/objects deep ``value`` nests.

    Scalars are depth 0 and ``[]`` is depth 1.  Walks with an explicit stack,
    so arbitrarily deep input cannot exhaust the interpreter stack.
    """
    deepest = 0
    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Mapping):
            members = current.values()
        elif isinstance(current, (list, tuple)):
            members = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((member, depth + 1) for member in members)
    return deepest


def freeze(value: Any) -> Any:
    """Return a read-only copy of a decoded JSON value.

    Arrays become tuples and objects become ``MappingProxyType`` views over
    private dicts.  Scalars are returned as is.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(member) for key, member in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(member) for member in value)
    return value
