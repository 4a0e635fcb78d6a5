"""Immutable result-tree types produced by the structural differ.

A comparison yields a ``ComparedValues`` aggregate whose children are
``ComparedNode`` entries.  Each node records which side(s) the value was
found on, the object key it sits under (if any), and either a fully
compared value or a ``LazyValue`` holding a raw array/object that has not
been expanded yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_struct_diff.tree.values import JsonKind, TaggedValue

__all__ = ["ComparedNode", "ComparedValue", "ComparedValues", "LazyValue", "Side"]


class Side(StrEnum):
    """Where a node was found relative to its aligned position.

    - BOTH  -> "both"  : present on both sides
    - LEFT  -> "left"  : present only in the left document
    - RIGHT -> "right" : present only in the right document
    """

    BOTH = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class ComparedValues:
    """Ordered children of a compared array, object or top-level pair.

    Attributes:
        is_same:  True iff every child is ``Side.BOTH`` and every nested
                  ``ComparedValues`` is itself same.  Computed once, bottom-up.
        children: The aligned nodes in output order.
    """

    is_same: bool
    children: tuple[ComparedNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ComparedValue:
    """A compared value of one of the six JSON kinds.

    Scalar kinds carry the literal (``None``, ``bool``, ``float``, ``str``);
    ``ARRAY`` and ``OBJECT`` carry a ``ComparedValues``.
    """

    kind: JsonKind
    value: Any

    @property
    def children(self) -> tuple[ComparedNode, ...]:
        if isinstance(self.value, ComparedValues):
            return self.value.children
        return ()


@dataclass(frozen=True, slots=True)
class LazyValue:
    """A raw array/object carried by a one-sided leaf, not yet expanded.

    See ``json_struct_diff.tree.expand`` for the expansion functions.
    """

    raw: TaggedValue

    @property
    def kind(self) -> JsonKind:
        return self.raw.kind


@dataclass(frozen=True, slots=True)
class ComparedNode:
    """One entry in a compared result tree.

    Attributes:
        side:  Which document(s) the value belongs to.
        value: The compared value, or a ``LazyValue`` for unexpanded leaves.
        key:   Object member name; ``None`` for array elements and top-level
               values.
    """

    side: Side
    value: ComparedValue | LazyValue
    key: str | None = None

    @property
    def kind(self) -> JsonKind:
        return self.value.kind

    @property
    def is_lazy(self) -> bool:
        return isinstance(self.value, LazyValue)

    def with_key(self, key: str) -> ComparedNode:
        """Return a copy of this node tagged with an object key."""
        return ComparedNode(side=self.side, value=self.value, key=key)

    def expanded(self) -> ComparedValue:
        """Return this node's value, expanding one level if it is lazy.

        Expansion uses the node's own side for the new children, so a
        left-only array expands into left-only elements.
        """
        # local import: expand depends on this module
        from json_struct_diff.tree.expand import expand_lazy_value

        if isinstance(self.value, LazyValue):
            return expand_lazy_value(self.value, side=self.side)
        return self.value
