"""Expansion of lazily carried arrays and objects.

One-sided leaves hold their raw array/object in a ``LazyValue`` so that a
large removed or added subtree is not walked until a consumer asks for it.
Expansion is pure: the same ``LazyValue`` always expands to an equal
``ComparedValue``.

Object members are emitted in sorted key order, matching the order the
differ uses for aligned objects.
"""

from __future__ import annotations

from typing import Any

from json_struct_diff.tree.nodes import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    LazyValue,
    Side,
)
from json_struct_diff.tree.values import JsonKind, TaggedValue, classify

__all__ = ["expand_fully", "expand_lazy_value", "leaf_value"]


def leaf_value(tagged: TaggedValue) -> ComparedValue | LazyValue:
    """Wrap a tagged value for use in a one-sided leaf.

    Scalars become ``ComparedValue``; arrays and objects stay lazy.
    """
    if tagged.is_scalar:
        return ComparedValue(tagged.kind, tagged.value)
    return LazyValue(tagged)


def _members(raw: TaggedValue) -> list[tuple[str | None, Any]]:
    if raw.kind == JsonKind.ARRAY:
        return [(None, item) for item in raw.value]
    return sorted(raw.value.items(), key=lambda pair: pair[0])


def expand_lazy_value(lazy: LazyValue, side: Side = Side.BOTH) -> ComparedValue:
    """Expand one level of a lazy array/object.

    Args:
        lazy: The value to expand.
        side: Side assigned to every new child.  ``Side.BOTH`` mirrors a
              value present unchanged on both sides.

    Returns:
        A ``ComparedValue`` whose complex members are themselves lazy.
    """
    children = tuple(
        ComparedNode(side=side, value=leaf_value(classify(item)), key=key)
        for key, item in _members(lazy.raw)
    )
    is_same = side == Side.BOTH or not children
    return ComparedValue(lazy.kind, ComparedValues(is_same=is_same, children=children))


def expand_fully(tagged: TaggedValue, side: Side = Side.BOTH) -> ComparedValue:
    """Recursively expand a tagged value with every node on ``side``.

    Used when ``DiffConfig.expand_leaves`` asks for eager leaves.
    """
    if tagged.is_scalar:
        return ComparedValue(tagged.kind, tagged.value)

    children = tuple(
        ComparedNode(side=side, value=expand_fully(classify(item), side), key=key)
        for key, item in _members(tagged)
    )
    is_same = side == Side.BOTH or not children
    return ComparedValue(tagged.kind, ComparedValues(is_same=is_same, children=children))
