"""Tests for the compared result-tree types.

Covers Side values, ComparedNode.with_key, kind / is_lazy properties,
ComparedValue.children, expanded() on lazy and non-lazy nodes, and
immutability.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_struct_diff.tree.nodes import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    LazyValue,
    Side,
)
from json_struct_diff.tree.values import JsonKind, classify


class TestSide:
    def test_members(self) -> None:
        assert Side.BOTH == "both"
        assert Side.LEFT == "left"
        assert Side.RIGHT == "right"

    def test_is_str_subclass(self) -> None:
        assert isinstance(Side.BOTH, str)


class TestComparedNode:
    def test_key_defaults_to_none(self) -> None:
        node = ComparedNode(Side.BOTH, ComparedValue(JsonKind.NUMBER, 1.0))
        assert node.key is None

    def test_with_key_returns_new_node(self) -> None:
        node = ComparedNode(Side.LEFT, ComparedValue(JsonKind.STRING, "x"))
        keyed = node.with_key("name")
        assert keyed.key == "name"
        assert keyed.side == Side.LEFT
        assert keyed.value == node.value
        assert node.key is None

    def test_kind_of_lazy_node(self) -> None:
        node = ComparedNode(Side.RIGHT, LazyValue(classify([1])))
        assert node.kind == JsonKind.ARRAY
        assert node.is_lazy

    def test_kind_of_compared_node(self) -> None:
        node = ComparedNode(Side.BOTH, ComparedValue(JsonKind.NULL, None))
        assert node.kind == JsonKind.NULL
        assert not node.is_lazy

    def test_frozen(self) -> None:
        node = ComparedNode(Side.BOTH, ComparedValue(JsonKind.NULL, None))
        with pytest.raises(FrozenInstanceError):
            node.side = Side.LEFT  # type: ignore[misc]


class TestComparedValue:
    def test_scalar_has_no_children(self) -> None:
        assert ComparedValue(JsonKind.NUMBER, 1.0).children == ()

    def test_container_exposes_children(self) -> None:
        child = ComparedNode(Side.BOTH, ComparedValue(JsonKind.NUMBER, 1.0))
        value = ComparedValue(JsonKind.ARRAY, ComparedValues(True, (child,)))
        assert value.children == (child,)


class TestExpanded:
    def test_non_lazy_returns_value_unchanged(self) -> None:
        value = ComparedValue(JsonKind.STRING, "a")
        assert ComparedNode(Side.BOTH, value).expanded() is value

    def test_lazy_expands_with_node_side(self) -> None:
        node = ComparedNode(Side.LEFT, LazyValue(classify([1, 2])))
        expanded = node.expanded()
        assert expanded.kind == JsonKind.ARRAY
        assert [c.side for c in expanded.children] == [Side.LEFT, Side.LEFT]
        assert expanded.value.is_same is False

    def test_expansion_is_idempotent(self) -> None:
        node = ComparedNode(Side.RIGHT, LazyValue(classify({"b": [1], "a": 2})))
        assert node.expanded() == node.expanded()
