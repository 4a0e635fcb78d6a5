"""Tests for lazy and eager expansion of arrays and objects."""

from __future__ import annotations

from json_struct_diff.tree.expand import expand_fully, expand_lazy_value, leaf_value
from json_struct_diff.tree.nodes import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    LazyValue,
    Side,
)
from json_struct_diff.tree.values import JsonKind, classify


class TestLeafValue:
    def test_scalar_becomes_compared_value(self) -> None:
        assert leaf_value(classify("a")) == ComparedValue(JsonKind.STRING, "a")

    def test_array_stays_lazy(self) -> None:
        assert leaf_value(classify([1])) == LazyValue(classify([1]))

    def test_object_stays_lazy(self) -> None:
        assert isinstance(leaf_value(classify({})), LazyValue)


class TestExpandLazyValue:
    def test_array_expands_one_level(self) -> None:
        expanded = expand_lazy_value(LazyValue(classify([1, [2]])))
        assert expanded == ComparedValue(
            JsonKind.ARRAY,
            ComparedValues(
                is_same=True,
                children=(
                    ComparedNode(Side.BOTH, ComparedValue(JsonKind.NUMBER, 1.0)),
                    ComparedNode(Side.BOTH, LazyValue(classify([2]))),
                ),
            ),
        )

    def test_object_members_sorted_by_key(self) -> None:
        expanded = expand_lazy_value(LazyValue(classify({"b": 1, "a": 2})))
        assert [c.key for c in expanded.children] == ["a", "b"]

    def test_one_sided_expansion_is_not_same(self) -> None:
        expanded = expand_lazy_value(LazyValue(classify([1])), side=Side.RIGHT)
        assert expanded.value.is_same is False
        assert expanded.children[0].side == Side.RIGHT

    def test_empty_one_sided_container_is_same(self) -> None:
        expanded = expand_lazy_value(LazyValue(classify({})), side=Side.LEFT)
        assert expanded.value == ComparedValues(is_same=True, children=())

    def test_repeated_expansion_is_equal(self) -> None:
        lazy = LazyValue(classify({"x": [1, {"y": None}]}))
        assert expand_lazy_value(lazy) == expand_lazy_value(lazy)


class TestExpandFully:
    def test_scalar(self) -> None:
        assert expand_fully(classify(True)) == ComparedValue(JsonKind.BOOLEAN, True)

    def test_nested_has_no_lazy_nodes(self) -> None:
        expanded = expand_fully(classify({"a": [1, {"b": 2}]}), Side.LEFT)

        def walk(value: ComparedValue) -> None:
            for child in value.children:
                assert not child.is_lazy
                assert child.side == Side.LEFT
                walk(child.value)  # type: ignore[arg-type]

        walk(expanded)
        inner = expanded.children[0].value.children[1].value  # type: ignore[union-attr]
        assert inner.children[0].key == "b"
