"""StructuralDiffer: recursive alignment of two tagged JSON values.

Architecture:
- ``compare_values`` is the single dispatch point.  It is the only place a
  kind mismatch is detected, and it wraps array/object results in one
  ``Side.BOTH`` node.
- Scalars:  equal literals give one BOTH node; otherwise a LEFT and a RIGHT.
- Arrays:   positional, greedy.  When the pair at the cursors does not
            produce a BOTH node, only the left element is consumed (emitted
            as LEFT) and the same right element is tried against the next
            left element.  There is no backtracking, so a reordering can
            cascade into many one-sided markers.
- Objects:  members sorted by key, then merged like two sorted lists.  A
            key present on both sides is compared recursively and every
            resulting node is tagged with that key.

The invariant: every ``ComparedValues.is_same`` is computed from its
children once and never reassigned.  Sequence walks are loops; only nesting
recurses, so recursion depth equals document depth.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from operator import itemgetter
from typing import Any

from json_struct_diff.algorithm.config import DiffConfig
from json_struct_diff.tree.expand import expand_fully, leaf_value
from json_struct_diff.tree.nodes import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    Side,
)
from json_struct_diff.tree.values import (
    JsonKind,
    TaggedValue,
    classify,
    nesting_depth,
)

__all__ = ["NestingDepthError", "StructuralDiffer"]

_first = itemgetter(0)


class NestingDepthError(ValueError):
    """Raised when input nests deeper than ``DiffConfig.max_depth``."""


class StructuralDiffer:
    """Recursive structural differ over ``TaggedValue`` trees.

    The differ holds no per-comparison state; one instance can be reused for
    any number of comparisons.

    Example::

        from json_struct_diff.algorithm.differ import StructuralDiffer
        from json_struct_diff.tree import classify

        differ = StructuralDiffer()
        values = differ.compare_values(classify([1, 2, 3]), classify([1, 2]))
        values.is_same                      # False
        values.children[0].value.children   # BOTH 1, BOTH 2, LEFT 3
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def compare_values(
        self, left: TaggedValue, right: TaggedValue, depth: int = 0
    ) -> ComparedValues:
        """Compare two tagged values.

        Args:
            left:  Value from the left document.
            right: Value from the right document.
            depth: Number of enclosing arrays/objects.  Callers outside the
                   differ leave this at 0.

        Returns:
            ``ComparedValues`` with exactly one ``Side.BOTH`` child (equal
            scalars, or two arrays, or two objects) or exactly two children,
            ``Side.LEFT`` then ``Side.RIGHT`` (unequal scalars or a kind
            mismatch).
        """
        if left.kind != right.kind:
            return ComparedValues(
                is_same=False,
                children=(
                    self._leaf(Side.LEFT, left, depth=depth),
                    self._leaf(Side.RIGHT, right, depth=depth),
                ),
            )

        if left.is_scalar:
            return self.compare_scalars(left, right)

        inner = depth + 1
        max_depth = self._config.max_depth
        if max_depth is not None and inner > max_depth:
            msg = f"JSON nesting exceeds max_depth={max_depth}"
            raise NestingDepthError(msg)

        if left.kind == JsonKind.ARRAY:
            compared = self.compare_arrays(left.value, right.value, inner)
        else:
            compared = self.compare_objects(left.value, right.value, inner)

        return ComparedValues(
            is_same=compared.is_same,
            children=(ComparedNode(Side.BOTH, ComparedValue(left.kind, compared)),),
        )

    # ------------------------------------------------------------------
    # Per-kind comparison
    # ------------------------------------------------------------------

    def compare_scalars(self, left: TaggedValue, right: TaggedValue) -> ComparedValues:
        """Compare two scalars of the same kind by value."""
        if left.kind != right.kind or not left.is_scalar:
            msg = f"compare_scalars needs two scalars of one kind, got {left.kind} and {right.kind}"
            raise ValueError(msg)

        if left.value == right.value:
            return ComparedValues(
                is_same=True,
                children=(ComparedNode(Side.BOTH, ComparedValue(left.kind, left.value)),),
            )
        return ComparedValues(
            is_same=False,
            children=(
                ComparedNode(Side.LEFT, ComparedValue(left.kind, left.value)),
                ComparedNode(Side.RIGHT, ComparedValue(right.kind, right.value)),
            ),
        )

    def compare_arrays(
        self, left: Sequence[Any], right: Sequence[Any], depth: int = 1
    ) -> ComparedValues:
        """Align two arrays positionally with greedy left-skipping.

        Args:
            left, right: Raw decoded elements.
            depth: Nesting depth of these arrays (1 for top-level arrays).

        Returns:
            The element nodes; ``is_same`` only when the arrays match
            element for element.
        """
        children: list[ComparedNode] = []
        is_same = True
        i = j = 0

        while i < len(left) and j < len(right):
            compared = self.compare_values(classify(left[i]), classify(right[j]), depth)
            head = compared.children[0]
            children.append(head)
            is_same = is_same and compared.is_same
            i += 1
            if head.side == Side.BOTH:
                j += 1

        if i < len(left):
            is_same = False
            children.extend(
                self._leaf(Side.LEFT, classify(item), depth=depth) for item in left[i:]
            )
        elif j < len(right):
            is_same = False
            children.extend(
                self._leaf(Side.RIGHT, classify(item), depth=depth) for item in right[j:]
            )

        return ComparedValues(is_same=is_same, children=tuple(children))

    def compare_objects(
        self, left: Mapping[str, Any], right: Mapping[str, Any], depth: int = 1
    ) -> ComparedValues:
        """Align two objects by sorted key.

        Insertion order is discarded, so the result does not depend on how
        either document ordered its keys.

        Args:
            left, right: Raw decoded members.
            depth: Nesting depth of these objects (1 for top-level objects).

        Returns:
            Keyed member nodes in ascending key order.  A key whose values
            differ contributes a LEFT node followed by a RIGHT node.
        """
        left_pairs = sorted(left.items(), key=_first)
        right_pairs = sorted(right.items(), key=_first)

        children: list[ComparedNode] = []
        is_same = True
        i = j = 0

        while i < len(left_pairs) and j < len(right_pairs):
            left_key, left_value = left_pairs[i]
            right_key, right_value = right_pairs[j]

            if left_key < right_key:
                children.append(self._leaf(Side.LEFT, classify(left_value), left_key, depth))
                is_same = False
                i += 1
            elif left_key > right_key:
                children.append(self._leaf(Side.RIGHT, classify(right_value), right_key, depth))
                is_same = False
                j += 1
            else:
                compared = self.compare_values(
                    classify(left_value), classify(right_value), depth
                )
                children.extend(node.with_key(left_key) for node in compared.children)
                is_same = is_same and compared.is_same
                i += 1
                j += 1

        if i < len(left_pairs):
            is_same = False
            children.extend(
                self._leaf(Side.LEFT, classify(value), key, depth)
                for key, value in left_pairs[i:]
            )
        elif j < len(right_pairs):
            is_same = False
            children.extend(
                self._leaf(Side.RIGHT, classify(value), key, depth)
                for key, value in right_pairs[j:]
            )

        return ComparedValues(is_same=is_same, children=tuple(children))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _leaf(
        self,
        side: Side,
        tagged: TaggedValue,
        key: str | None = None,
        depth: int = 0,
    ) -> ComparedNode:
        """Build a one-sided node, lazy unless ``expand_leaves`` is set.

        ``depth`` is the number of containers enclosing the leaf.  Eager
        expansion walks the whole subtree, so its nesting counts against
        ``max_depth``; lazy leaves are not walked and are not counted.
        """
        if self._config.expand_leaves:
            max_depth = self._config.max_depth
            if (
                max_depth is not None
                and not tagged.is_scalar
                and depth + nesting_depth(tagged.value) > max_depth
            ):
                msg = f"JSON nesting exceeds max_depth={max_depth}"
                raise NestingDepthError(msg)
            value = expand_fully(tagged, side)
        else:
            value = leaf_value(tagged)
        return ComparedNode(side=side, value=value, key=key)
