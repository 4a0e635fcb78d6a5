"""summarize(): flatten a compared tree into JSON Pointer paths.

Each one-sided node is reported by its RFC 6901 pointer in the document it
belongs to.  Array indices are counted per side, so after a left-only
element the left and right indices of later elements diverge.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from json_struct_diff.tree.nodes import ComparedValue, ComparedValues, Side
from json_struct_diff.tree.values import JsonKind

__all__ = ["DiffSummary", "escape_pointer_token", "summarize"]


@dataclass(frozen=True, slots=True)
class DiffSummary:
    """Flat view of a compared tree.

    Attributes:
        is_same: Copied from the summarized ``ComparedValues``.
        unmatched_left: Pointer paths of nodes only present in the left
            document.
        unmatched_right: Pointer paths of nodes only present in the right
            document.
    """

    is_same: bool
    unmatched_left: list[str] = field(default_factory=list)
    unmatched_right: list[str] = field(default_factory=list)


def escape_pointer_token(token: str) -> str:
    """Escape one reference token per RFC 6901 (``~`` -> ``~0``, ``/`` -> ``~1``)."""
    return token.replace("~", "~0").replace("/", "~1")


def summarize(values: ComparedValues) -> DiffSummary:
    """Collect the pointer paths of every one-sided node.

    Args:
        values: A top-level ``ComparedValues`` (e.g. ``CompareOk.result``).

    Returns:
        A ``DiffSummary``.  Paths appear in result-tree order.
    """
    summary = DiffSummary(is_same=values.is_same)
    _walk(values, None, "", "", summary)
    return summary


def _walk(
    values: ComparedValues,
    container: JsonKind | None,
    left_base: str,
    right_base: str,
    summary: DiffSummary,
) -> None:
    left_index = right_index = 0

    for node in values.children:
        if container == JsonKind.ARRAY:
            left_path = f"{left_base}/{left_index}"
            right_path = f"{right_base}/{right_index}"
            if node.side != Side.RIGHT:
                left_index += 1
            if node.side != Side.LEFT:
                right_index += 1
        elif container == JsonKind.OBJECT:
            token = escape_pointer_token(node.key or "")
            left_path = f"{left_base}/{token}"
            right_path = f"{right_base}/{token}"
        else:
            left_path, right_path = left_base, right_base

        if node.side == Side.LEFT:
            summary.unmatched_left.append(left_path)
        elif node.side == Side.RIGHT:
            summary.unmatched_right.append(right_path)
        elif isinstance(node.value, ComparedValue) and isinstance(
            node.value.value, ComparedValues
        ):
            _walk(node.value.value, node.kind, left_path, right_path, summary)
