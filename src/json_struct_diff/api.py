"""Public API functions for json-struct-diff.

This module provides the user-facing functions: compare_jsons,
compare_values and is_same.  Each call creates a fresh JsonComparator to
guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import Any

from json_struct_diff.algorithm.config import DiffConfig
from json_struct_diff.comparator import JsonComparator
from json_struct_diff.result import CompareResult
from json_struct_diff.tree.nodes import ComparedValues

__all__ = ["compare_jsons", "compare_values", "is_same"]


def compare_jsons(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> CompareResult:
    """Parse two JSON texts and compare them structurally.

    Args:
        left_text:  Raw left JSON document.
        right_text: Raw right JSON document.
        config:     Differ settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        ``CompareOk`` with the decoded documents and the result tree, or
        ``CompareError`` with a message for each side that failed to parse.
    """
    return JsonComparator(config=config).compare(left_text, right_text)


def compare_values(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> ComparedValues:
    """Compare two decoded JSON values.

    Args:
        left:   Left value (dict, list, str, int, float, bool, None).
        right:  Right value.
        config: Differ settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        The top-level ``ComparedValues``.

    Raises:
        TypeError: If either value is not JSON-shaped.
    """
    return JsonComparator(config=config).compare_decoded(left, right)


def is_same(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if both texts parse and are structurally identical.

    Object key order and insignificant whitespace do not matter; ``1`` and
    ``1.0`` are the same number.  Returns False when either side is invalid.
    """
    return compare_jsons(left_text, right_text, config=config).is_same
