"""Tree subpackage: tagged JSON values and compared result nodes.

Re-exports the public API for the tree module:
- JsonKind / TaggedValue / classify: dynamic JSON -> tagged value
- Side / ComparedNode / ComparedValue / ComparedValues / LazyValue: result tree
- expand_lazy_value / expand_fully: lazy leaf expansion
"""

from json_struct_diff.tree.expand import expand_fully, expand_lazy_value
from json_struct_diff.tree.nodes import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    LazyValue,
    Side,
)
from json_struct_diff.tree.values import JsonKind, TaggedValue, classify

__all__ = [
    "ComparedNode",
    "ComparedValue",
    "ComparedValues",
    "JsonKind",
    "LazyValue",
    "Side",
    "TaggedValue",
    "classify",
    "expand_fully",
    "expand_lazy_value",
]
