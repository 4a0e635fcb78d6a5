"""JSON structural diff - side-by-side alignment of two JSON documents."""

from __future__ import annotations

from json_struct_diff.algorithm.config import DiffConfig
from json_struct_diff.algorithm.differ import NestingDepthError, StructuralDiffer
from json_struct_diff.api import compare_jsons, compare_values, is_same
from json_struct_diff.comparator import JsonComparator
from json_struct_diff.result import (
    CompareError,
    CompareOk,
    CompareResult,
    CompareStatus,
)
from json_struct_diff.summary import DiffSummary, summarize
from json_struct_diff.tree import (
    ComparedNode,
    ComparedValue,
    ComparedValues,
    JsonKind,
    LazyValue,
    Side,
    TaggedValue,
    classify,
    expand_lazy_value,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareError",
    "CompareOk",
    "CompareResult",
    "CompareStatus",
    "ComparedNode",
    "ComparedValue",
    "ComparedValues",
    "DiffConfig",
    "DiffSummary",
    "JsonComparator",
    "JsonKind",
    "LazyValue",
    "NestingDepthError",
    "Side",
    "StructuralDiffer",
    "TaggedValue",
    "classify",
    "compare_jsons",
    "compare_values",
    "expand_lazy_value",
    "is_same",
    "summarize",
]
