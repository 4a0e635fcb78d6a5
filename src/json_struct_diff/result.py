"""Top-level result types returned by compare_jsons().

A comparison either succeeds with both decoded documents and their
``ComparedValues``, or fails because one or both inputs are not valid JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_struct_diff.tree.nodes import ComparedValues

__all__ = ["CompareError", "CompareOk", "CompareResult", "CompareStatus"]


class CompareStatus(StrEnum):
    OK = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class CompareOk:
    """Successful comparison.

    Attributes:
        left:   Decoded left document, read-only (arrays are tuples, objects
                are ``MappingProxyType`` views).
        right:  Decoded right document, read-only.
        result: Top-level ``ComparedValues``.  It has one ``Side.BOTH`` child
                when the documents are the same kind (and, for scalars, the
                same value), otherwise a ``Side.LEFT`` and a ``Side.RIGHT``.
    """

    left: Any
    right: Any
    result: ComparedValues

    @property
    def status(self) -> CompareStatus:
        return CompareStatus.OK

    @property
    def is_same(self) -> bool:
        return self.result.is_same


@dataclass(frozen=True, slots=True)
class CompareError:
    """Comparison that could not run because an input failed to parse.

    Attributes:
        left_text:     Raw left input.
        right_text:    Raw right input.
        left_message:  Syntax error for the left input; ``None`` if it parsed.
        right_message: Syntax error for the right input; ``None`` if it parsed.
    """

    left_text: str
    right_text: str
    left_message: str | None = None
    right_message: str | None = None

    @property
    def status(self) -> CompareStatus:
        return CompareStatus.ERROR

    @property
    def is_same(self) -> bool:
        return False


CompareResult = CompareOk | CompareError
