"""parse_json: decode one side of a comparison without raising.

Syntax errors are returned as ``ParseFailure`` values carrying the decoder's
message, so the caller can report each side independently.

Decoding rules:
- Every number decodes to ``float`` (JSON has a single number kind).
- The non-standard ``NaN``, ``Infinity`` and ``-Infinity`` literals that the
  ``json`` module accepts by default are rejected.
- A document nesting arrays/objects deeper than ``MAX_NESTING_DEPTH`` is a
  parse failure.  The differ recurses once per level, so this bound keeps
  every accepted document within the interpreter stack.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from json_struct_diff.tree.values import nesting_depth

__all__ = ["MAX_NESTING_DEPTH", "ParseFailure", "ParseOk", "parse_json"]

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 256

_TOO_DEEP = f"JSON document nests deeper than {MAX_NESTING_DEPTH} levels"


@dataclass(frozen=True, slots=True)
class ParseOk:
    """Successfully decoded document."""

    value: Any


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Document that is not valid JSON.

    Attributes:
        message: Human-readable description of the syntax error.
    """

    message: str


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_json(text: str) -> ParseOk | ParseFailure:
    """Decode ``text`` as a single JSON document.

    Args:
        text: Raw JSON text.  Leading and trailing whitespace is allowed.

    Returns:
        ``ParseOk`` with the decoded value, or ``ParseFailure`` with the
        syntax error message.
    """
    try:
        value = json.loads(text, parse_int=float, parse_constant=_reject_constant)
    except RecursionError:
        message = _TOO_DEEP
    except ValueError as exc:
        # JSONDecodeError subclasses ValueError
        message = str(exc)
    else:
        if nesting_depth(value) <= MAX_NESTING_DEPTH:
            return ParseOk(value)
        message = _TOO_DEEP

    logger.debug("JSON parse failed: %s", message)
    return ParseFailure(message)
