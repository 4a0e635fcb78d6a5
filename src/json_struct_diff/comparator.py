"""JsonComparator: orchestrator that wires parse_json + classify + StructuralDiffer.

This is the wiring layer between the raw differ and the public API.

Architecture:
- compare() parses both texts independently.  If either fails, a
  ``CompareError`` carrying each side's message is returned and no diff is
  attempted.
- Otherwise both decoded values are classified and handed to
  ``StructuralDiffer.compare_values``.
- Results are cached per instance in an LRU cache keyed by the two input
  texts.  A comparison is a pure function of its inputs and config, so a
  cached result is indistinguishable from a fresh one.  Decoded documents
  are frozen (tuples and read-only mappings) before comparison, so neither
  ``CompareOk.left``/``right`` nor any ``LazyValue`` in a cached result can
  be mutated by a caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from cachetools import LRUCache

from json_struct_diff.algorithm.config import DiffConfig
from json_struct_diff.algorithm.differ import StructuralDiffer
from json_struct_diff.parser import ParseFailure, parse_json
from json_struct_diff.result import CompareError, CompareOk, CompareResult
from json_struct_diff.tree.nodes import ComparedValues
from json_struct_diff.tree.values import classify, freeze

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)


class JsonComparator:
    """Compares pairs of JSON texts and returns a ``CompareResult``.

    Two separate ``JsonComparator`` instances never share cache state.

    Example::

        from json_struct_diff.comparator import JsonComparator

        cmp = JsonComparator()
        result = cmp.compare('{"a": 1, "b": 2}', '{"b": 2, "a": 1}')
        print(result.status)            # ok
        print(result.result.is_same)    # True
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Differ and cache settings.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._differ = StructuralDiffer(config=self._config)
        self._cache: LRUCache[tuple[str, str], CompareResult] | None = (
            LRUCache(maxsize=self._config.cache_size)
            if self._config.cache_size > 0
            else None
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> DiffConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        """The number of results currently held in the cache."""
        return 0 if self._cache is None else int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left_text: str, right_text: str) -> CompareResult:
        """Parse and compare two JSON texts.

        Args:
            left_text:  Raw left JSON document.
            right_text: Raw right JSON document.

        Returns:
            ``CompareOk`` with the result tree, or ``CompareError`` when
            either side fails to parse.  Parse failures are never raised.
        """
        cache_key = (left_text, right_text)
        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("compare() served from cache")
                return cached

        result = self._compare_texts(left_text, right_text)

        if self._cache is not None:
            self._cache[cache_key] = result
        return result

    def compare_decoded(self, left: Any, right: Any) -> ComparedValues:
        """Compare two already-decoded JSON values.

        Args:
            left:  Left value (dict, list, str, int, float, bool, None).
            right: Right value.

        Returns:
            The top-level ``ComparedValues``.

        Raises:
            TypeError: If either value is not JSON-shaped.
            NestingDepthError: If nesting exceeds ``config.max_depth``.
        """
        t0 = time.perf_counter()
        values = self._differ.compare_values(classify(left), classify(right))
        logger.debug(
            "compared documents in %.3f ms (is_same=%s)",
            (time.perf_counter() - t0) * 1000.0,
            values.is_same,
        )
        return values

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _compare_texts(self, left_text: str, right_text: str) -> CompareResult:
        left_parsed = parse_json(left_text)
        right_parsed = parse_json(right_text)

        if isinstance(left_parsed, ParseFailure) or isinstance(right_parsed, ParseFailure):
            return CompareError(
                left_text=left_text,
                right_text=right_text,
                left_message=(
                    left_parsed.message if isinstance(left_parsed, ParseFailure) else None
                ),
                right_message=(
                    right_parsed.message if isinstance(right_parsed, ParseFailure) else None
                ),
            )

        # cached results are shared, so they must not expose mutable documents
        left = freeze(left_parsed.value)
        right = freeze(right_parsed.value)
        return CompareOk(left=left, right=right, result=self.compare_decoded(left, right))
