"""pytest plugin for json-struct-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_struct_diff import CompareError, DiffConfig, compare_jsons, summarize


@pytest.fixture(scope="session")
def assert_json_same() -> Any:
    """Fixture that returns a callable structural JSON asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare_jsons() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_key_order(assert_json_same):
            assert_json_same('{"a": 1, "b": 2}', '{"b": 2, "a": 1}')

        def test_changed_value(assert_json_same):
            with pytest.raises(AssertionError, match=r"unmatched_left"):
                assert_json_same('{"a": 1}', '{"a": 2}')

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` taking two
        JSON texts and raising ``AssertionError`` when they differ.
    """

    def _assert(
        actual: str,
        expected: str,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON texts are structurally identical.

        Args:
            actual:   JSON text produced by the code under test.
            expected: Reference JSON text.
            config:   Optional DiffConfig.

        Raises:
            AssertionError: When either text is invalid JSON (message includes
                both parse errors) or when the documents differ (message
                includes the unmatched_left and unmatched_right pointers).
        """
        result = compare_jsons(actual, expected, config=config)
        if isinstance(result, CompareError):
            raise AssertionError(
                f"JSON documents could not be compared:\n"
                f"  actual:   {result.left_message or 'ok'}\n"
                f"  expected: {result.right_message or 'ok'}"
            )
        if not result.result.is_same:
            summary = summarize(result.result)
            raise AssertionError(
                f"JSON documents differ:\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  unmatched_left:  {summary.unmatched_left}\n"
                f"  unmatched_right: {summary.unmatched_right}"
            )

    return _assert
