"""Integration tests for the json-struct-diff pytest plugin.

These tests verify that the assert_json_same fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-struct-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_struct_diff import DiffConfig


def test_fixture_passes_reordered_keys(assert_json_same: Any) -> None:
    assert_json_same('{"a": 1, "b": [true, null]}', '{"b": [true, null], "a": 1}')


def test_fixture_fails_changed_value(assert_json_same: Any) -> None:
    with pytest.raises(AssertionError, match=r"unmatched_left"):
        assert_json_same('{"a": 1}', '{"a": 2}')


def test_fixture_fails_invalid_json(assert_json_same: Any) -> None:
    with pytest.raises(AssertionError, match=r"could not be compared"):
        assert_json_same("foo", "{}")


def test_fixture_custom_config(assert_json_same: Any) -> None:
    """Custom DiffConfig should be forwarded to compare_jsons()."""
    with pytest.raises(ValueError, match="max_depth"):
        assert_json_same("[[1]]", "[[1]]", config=DiffConfig(max_depth=1))


def test_fixture_error_message_contents(assert_json_same: Any) -> None:
    """AssertionError message should contain the pointer paths of each side."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_same('{"a": [1, 2]}', '{"a": [1], "b": 0}')

    error_message = str(exc_info.value)
    assert "unmatched_left:  ['/a/1']" in error_message
    assert "unmatched_right: ['/b']" in error_message


def test_fixture_returns_callable(assert_json_same: Any) -> None:
    assert callable(assert_json_same)


def test_plugin_discovery() -> None:
    """Verify assert_json_same appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_same" in result.stdout, (
        f"assert_json_same not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
