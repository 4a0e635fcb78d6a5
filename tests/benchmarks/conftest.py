"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible JSON texts. No random values.
Three tiers: 10-key flat, 100-key nested, 1000-element arrays.
Each tier provides both "identical" and "changed" pair generators.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_100() -> dict[str, Any]:
    """10 sections x 10 leaf keys = 100 leaves."""
    return {
        f"section_{i}": {f"field_{i}_{j}": [j, f"v{j}", j % 2 == 0] for j in range(10)}
        for i in range(10)
    }


def _changed_nested_100() -> dict[str, Any]:
    """Same shape as _make_nested_100 with one value per section altered."""
    doc = _make_nested_100()
    for i in range(10):
        doc[f"section_{i}"][f"field_{i}_{i}"] = None
    return doc


def _pair(left: Any, right: Any) -> tuple[str, str]:
    return json.dumps(left), json.dumps(right)


@pytest.fixture
def pair_10key_same() -> tuple[str, str]:
    doc = generate_flat_object(10)
    return _pair(doc, dict(reversed(list(doc.items()))))


@pytest.fixture
def pair_10key_changed() -> tuple[str, str]:
    return _pair(generate_flat_object(10), generate_flat_object(10, prefix="other"))


@pytest.fixture
def pair_100key_same() -> tuple[str, str]:
    return _pair(_make_nested_100(), _make_nested_100())


@pytest.fixture
def pair_100key_changed() -> tuple[str, str]:
    return _pair(_make_nested_100(), _changed_nested_100())


@pytest.fixture
def pair_array_1000_same() -> tuple[str, str]:
    doc = [{"id": i, "tags": [i, i + 1]} for i in range(1000)]
    return _pair(doc, doc)


@pytest.fixture
def pair_array_1000_shifted() -> tuple[str, str]:
    doc = [{"id": i, "tags": [i, i + 1]} for i in range(1000)]
    return _pair(doc, doc[1:])
