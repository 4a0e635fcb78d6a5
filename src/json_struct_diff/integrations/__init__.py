"""Integrations subpackage for json-struct-diff.

Contains the pytest plugin, auto-discovered via the ``pytest11`` entry point.
"""

from __future__ import annotations

__all__: list[str] = []
