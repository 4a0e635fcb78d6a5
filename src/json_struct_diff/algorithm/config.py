"""DiffConfig: immutable settings for the structural differ and comparator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        max_depth: Deepest array/object nesting the differ will descend into.
            ``None`` (default) means unbounded; the top-level container counts
            as depth 1.  Exceeding it raises ``NestingDepthError``.
        expand_leaves: When True, arrays/objects that exist on only one side
            are expanded eagerly into nodes carrying that side.  When False
            (default) they are carried as ``LazyValue`` leaves.
        cache_size: Number of ``compare()`` results each ``JsonComparator``
            keeps in its LRU cache.  ``0`` disables the cache.  Default 128.
    """

    max_depth: int | None = None
    expand_leaves: bool = False
    cache_size: int = 128

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
        if self.cache_size < 0:
            msg = f"cache_size must be >= 0, got {self.cache_size}"
            raise ValueError(msg)
