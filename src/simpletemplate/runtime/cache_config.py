"""Cache configuration for PluralHandler.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from simpletemplate.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for the parsed-template cache.

    Attributes:
        size: Maximum cached templates (default: 1024). ``0`` disables
            caching entirely; ``None`` keeps every template forever.

    Example:
        >>> CacheConfig(size=0).enabled
        False
        >>> CacheConfig(size=None).bounded
        False
    """

    size: int | None = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is negative
        """
        if self.size is not None and self.size < 0:
            msg = "size must be non-negative or None"
            raise ValueError(msg)

    @property
    def enabled(self) -> bool:
        """Whether templates are cached at all."""
        return self.size != 0

    @property
    def bounded(self) -> bool:
        """Whether the cache evicts entries."""
        return self.size is not None
