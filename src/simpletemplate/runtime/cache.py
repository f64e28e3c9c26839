"""Thread-safe FIFO cache for parsed plural templates.

Stores VariantSet objects keyed by a content digest of the raw template, so
memory spent on keys stays constant however long templates get.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - FIFO eviction via OrderedDict (reads never reorder entries)
    - Keys are BLAKE2b-128 hex digests of the UTF-8 template text
    - ``maxsize=0`` disables caching, ``maxsize=None`` never evicts

Thread Safety:
    All operations protected by RLock. The size check, eviction, and insert
    in put() happen under one lock acquisition, so concurrent writers can
    never push the cache past maxsize.

Python 3.13+.
"""

from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from threading import RLock

from simpletemplate.constants import DEFAULT_CACHE_SIZE
from simpletemplate.syntax import VariantSet

__all__ = ["VariantCache", "make_cache_key"]

logger = logging.getLogger(__name__)


def make_cache_key(template: str) -> str:
    """Digest raw template text into a fixed-size cache key.

    Example:
        >>> len(make_cache_key("one|many"))
        32
    """
    return hashlib.blake2b(template.encode("utf-8", "surrogatepass"), digest_size=16).hexdigest()


class VariantCache:
    """Thread-safe FIFO cache for parsed templates.

    Transparent to caller - returns None on cache miss.

    Attributes:
        maxsize: Maximum number of entries (None = unbounded, 0 = disabled)
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
        evictions: Number of entries dropped to make room
    """

    __slots__ = ("_cache", "_evictions", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int | None = DEFAULT_CACHE_SIZE) -> None:
        """Initialize variant cache.

        Args:
            maxsize: Maximum number of entries (default: 1024)

        Raises:
            ValueError: If maxsize is negative
        """
        if maxsize is not None and maxsize < 0:
            msg = "maxsize must be non-negative or None"
            raise ValueError(msg)

        self._cache: OrderedDict[str, VariantSet] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, template: str) -> VariantSet | None:
        """Get parsed variants for a raw template, or None on miss.

        Thread-safe. Does not change eviction order.
        """
        key = make_cache_key(template)
        with self._lock:
            variants = self._cache.get(key)
            if variants is None:
                self._misses += 1
            else:
                self._hits += 1
            return variants

    def put(self, template: str, variants: VariantSet) -> None:
        """Store parsed variants for a raw template.

        Thread-safe. Evicts the oldest-inserted entries while the cache is
        full. Replacing an existing key keeps its original position. No-op
        when caching is disabled.
        """
        if self._maxsize == 0:
            return

        key = make_cache_key(template)
        with self._lock:
            if key in self._cache:
                self._cache[key] = variants
                return

            if self._maxsize is not None:
                while len(self._cache) >= self._maxsize:
                    evicted, _ = self._cache.popitem(last=False)
                    self._evictions += 1
                    logger.debug("Evicted parsed template %s", evicted)

            self._cache[key] = variants

    def clear(self) -> None:
        """Clear all cached entries and reset metrics.

        Thread-safe.
        """
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def get_stats(self) -> dict[str, int | float | None]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int | None): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - evictions (int): Number of FIFO evictions
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, template: object) -> bool:
        """Check presence of a raw template without touching metrics."""
        if not isinstance(template, str):
            return False
        key = make_cache_key(template)
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._cache)

    @property
    def enabled(self) -> bool:
        """Whether the cache stores anything."""
        return self._maxsize != 0

    @property
    def maxsize(self) -> int | None:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses

    @property
    def evictions(self) -> int:
        """Number of entries evicted.

        Thread-safe.
        """
        with self._lock:
            return self._evictions
