"""In-memory cache slot for match data.

The slot lives exactly as long as the object that owns it. The serverless
entrypoints keep one at module level so warm instances reuse it; tests
build a fresh or pre-seeded one per case. A missing entry is always a
legitimate state.
"""

import time
from collections.abc import Callable

from wc26_proxy.config import settings
from wc26_proxy.entities import CacheEntry, MatchPayload


class MatchCache:
    """Single-slot cache with TTL.

    Reads and writes are plain attribute accesses on an immutable
    ``CacheEntry``, so concurrent invocations on the same event loop see
    either the previous entry or the new one, never a mix. No lock is
    taken; two overlapping refreshes both hit upstream and the last one
    wins.

    Example:
        ```python
        cache = MatchCache(ttl=1800)
        if not cache.is_fresh():
            cache.put(payload)
        ```
    """

    def __init__(
        self,
        ttl: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: Freshness window in seconds. Defaults to settings.match_cache_ttl.
            clock: Returns the current Unix time in seconds.
        """
        self._ttl = ttl or settings.match_cache_ttl
        self._clock = clock
        self._entry = CacheEntry()

    @property
    def ttl(self) -> float:
        """Get the freshness window in seconds."""
        return self._ttl

    @property
    def entry(self) -> CacheEntry:
        """Get the current entry (possibly empty)."""
        return self._entry

    def now(self) -> float:
        """Current time according to the cache clock."""
        return self._clock()

    def is_fresh(self, now: float | None = None) -> bool:
        """True if the slot holds data younger than the TTL."""
        return self._entry.is_fresh(self.now() if now is None else now, self._ttl)

    def put(self, payload: MatchPayload, fetched_at: float | None = None) -> None:
        """Replace the slot with a complete payload."""
        self._entry = CacheEntry(data=payload, fetched_at=self.now() if fetched_at is None else fetched_at)

    def clear(self) -> None:
        """Drop the cached payload."""
        self._entry = CacheEntry()
