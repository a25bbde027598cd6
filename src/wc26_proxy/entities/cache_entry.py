"""Match cache entry domain entity."""

from dataclasses import dataclass

from .match_payload import MatchPayload


@dataclass(frozen=True)
class CacheEntry:
    """Domain entity for the single match-data cache slot.

    Attributes:
        data: Last successfully fetched payload, or None if never fetched
        fetched_at: When ``data`` was fetched (Unix timestamp, seconds)
    """

    data: MatchPayload | None = None
    fetched_at: float = 0.0

    def is_fresh(self, now: float, ttl: float) -> bool:
        """Check if the entry holds data younger than ``ttl`` seconds."""
        return self.data is not None and (now - self.fetched_at) < ttl
