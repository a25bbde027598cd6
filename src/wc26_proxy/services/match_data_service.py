"""Match data service.

Serves fixtures and standings from the cache when fresh, refreshes from
football-data.org otherwise, and falls back to the last good payload when
the refresh fails.
"""

import logging
from dataclasses import dataclass

from wc26_proxy.cache import MatchCache
from wc26_proxy.entities import MatchPayload
from wc26_proxy.errors import UpstreamError
from wc26_proxy.repositories import FootballDataRepository


@dataclass(frozen=True)
class MatchDataResult:
    """Payload plus how it was obtained.

    Attributes:
        payload: The match payload to serve
        cached: Served from a fresh cache entry without upstream calls
        stale: Served from an expired cache entry because the refresh failed
    """

    payload: MatchPayload
    cached: bool = False
    stale: bool = False


class MatchDataService:
    """Cache-first orchestration over FootballDataRepository.

    Example:
        ```python
        service = MatchDataService(
            repository=FootballDataRepository.create(fetcher=HttpxFetcher.create()),
            cache=MatchCache(),
        )
        result = await service.get_match_data()
        ```
    """

    def __init__(
        self,
        repository: FootballDataRepository,
        cache: MatchCache,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: football-data.org access (required).
            cache: The cache slot to read and refresh (required).
            logger: Logger for refresh and fallback events.
        """
        self._repository = repository
        self._cache = cache
        self._logger = logger or logging.getLogger(__name__)

    @property
    def cache(self) -> MatchCache:
        """Get the underlying cache (for testing)."""
        return self._cache

    async def get_match_data(self) -> MatchDataResult:
        """Return match data, refreshing the cache if it has expired.

        Business logic:
        1. Fresh cache entry -> return it, no upstream calls
        2. Fetch fixtures (failure goes to step 4)
        3. Fetch standings (failure means "not available yet" -> None)
        4. On fixture failure, serve the previous payload as stale if any

        Returns:
            MatchDataResult with the payload and its cached/stale flags

        Raises:
            UpstreamError: If fixtures cannot be fetched and nothing is cached
            Exception: Any other refresh failure, when nothing is cached
        """
        now = self._cache.now()
        entry = self._cache.entry

        if entry.data is not None and entry.is_fresh(now, self._cache.ttl):
            self._logger.debug("Serving match data from cache (fetched %s)", entry.data.fetched_at)
            return MatchDataResult(payload=entry.data, cached=True)

        try:
            payload = await self._refresh(now)
        except Exception as e:
            # Network errors, bad status codes and malformed bodies all fall back
            self._logger.error("Match data refresh failed: %s", e)
            previous = self._cache.entry.data
            if previous is None:
                raise
            self._logger.warning("Serving stale match data (fetched %s)", previous.fetched_at)
            return MatchDataResult(payload=previous, stale=True)

        return MatchDataResult(payload=payload)

    async def _refresh(self, now: float) -> MatchPayload:
        match_data = await self._repository.get_matches()
        standings = await self._fetch_standings()

        payload = MatchPayload.build(
            matches=match_data.get("matches"),
            standings=standings,
            fetched_at=self._cache.now(),
        )
        self._cache.put(payload, fetched_at=now)

        self._logger.info(
            "Refreshed %s match data: %s matches, standings %s",
            self._repository.competition,
            len(payload.matches) if isinstance(payload.matches, list) else "non-list",
            "available" if standings is not None else "unavailable",
        )
        return payload

    async def _fetch_standings(self):
        # Standings are missing before the group stage starts
        try:
            standings_data = await self._repository.get_standings()
        except UpstreamError as e:
            self._logger.info("Standings not available: %s", e)
            return None
        return standings_data.get("standings")
