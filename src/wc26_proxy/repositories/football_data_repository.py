"""football-data.org repository.

Reads fixtures and standings for one competition. Fixture and standing
objects are passed through as opaque JSON.
"""

from typing import Any

from wc26_proxy.config import settings
from wc26_proxy.errors import UpstreamError
from wc26_proxy.protocols import HttpFetcher


class FootballDataRepository:
    """Data access for the football-data.org v4 API.

    Example:
        ```python
        repo = FootballDataRepository.create(fetcher=HttpxFetcher.create())
        data = await repo.get_matches()
        print(len(data.get("matches", [])))
        ```
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        api_key: str | None = None,
        base_url: str | None = None,
        competition: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            fetcher: Outbound HTTP transport (required).
            api_key: Value for the X-Auth-Token header. Defaults to settings.
            base_url: API base URL. Defaults to settings.
            competition: Competition code. Defaults to settings ("WC").
        """
        self._fetcher = fetcher
        self._api_key = api_key if api_key is not None else settings.football_api_key
        self._base_url = (base_url or settings.football_api_base_url).rstrip("/")
        self._competition = competition or settings.football_competition

    @classmethod
    def create(cls, fetcher: HttpFetcher, **overrides: Any) -> "FootballDataRepository":
        """Factory method to create FootballDataRepository with settings defaults."""
        return cls(fetcher=fetcher, **overrides)

    @property
    def competition(self) -> str:
        """Get the competition code."""
        return self._competition

    async def get_matches(self) -> dict[str, Any]:
        """Fetch all fixtures and results for the competition.

        Returns:
            The decoded provider response (a JSON object)

        Raises:
            UpstreamError: On network failure, non-2xx status or malformed body
        """
        return await self._get(f"/competitions/{self._competition}/matches")

    async def get_standings(self) -> dict[str, Any]:
        """Fetch the group tables for the competition.

        Raises:
            UpstreamError: On network failure, non-2xx status or malformed body
        """
        return await self._get(f"/competitions/{self._competition}/standings")

    async def _get(self, path: str) -> dict[str, Any]:
        response = await self._fetcher.fetch(
            "GET",
            f"{self._base_url}{path}",
            headers={"X-Auth-Token": self._api_key or ""},
        )

        if not response.ok:
            raise UpstreamError(
                f"API error {response.status_code}: {response.reason}",
                status_code=response.status_code,
            )

        if not isinstance(response.body, dict):
            raise UpstreamError(
                f"Unexpected response format from {path}",
                status_code=response.status_code,
            )

        return response.body
