"""httpx-based HTTP fetcher.

Satisfies the HttpFetcher protocol with an ``httpx.AsyncClient``. Every
request carries an explicit timeout; timeouts and connection errors are
reported as ``UpstreamError`` so callers treat them like any other
provider failure.
"""

import logging
from typing import Any

import httpx

from wc26_proxy.config import settings
from wc26_proxy.entities import FetchResponse
from wc26_proxy.errors import UpstreamError


class HttpxFetcher:
    """httpx implementation of HttpFetcher protocol.

    Example:
        ```python
        fetcher = HttpxFetcher.create(timeout=5.0)
        response = await fetcher.fetch("GET", "https://api.football-data.org/v4/competitions/WC/matches")
        await fetcher.close()
        ```
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
            logger: Logger for request failures.
        """
        self._timeout = timeout or settings.upstream_timeout
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
            )
        return self._client

    @classmethod
    def create(cls, timeout: float | None = None) -> "HttpxFetcher":
        """Factory method to create HttpxFetcher with defaults.

        Args:
            timeout: Timeout in seconds. If None, uses settings.

        Returns:
            Configured HttpxFetcher
        """
        return cls(timeout=timeout)

    @property
    def timeout(self) -> float:
        """Get the request timeout in seconds."""
        return self._timeout

    async def fetch(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> FetchResponse:
        """Issue a request and decode the JSON body if there is one.

        Raises:
            UpstreamError: On timeouts and transport errors
        """
        try:
            response = await self.client.request(method, url, headers=headers, json=json)
        except httpx.TimeoutException as e:
            self._logger.error("Timed out after %.1fs: %s %s", self._timeout, method, url)
            raise UpstreamError(f"Request timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            self._logger.error("Request failed: %s %s: %s", method, url, e)
            raise UpstreamError(f"Request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        return FetchResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=body,
        )

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
