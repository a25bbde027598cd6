"""HTTP fetcher protocol.

Defines the interface for issuing an outbound HTTP request and
receiving a status code plus decoded body.

Implementations can include:
- httpx.AsyncClient (default)
- In-memory fakes for tests
- Recording/replaying fetchers
"""

from typing import Any, Protocol, runtime_checkable

from wc26_proxy.entities import FetchResponse


@runtime_checkable
class HttpFetcher(Protocol):
    """Protocol for outbound HTTP transports.

    Any type that implements ``fetch`` satisfies the protocol, no explicit
    inheritance needed.

    Contract:
        - A response that reached the provider is returned, whatever its
          status code. Callers decide what a non-2xx means.
        - Network failures and timeouts raise ``UpstreamError`` with no
          status code.

    Example:
        ```python
        from wc26_proxy.protocols import HttpFetcher

        fetcher: HttpFetcher = HttpxFetcher.create()
        response = await fetcher.fetch("GET", "https://example.com/")
        ```
    """

    async def fetch(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> FetchResponse:
        """Issue a single HTTP request.

        Args:
            method: HTTP method ("GET", "POST", ...)
            url: Absolute URL
            headers: Optional request headers
            json: Optional JSON-serializable request body

        Returns:
            FetchResponse with status code, reason and decoded body

        Raises:
            UpstreamError: If the provider could not be reached
        """
        ...
