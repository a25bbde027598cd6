"""HTTP handler for match data.

Converts MatchDataService results into JSON responses. Every path ends
in a response; no exception escapes ``handle``.
"""

import logging

from fastapi import status

from wc26_proxy.dto import ErrorResponse, HandlerRequest, HandlerResponse
from wc26_proxy.errors import UpstreamError
from wc26_proxy.services import MatchDataService


class MatchDataHandler:
    """Serves World Cup fixtures and standings.

    Example:
        ```python
        handler = MatchDataHandler(match_service=service)
        response = await handler.handle(HandlerRequest(method="GET"))
        ```
    """

    def __init__(self, match_service: MatchDataService, logger: logging.Logger | None = None) -> None:
        """Initialize the handler.

        Args:
            match_service: Cache-backed match data service (required).
            logger: Logger for failures.
        """
        self._service = match_service
        self._logger = logger or logging.getLogger(__name__)
        # Browsers and CDNs hold responses as long as the server-side cache
        max_age = int(match_service.cache.ttl)
        self._headers = {
            "Access-Control-Allow-Origin": "*",
            "Content-Type": "application/json",
            "Cache-Control": f"public, max-age={max_age}",
        }

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every response."""
        return dict(self._headers)

    async def handle(self, request: HandlerRequest | None = None) -> HandlerResponse:
        """Handle a match data request (method is not checked).

        Returns:
            200 with the payload (plus ``cached`` or ``stale``), or 500
        """
        try:
            result = await self._service.get_match_data()
        except UpstreamError as e:
            self._logger.error("matches handler error: %s", e)
            return self._error(str(e))
        except Exception as e:
            self._logger.exception("Unexpected matches handler error")
            return self._error(str(e))

        body = result.payload.to_dict()
        if result.cached:
            body["cached"] = True
        elif result.stale:
            body["stale"] = True

        return HandlerResponse.from_content(status.HTTP_200_OK, self._headers, body)

    def _error(self, detail: str) -> HandlerResponse:
        return HandlerResponse.from_content(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            self._headers,
            ErrorResponse(error="Failed to fetch match data", detail=detail),
        )

    def cache_status(self) -> dict:
        """Describe the cache slot without touching upstream."""
        cache = self._service.cache
        data = cache.entry.data
        return {
            "has_data": data is not None,
            "fresh": cache.is_fresh(),
            "fetched_at": data.fetched_at if data is not None else None,
            "ttl_seconds": cache.ttl,
        }
