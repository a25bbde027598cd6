"""WC26 Proxy - World Cup 2026 match data and newsletter subscription proxy.

Keeps football-data.org and Beehiiv API keys server-side and collapses
repeated match-data requests with a short-lived in-process cache.

Layers:
    - protocols: Interface contracts (HttpFetcher)
    - repositories: Provider access (football-data.org, Beehiiv, httpx transport)
    - services: Business logic (cache/stale fallback, email validation)
    - handlers: Request handlers returning JSON responses
    - dto: Handler request/response contracts
    - entities: Domain models (internal)

Usage:
    ```python
    from wc26_proxy.api.dependencies import build_handlers
    from wc26_proxy.repositories import HttpxFetcher

    handlers = build_handlers(settings, HttpxFetcher.create())
    response = await handlers.matches.handle(HandlerRequest(method="GET"))
    ```

For HTTP API:
    ```python
    from wc26_proxy.api.app import app
    ```
"""

from wc26_proxy.cache import MatchCache
from wc26_proxy.config import Settings, settings
from wc26_proxy.dto import HandlerRequest, HandlerResponse
from wc26_proxy.entities import CacheEntry, FetchResponse, MatchPayload
from wc26_proxy.errors import (
    ConfigurationError,
    MethodNotAllowedError,
    ProxyError,
    UpstreamError,
    ValidationError,
)
from wc26_proxy.handlers import MatchDataHandler, SubscriptionHandler
from wc26_proxy.protocols import HttpFetcher
from wc26_proxy.repositories import BeehiivRepository, FootballDataRepository, HttpxFetcher
from wc26_proxy.services import MatchDataService, SubscriptionService

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Errors
    "ProxyError",
    "ValidationError",
    "MethodNotAllowedError",
    "ConfigurationError",
    "UpstreamError",
    # Protocols (interfaces)
    "HttpFetcher",
    # Cache
    "MatchCache",
    # Services (business logic)
    "MatchDataService",
    "SubscriptionService",
    # Handlers
    "MatchDataHandler",
    "SubscriptionHandler",
    # Repositories (provider access)
    "BeehiivRepository",
    "FootballDataRepository",
    "HttpxFetcher",
    # Entities (domain models)
    "CacheEntry",
    "FetchResponse",
    "MatchPayload",
    # DTOs (handler contracts)
    "HandlerRequest",
    "HandlerResponse",
]
