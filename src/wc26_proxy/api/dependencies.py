"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing handler instances.

Pattern:
    - Handlers built by ``build_handlers`` during lifespan
    - Dependency functions retrieve them from request.app.state
    - The match cache belongs to the app, not to the module
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from wc26_proxy.cache import MatchCache
from wc26_proxy.config import Settings
from wc26_proxy.handlers import MatchDataHandler, SubscriptionHandler
from wc26_proxy.protocols import HttpFetcher
from wc26_proxy.repositories import BeehiivRepository, FootballDataRepository, HttpxFetcher
from wc26_proxy.services import MatchDataService, SubscriptionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Handlers:
    """Both handlers, wired to one fetcher."""

    matches: MatchDataHandler
    subscribe: SubscriptionHandler


def build_handlers(settings: Settings, fetcher: HttpFetcher, cache: MatchCache | None = None) -> Handlers:
    """Wire repositories, services and handlers.

    Args:
        settings: Credentials and provider endpoints
        fetcher: Outbound HTTP transport shared by both providers
        cache: Match cache to use. A new empty one if None.

    Returns:
        Handlers ready to serve requests
    """
    cache = cache or MatchCache(ttl=settings.match_cache_ttl)

    match_service = MatchDataService(
        repository=FootballDataRepository(
            fetcher=fetcher,
            api_key=settings.football_api_key,
            base_url=settings.football_api_base_url,
            competition=settings.football_competition,
        ),
        cache=cache,
    )
    subscription_service = SubscriptionService(
        repository=BeehiivRepository(
            fetcher=fetcher,
            api_key=settings.beehiiv_api_key,
            publication_id=settings.beehiiv_pub_id,
            base_url=settings.beehiiv_base_url,
        ),
        utm_source=settings.subscribe_utm_source,
        utm_medium=settings.subscribe_utm_medium,
    )

    return Handlers(
        matches=MatchDataHandler(match_service=match_service),
        subscribe=SubscriptionHandler(subscription_service=subscription_service),
    )


def make_lifespan(settings: Settings, fetcher: HttpFetcher | None = None):
    """Create the lifespan context manager for the app.

    Initializes the layers and stores them in app.state:
    1. Fetcher (transport) - app.state.fetcher
    2. Match handler - app.state.match_handler
    3. Subscription handler - app.state.subscription_handler

    Args:
        settings: Application settings
        fetcher: Injected transport. If None, an HttpxFetcher is created and
                 closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_fetcher = None
        if fetcher is None:
            owned_fetcher = HttpxFetcher(timeout=settings.upstream_timeout)
        active_fetcher = fetcher or owned_fetcher

        handlers = build_handlers(settings, active_fetcher)
        app.state.fetcher = active_fetcher
        app.state.match_handler = handlers.matches
        app.state.subscription_handler = handlers.subscribe

        logger.info("Competition: %s", settings.football_competition)
        logger.info("Match cache TTL: %ss", settings.match_cache_ttl)
        if not settings.football_api_key:
            logger.warning("FOOTBALL_API_KEY is not set; match requests will fail upstream")
        if not settings.has_beehiiv_credentials:
            logger.warning("Beehiiv credentials are not set; subscriptions will be rejected")

        yield

        del app.state.subscription_handler
        del app.state.match_handler
        del app.state.fetcher
        if owned_fetcher is not None:
            await owned_fetcher.close()
        logger.info("Handlers shut down")

    return lifespan


def get_match_handler(request: Request) -> MatchDataHandler:
    """Dependency injection for MatchDataHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "match_handler", None)
    if handler is None:
        raise RuntimeError("MatchDataHandler not initialized. Check lifespan setup.")
    return handler


def get_subscription_handler(request: Request) -> SubscriptionHandler:
    """Dependency injection for SubscriptionHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "subscription_handler", None)
    if handler is None:
        raise RuntimeError("SubscriptionHandler not initialized. Check lifespan setup.")
    return handler


# Type aliases for cleaner dependency injection
MatchHandlerDep = Annotated[MatchDataHandler, Depends(get_match_handler)]
SubscriptionHandlerDep = Annotated[SubscriptionHandler, Depends(get_subscription_handler)]
