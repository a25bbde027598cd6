"""Netlify/Lambda-style entrypoints.

Each function takes an event (``httpMethod``, ``body``) and returns
``{"statusCode", "headers", "body"}``.

The match cache is module-level, so it survives for as long as the host
keeps this instance warm and is simply empty after a cold start. The
HTTP client is created and closed per invocation, since each call runs
in its own event loop.
"""

import asyncio
import logging
from typing import Any

from wc26_proxy.api.dependencies import Handlers, build_handlers
from wc26_proxy.cache import MatchCache
from wc26_proxy.config import settings
from wc26_proxy.dto import HandlerRequest
from wc26_proxy.logging_config import setup_logging
from wc26_proxy.repositories import HttpxFetcher

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

match_cache = MatchCache(ttl=settings.match_cache_ttl)


async def _invoke(name: str, event: dict[str, Any]) -> dict[str, Any]:
    fetcher = HttpxFetcher(timeout=settings.upstream_timeout)
    try:
        handlers: Handlers = build_handlers(settings, fetcher, cache=match_cache)
        handler = handlers.matches if name == "matches" else handlers.subscribe
        result = await handler.handle(HandlerRequest.from_event(event or {}))
    finally:
        await fetcher.close()
    return result.to_event_result()


def matches(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Match data function."""
    return asyncio.run(_invoke("matches", event))


def subscribe(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Subscription function."""
    return asyncio.run(_invoke("subscribe", event))
