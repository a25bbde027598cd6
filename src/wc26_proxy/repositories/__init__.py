"""Repository layer for data access.

This layer wraps the upstream providers (football-data.org, Beehiiv)
behind small classes that depend only on the HttpFetcher protocol.
Tests swap the transport, not the repositories.
"""

from wc26_proxy.protocols import HttpFetcher

from .beehiiv_repository import BeehiivRepository
from .football_data_repository import FootballDataRepository
from .httpx_fetcher import HttpxFetcher

__all__ = [
    "HttpFetcher",
    "BeehiivRepository",
    "FootballDataRepository",
    "HttpxFetcher",
]
