"""Handler layer for HTTP endpoints.

Handlers take a HandlerRequest and always return a HandlerResponse,
whatever goes wrong underneath. They depend on services, not directly
on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Provider API)
"""

from .match_data_handler import MatchDataHandler
from .subscription_handler import CORS_HEADERS, SubscriptionHandler

__all__ = [
    "CORS_HEADERS",
    "MatchDataHandler",
    "SubscriptionHandler",
]
