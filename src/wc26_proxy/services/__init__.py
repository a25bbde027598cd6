"""Service layer for business logic.

Services depend on repositories and the cache object, which are passed
in explicitly, so tests can supply fakes or a pre-seeded cache.

Architecture:
    Handler -> Service -> Repository -> HttpFetcher
    (HTTP)  -> (Business) -> (Provider API) -> (Transport)

Usage:
    ```python
    from wc26_proxy.services import MatchDataService

    service = MatchDataService(repository=repo, cache=MatchCache())
    result = await service.get_match_data()
    ```
"""

from .match_data_service import MatchDataResult, MatchDataService
from .subscription_service import EMAIL_PATTERN, SubscriptionService, is_valid_email

__all__ = [
    "EMAIL_PATTERN",
    "MatchDataResult",
    "MatchDataService",
    "SubscriptionService",
    "is_valid_email",
]
