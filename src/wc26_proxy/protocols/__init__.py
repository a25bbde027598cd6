"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.

Usage:
    ```python
    from wc26_proxy.protocols import HttpFetcher

    fetcher: HttpFetcher = HttpxFetcher.create()  # works
    fetcher: HttpFetcher = FakeFetcher()          # also works
    ```
"""

from .http_fetcher import HttpFetcher

__all__ = [
    "HttpFetcher",
]
