"""Outbound HTTP response entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FetchResponse:
    """Result of an outbound HTTP call that reached the provider.

    Attributes:
        status_code: HTTP status returned by the provider
        reason: HTTP reason phrase (e.g. "Forbidden")
        body: Decoded JSON body, or None if the body was empty or not JSON
    """

    status_code: int
    reason: str = ""
    body: Any = None

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status_code < 300
