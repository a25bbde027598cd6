"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services,
repositories and handlers. Wire formats are produced explicitly
via ``to_dict`` or by the DTOs in the dto package.
"""

from .cache_entry import CacheEntry
from .fetch_response import FetchResponse
from .match_payload import MatchPayload, format_timestamp

__all__ = ["CacheEntry", "FetchResponse", "MatchPayload", "format_timestamp"]
