"""Match payload domain entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def format_timestamp(timestamp: float) -> str:
    """Format a Unix timestamp as UTC ISO-8601 with milliseconds and a Z suffix.

    Example:
        ```python
        format_timestamp(0)  # "1970-01-01T00:00:00.000Z"
        ```
    """
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class MatchPayload:
    """Fixtures and standings for one competition, as served to clients.

    Match and standings objects are passed through untouched; their shape
    belongs to the upstream provider.

    Attributes:
        matches: Fixtures as sent by the provider (normally a list, in provider order)
        standings: Group tables, or None when the provider has none yet
        fetched_at: ISO-8601 timestamp of the refresh that built this payload
    """

    matches: Any
    standings: Any | None
    fetched_at: str

    @classmethod
    def build(cls, matches: Any, standings: Any | None, fetched_at: float) -> "MatchPayload":
        """Assemble a payload from raw provider fields."""
        return cls(
            matches=matches if matches else [],
            standings=standings,
            fetched_at=format_timestamp(fetched_at),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation (``fetchedAt`` in camelCase)."""
        return {
            "matches": self.matches,
            "standings": self.standings,
            "fetchedAt": self.fetched_at,
        }
