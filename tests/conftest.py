"""Shared fixtures: a scripted HttpFetcher, a controllable clock, settings."""

from dataclasses import dataclass
from typing import Any

import pytest

from wc26_proxy.cache import MatchCache
from wc26_proxy.config import Settings
from wc26_proxy.entities import FetchResponse
from wc26_proxy.errors import UpstreamError

MATCHES_URL = "https://football.test/v4/competitions/WC/matches"
STANDINGS_URL = "https://football.test/v4/competitions/WC/standings"
SUBSCRIBE_URL = "https://beehiiv.test/v2/publications/pub_123/subscriptions"

MATCHES_BODY = {
    "competition": {"code": "WC"},
    "matches": [
        {"id": 1, "homeTeam": {"name": "Mexico"}, "awayTeam": {"name": "South Africa"}},
        {"id": 2, "homeTeam": {"name": "Canada"}, "awayTeam": {"name": "Qatar"}},
    ],
}
STANDINGS_BODY = {
    "standings": [
        {"group": "GROUP_A", "table": [{"position": 1, "team": {"name": "Mexico"}}]},
    ],
}


@dataclass
class Call:
    method: str
    url: str
    headers: dict[str, str] | None
    json: Any


class FakeFetcher:
    """HttpFetcher returning scripted outcomes per URL.

    An outcome is a FetchResponse or an exception to raise.
    Unknown URLs get a 404.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[Call] = []
        self.closed = False

    async def fetch(self, method, url, headers=None, json=None) -> FetchResponse:
        self.calls.append(Call(method=method, url=url, headers=headers, json=json))
        outcome = self.routes.get(url, FetchResponse(404, "Not Found", {"message": "Not found"}))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True

    def urls(self) -> list[str]:
        return [call.url for call in self.calls]


class FakeClock:
    def __init__(self, now: float = 1_781_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def ok(body: Any) -> FetchResponse:
    return FetchResponse(200, "OK", body)


def network_error() -> UpstreamError:
    return UpstreamError("Request failed: [Errno 111] Connection refused")


@pytest.fixture
def app_settings() -> Settings:
    return Settings(
        football_api_key="football-key",
        football_api_base_url="https://football.test/v4",
        football_competition="WC",
        match_cache_ttl=1800,
        beehiiv_api_key="beehiiv-key",
        beehiiv_pub_id="pub_123",
        beehiiv_base_url="https://beehiiv.test",
        subscribe_utm_source="wc26-pwa",
        subscribe_utm_medium="gate",
        upstream_timeout=10.0,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> MatchCache:
    return MatchCache(ttl=1800, clock=clock)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(
        {
            MATCHES_URL: ok(MATCHES_BODY),
            STANDINGS_URL: ok(STANDINGS_BODY),
            SUBSCRIBE_URL: FetchResponse(201, "Created", {"data": {"id": "sub_1"}}),
        }
    )
