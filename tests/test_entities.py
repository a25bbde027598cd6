"""Tests for entities, the cache slot and settings validation."""

import pytest

from conftest import FakeClock
from wc26_proxy.cache import MatchCache
from wc26_proxy.config import Settings
from wc26_proxy.entities import CacheEntry, MatchPayload, format_timestamp


def test_format_timestamp_has_milliseconds_and_z():
    assert format_timestamp(1_781_000_000.5) == "2026-06-09T10:13:20.500Z"


def test_payload_preserves_match_order():
    payload = MatchPayload.build(matches=[{"id": 3}, {"id": 1}, {"id": 2}], standings=None, fetched_at=0)

    assert [m["id"] for m in payload.to_dict()["matches"]] == [3, 1, 2]


def test_payload_defaults_matches_to_empty():
    assert MatchPayload.build(matches=None, standings=None, fetched_at=0).to_dict()["matches"] == []


def test_empty_entry_is_never_fresh():
    assert CacheEntry().is_fresh(now=0.0, ttl=1800) is False


def test_cache_freshness_window():
    clock = FakeClock(now=1000.0)
    cache = MatchCache(ttl=60, clock=clock)
    cache.put(MatchPayload.build(matches=[], standings=None, fetched_at=clock()))

    clock.advance(59)
    assert cache.is_fresh()
    clock.advance(1)
    assert not cache.is_fresh()

    cache.clear()
    assert cache.entry.data is None


@pytest.mark.parametrize("field", ["match_cache_ttl", "upstream_timeout"])
def test_settings_reject_non_positive_values(field):
    with pytest.raises(ValueError):
        Settings(**{field: 0})


def test_settings_credentials_flag():
    assert Settings(beehiiv_api_key="k", beehiiv_pub_id="p").has_beehiiv_credentials
    assert not Settings(beehiiv_api_key="k", beehiiv_pub_id=None).has_beehiiv_credentials
