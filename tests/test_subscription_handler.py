"""Tests for SubscriptionHandler."""

import json
from dataclasses import replace

import pytest

from conftest import SUBSCRIBE_URL, network_error
from wc26_proxy.api.dependencies import build_handlers
from wc26_proxy.dto import HandlerRequest
from wc26_proxy.entities import FetchResponse
from wc26_proxy.handlers import CORS_HEADERS
from wc26_proxy.services import is_valid_email


@pytest.fixture
def handler(app_settings, fetcher):
    return build_handlers(app_settings, fetcher).subscribe


def post(body) -> HandlerRequest:
    return HandlerRequest(method="POST", body=body if isinstance(body, str) else json.dumps(body))


class TestPreflightAndMethods:
    @pytest.mark.asyncio
    async def test_options_returns_empty_200_with_cors(self, handler, fetcher):
        response = await handler.handle(HandlerRequest(method="OPTIONS"))

        assert response.status_code == 200
        assert response.body == ""
        assert response.headers == CORS_HEADERS
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_repeated_options_are_identical(self, handler):
        first = await handler.handle(HandlerRequest(method="OPTIONS"))
        second = await handler.handle(HandlerRequest(method="OPTIONS"))

        assert first == second

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_other_methods_are_rejected(self, handler, fetcher, method):
        response = await handler.handle(HandlerRequest(method=method, body='{"email": "a@b.co"}'))

        assert response.status_code == 405
        assert json.loads(response.body) == {"error": "Method not allowed"}
        assert fetcher.calls == []


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["{not json", "", "null", "[1, 2]", "\"x\""])
    async def test_invalid_body(self, handler, fetcher, body):
        response = await handler.handle(post(body))

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Invalid request body"}
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_missing_body(self, handler):
        response = await handler.handle(HandlerRequest(method="POST", body=None))

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Invalid request body"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email"},
            {},
            {"email": ""},
            {"email": 42},
            {"email": "a b@c.co"},
            {"email": "a@bco"},
            {"email": "a@b.co\n"},
        ],
    )
    async def test_invalid_email(self, handler, fetcher, payload):
        response = await handler.handle(post(payload))

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Invalid email address"}
        assert fetcher.calls == []

    def test_email_pattern(self):
        assert is_valid_email("a@b.co")
        assert is_valid_email("first.last+tag@sub.example.org")
        assert not is_valid_email("a@@b.co")
        assert not is_valid_email("a@b.co\n")
        assert not is_valid_email("\na@b.co")
        assert not is_valid_email(None)


class TestConfiguration:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["beehiiv_api_key", "beehiiv_pub_id"])
    async def test_missing_credentials(self, app_settings, fetcher, missing):
        handler = build_handlers(replace(app_settings, **{missing: None}), fetcher).subscribe

        response = await handler.handle(post({"email": "a@b.co"}))

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "Server configuration error"}
        assert fetcher.calls == []
        assert handler.is_configured is False

    @pytest.mark.asyncio
    async def test_invalid_email_checked_before_credentials(self, app_settings, fetcher):
        handler = build_handlers(replace(app_settings, beehiiv_api_key=None), fetcher).subscribe

        response = await handler.handle(post({"email": "nope"}))

        assert response.status_code == 400


class TestProviderCall:
    @pytest.mark.asyncio
    async def test_success(self, handler, fetcher):
        response = await handler.handle(post({"email": "a@b.co"}))

        assert response.status_code == 200
        assert json.loads(response.body) == {"success": True}
        assert response.headers == CORS_HEADERS

        [call] = fetcher.calls
        assert call.method == "POST"
        assert call.url == SUBSCRIBE_URL
        assert call.headers["Authorization"] == "Bearer beehiiv-key"
        assert call.json == {
            "email": "a@b.co",
            "reactivate_existing": False,
            "send_welcome_email": True,
            "utm_source": "wc26-pwa",
            "utm_medium": "gate",
        }

    @pytest.mark.asyncio
    async def test_provider_error_passes_status_and_message(self, handler, fetcher):
        fetcher.routes[SUBSCRIBE_URL] = FetchResponse(
            400, "Bad Request", {"status": 400, "message": "Email is on the blocklist"}
        )

        response = await handler.handle(post({"email": "a@b.co"}))

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Email is on the blocklist"}

    @pytest.mark.asyncio
    async def test_provider_error_without_message(self, handler, fetcher):
        fetcher.routes[SUBSCRIBE_URL] = FetchResponse(502, "Bad Gateway", None)

        response = await handler.handle(post({"email": "a@b.co"}))

        assert response.status_code == 502
        assert json.loads(response.body) == {"error": "Subscription failed"}

    @pytest.mark.asyncio
    async def test_network_error(self, handler, fetcher):
        fetcher.routes[SUBSCRIBE_URL] = network_error()

        response = await handler.handle(post({"email": "a@b.co"}))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error"] == "Server error"
        assert "Connection refused" in body["detail"]

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self, handler, fetcher):
        fetcher.routes[SUBSCRIBE_URL] = FetchResponse(503, "Service Unavailable", {})

        await handler.handle(post({"email": "a@b.co"}))

        assert len(fetcher.calls) == 1
