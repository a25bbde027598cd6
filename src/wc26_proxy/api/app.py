from typing import Any

from fastapi import FastAPI, Request, Response

from wc26_proxy.api.dependencies import MatchHandlerDep, SubscriptionHandlerDep, make_lifespan
from wc26_proxy.config import Settings, settings
from wc26_proxy.dto import HandlerRequest, HandlerResponse
from wc26_proxy.logging_config import setup_logging
from wc26_proxy.protocols import HttpFetcher

# Handlers answer every method themselves (405, preflight)
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def to_handler_request(request: Request) -> HandlerRequest:
    """Convert a Starlette request into a HandlerRequest."""
    raw = await request.body()
    return HandlerRequest(
        method=request.method,
        body=raw.decode("utf-8", errors="replace") if raw else None,
    )


def to_response(result: HandlerResponse) -> Response:
    """Convert a HandlerResponse into a Starlette response."""
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)


def create_app(app_settings: Settings | None = None, fetcher: HttpFetcher | None = None) -> FastAPI:
    """Build the FastAPI application.

    No CORSMiddleware: it would answer preflight requests before they
    reach the subscription handler, which owns its CORS headers.

    Args:
        app_settings: Settings to use. Defaults to the global settings.
        fetcher: Outbound transport. Defaults to an HttpxFetcher.

    Returns:
        The configured FastAPI app
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="WC26 Proxy API",
        description="World Cup 2026 match data and newsletter subscription proxy",
        version="0.1.0",
        lifespan=make_lifespan(app_settings, fetcher),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "WC26 Proxy API",
            "version": "0.1.0",
            "description": "World Cup 2026 match data and newsletter subscription proxy",
            "endpoints": {
                "matches": "/matches",
                "subscribe": "/subscribe",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(handler: MatchHandlerDep, subscription: SubscriptionHandlerDep) -> dict[str, Any]:
        """Health check endpoint. Never calls upstream."""
        return {
            "status": "healthy",
            "match_cache": handler.cache_status(),
            "subscription_configured": subscription.is_configured,
        }

    @app.api_route("/matches", methods=ALL_METHODS)
    async def matches(request: Request, handler: MatchHandlerDep) -> Response:
        """Fixtures and standings, served from cache when fresh."""
        return to_response(await handler.handle(await to_handler_request(request)))

    @app.api_route("/subscribe", methods=ALL_METHODS)
    async def subscribe(request: Request, handler: SubscriptionHandlerDep) -> Response:
        """Newsletter subscription (POST, OPTIONS preflight)."""
        return to_response(await handler.handle(await to_handler_request(request)))

    return app


setup_logging(settings.log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wc26_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
