"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from pg_finder.client import PropertyFeed
from pg_finder.config import Settings
from pg_finder.logging import configure_logging, get_logger
from pg_finder.session import ListingSession

logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


def create_app(
    settings: Settings | None = None,
    *,
    feed: PropertyFeed | None = None,
    load_on_startup: bool = True,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Loaded from env if not provided.
        feed: Listings feed. Built from ``settings`` if not provided.
        load_on_startup: Whether to fetch the first snapshot during startup.
    """
    if settings is None:
        settings = Settings()
    if feed is None:
        feed = PropertyFeed(settings.properties_url, timeout=settings.request_timeout_seconds)

    configure_logging(json_output=settings.log_json, level=logging.INFO)

    session = ListingSession()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.settings = settings
        app.state.feed = feed
        app.state.session = session

        if load_on_startup:
            await session.refresh(feed)
        logger.info(
            "web_server_started",
            listings_url=feed.url,
            total_properties=len(session.properties),
        )

        yield

        logger.info("web_server_stopped")

    app = FastAPI(title="PG Finder", lifespan=lifespan)

    app.add_middleware(SecurityHeadersMiddleware)

    from pg_finder.web.routes import router

    app.include_router(router)

    return app
