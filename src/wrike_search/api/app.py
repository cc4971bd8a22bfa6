"""
wrike_search.api.app

FastAPI app factory for the Wrike search service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open and close the shared Wrike HTTP client.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from wrike_search import __version__
from wrike_search.api.routers.health import router as health_router
from wrike_search.api.routers.search_ws import router as search_ws_router
from wrike_search.api.routers.tasks import router as tasks_router
from wrike_search.observability.logging import configure_logging, get_logger
from wrike_search.observability.middleware import RequestContextMiddleware
from wrike_search.settings import Settings
from wrike_search.wrike.client import create_http_client

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, wrike_api=settings.wrike_api_base_url)
        if not settings.has_token:
            log.warning("wrike_token_missing")
        async with create_http_client(settings, transport=transport) as http:
            app.state.http = http
            yield
        log.info("shutdown")

    app = FastAPI(
        title="Wrike Search",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(tasks_router)
    app.include_router(search_ws_router)

    return app


# --- Module Notes -----------------------------------------------------------
# `transport` is the seam used by tests to answer Wrike calls in-process.
