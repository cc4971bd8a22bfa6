"""
wrike_search.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the Wrike client.
- Encapsulate app.state access patterns (settings/http client).
"""

from __future__ import annotations

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from wrike_search.settings import Settings
from wrike_search.wrike.client import WrikeApiClient


# `HTTPConnection` (not `Request`) so the same dependencies serve WebSocket routes.
def settings_dep(conn: HTTPConnection) -> Settings:
    return conn.app.state.settings  # type: ignore[attr-defined]


def http_client_dep(conn: HTTPConnection) -> httpx.AsyncClient:
    # The client is created on app startup in `wrike_search.api.app.create_app`.
    return conn.app.state.http  # type: ignore[attr-defined]


def wrike_client_dep(
    settings: Settings = Depends(settings_dep),
    http: httpx.AsyncClient = Depends(http_client_dep),
) -> WrikeApiClient:
    return WrikeApiClient(settings=settings, http=http)
