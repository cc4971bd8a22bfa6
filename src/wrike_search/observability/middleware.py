"""
wrike_search.observability.middleware

ASGI middleware for connection-scoped logging context.

Responsibilities:
- Generate/propagate request IDs for HTTP requests and WebSocket sessions.
- Bind connection metadata into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class RequestContextMiddleware:
    """
    Pure ASGI middleware: unlike `BaseHTTPMiddleware` it also sees `websocket`
    scopes, so a search session logs under the id of the socket that opened it.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path", ""),
            scope_type=scope["type"],
        )

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers["x-request-id"] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            # Avoid leaking context across connections under async concurrency.
            structlog.contextvars.clear_contextvars()
