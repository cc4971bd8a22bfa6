"""
wrike_search.wrike.client

HTTP client boundary used by the search layer to call the Wrike REST API.

Responsibilities:
- Attach the bearer token to every call.
- Map HTTP/transport/shape failures into `WrikeSearchError` subtypes.
- Resolve the current user (Wrike has no "who am I" endpoint: list contacts, keep `me`).
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from wrike_search.errors import (
    MalformedResponseError,
    WrikeApiError,
    WrikeTransportError,
)
from wrike_search.observability.logging import get_logger
from wrike_search.settings import Settings
from wrike_search.wrike.models import WrikeTask, WrikeUser

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def create_http_client(
    settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    # One pooled client per process; `transport` lets tests route calls in-memory.
    return httpx.AsyncClient(
        base_url=settings.wrike_api_base_url,
        timeout=settings.http_timeout_seconds,
        transport=transport,
    )


class WrikeApiClient:
    """
    Thin async wrapper over `httpx.AsyncClient`.

    The `http` client must already be configured with the Wrike API base url
    (see `create_http_client`); endpoints are passed as relative paths.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    def _authz(self) -> dict[str, str]:
        return {"Authorization": f"bearer {self._settings.wrike_api_token}"}

    async def get_data(
        self, endpoint: str, params: dict[str, str] | None = None
    ) -> list[dict[str, Any]]:
        """
        GET `<base>/<endpoint>` and return the `data` list of the response.

        Raises `WrikeApiError` for a non-success status or an `errorDescription`
        body, `WrikeTransportError` when no usable response arrives (network,
        redirect or body decoding failures) and
        `MalformedResponseError` when a successful body has no `data` list.
        """

        log.info("wrike_request", endpoint=endpoint)
        try:
            r = await self._http.get(f"/{endpoint}", params=params, headers=self._authz())
        except httpx.RequestError as e:
            raise WrikeTransportError(str(e) or type(e).__name__) from e

        try:
            body: Any = r.json()
        except ValueError:
            body = None

        if not r.is_success or (isinstance(body, dict) and "errorDescription" in body):
            raise WrikeApiError(_error_message(body, r), status_code=r.status_code)

        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise MalformedResponseError(f"Unexpected response from Wrike {endpoint}")
        return body["data"]

    async def contacts(self) -> list[WrikeUser]:
        data = await self.get_data("contacts")
        return _parse(WrikeUser, data, endpoint="contacts")

    async def current_user(self) -> WrikeUser | None:
        # Uncached: every call costs one contacts round trip.
        for user in await self.contacts():
            if user.me:
                return user
        return None

    async def tasks(self, params: dict[str, str]) -> list[WrikeTask]:
        data = await self.get_data("tasks", params)
        return _parse(WrikeTask, data, endpoint="tasks")


def _error_message(body: Any, response: httpx.Response) -> str:
    if isinstance(body, dict):
        for key in ("errorDescription", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return response.reason_phrase or f"HTTP {response.status_code}"


def _parse(model: type[ModelT], data: list[Any], *, endpoint: str) -> list[ModelT]:
    try:
        return [model.model_validate(item) for item in data]
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected {endpoint} record from Wrike") from e


# --- Module Notes -----------------------------------------------------------
# Records that fail validation surface as `MalformedResponseError` rather than
# `pydantic.ValidationError`, keeping the error hierarchy closed for callers.
