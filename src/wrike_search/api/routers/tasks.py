"""
wrike_search.api.routers.tasks

One-shot task search endpoint.

Responsibilities:
- Run a single search (no session, nothing to cancel) and return list rows.
- Map Wrike failures to 502 with the failure message.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from starlette.status import HTTP_502_BAD_GATEWAY

from wrike_search.api.deps import settings_dep, wrike_client_dep
from wrike_search.detail.renderer import to_list_item
from wrike_search.errors import WrikeSearchError
from wrike_search.observability.logging import get_logger
from wrike_search.search.query import perform_search
from wrike_search.settings import Settings
from wrike_search.wrike.client import WrikeApiClient

router = APIRouter(prefix="/v1/tasks", tags=["tasks"])

log = get_logger(__name__)


class TaskSearchResponse(BaseModel):
    count: int
    results: list[dict[str, Any]]


@router.get("/search", response_model=TaskSearchResponse)
async def search_tasks(
    q: str = Query(default="", description="Title text; empty lists your active tasks"),
    client: WrikeApiClient = Depends(wrike_client_dep),
    settings: Settings = Depends(settings_dep),
) -> TaskSearchResponse:
    try:
        tasks = await perform_search(client, q, limit=settings.default_task_limit)
    except WrikeSearchError as e:
        log.error("search_failed", error=str(e))
        raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    return TaskSearchResponse(
        count=len(tasks),
        results=[to_list_item(t).to_payload() for t in tasks],
    )
