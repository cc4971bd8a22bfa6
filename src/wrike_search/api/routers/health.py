"""
wrike_search.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the service cannot search without a token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from wrike_search.api.deps import settings_dep
from wrike_search.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    if not settings.has_token:
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Wrike API token is not configured"
        )
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Readiness does not call Wrike: a probe must not spend API quota.
