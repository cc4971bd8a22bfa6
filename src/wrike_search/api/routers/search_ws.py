"""
wrike_search.api.routers.search_ws

WebSocket search session: the launcher-panel side of the presentation boundary.

Responsibilities:
- Own one `QueryOrchestrator` per connection and start the "my active tasks" search
  on connect.
- Translate client frames (`search`, `detail`) into orchestrator calls.
- Push `state`, `toast` and `detail` frames back; cancel the live search on disconnect.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from wrike_search.api.deps import settings_dep, wrike_client_dep
from wrike_search.detail.renderer import render_task_detail
from wrike_search.observability.logging import get_logger
from wrike_search.search.orchestrator import QueryOrchestrator
from wrike_search.search.state import SearchState, Toast, ToastStyle
from wrike_search.settings import Settings
from wrike_search.wrike.client import WrikeApiClient

router = APIRouter(prefix="/v1/ws", tags=["search"])

log = get_logger(__name__)

UNSUPPORTED_TITLE = "Unsupported message"


class _SearchSession:
    """Frames in, frames out; stops sending once either side has closed."""

    def __init__(self, websocket: WebSocket) -> None:
        self._ws = websocket

    @property
    def open(self) -> bool:
        return (
            self._ws.client_state == WebSocketState.CONNECTED
            and self._ws.application_state == WebSocketState.CONNECTED
        )

    async def send(self, frame_type: str, payload: dict[str, Any]) -> None:
        if self.open:
            await self._ws.send_json({"type": frame_type, **payload})

    async def on_state(self, state: SearchState) -> None:
        await self.send("state", state.to_payload())

    async def notify(self, toast: Toast) -> None:
        await self.send("toast", toast.to_payload())


@router.websocket("/search")
async def search_session(
    websocket: WebSocket,
    client: WrikeApiClient = Depends(wrike_client_dep),
    settings: Settings = Depends(settings_dep),
) -> None:
    await websocket.accept()
    session = _SearchSession(websocket)
    orchestrator = QueryOrchestrator(
        client=client,
        on_state=session.on_state,
        notify=session.notify,
        limit=settings.default_task_limit,
    )
    log.info("ws_connected")

    try:
        await orchestrator.search("")
        while True:
            raw = await websocket.receive_text()
            try:
                frame = json.loads(raw)
            except ValueError:
                await session.notify(
                    Toast(
                        style=ToastStyle.failure,
                        title=UNSUPPORTED_TITLE,
                        message="Frame is not valid JSON",
                    )
                )
                continue
            await _dispatch(frame, orchestrator=orchestrator, session=session)
    except WebSocketDisconnect:
        log.info("ws_disconnected")
    finally:
        await orchestrator.cancel()


async def _dispatch(
    frame: Any, *, orchestrator: QueryOrchestrator, session: _SearchSession
) -> None:
    frame_type = frame.get("type") if isinstance(frame, dict) else None

    if frame_type == "search":
        text = frame.get("text")
        await orchestrator.search(text if isinstance(text, str) else "")
        return

    if frame_type == "detail":
        task_id = frame.get("task_id")
        task = next((t for t in orchestrator.state.results if t.id == task_id), None)
        if task is None:
            await session.notify(
                Toast(
                    style=ToastStyle.failure,
                    title="Task not found",
                    message=f"No task {task_id!r} in the current results",
                )
            )
            return
        await session.send("detail", render_task_detail(task).to_payload())
        return

    await session.notify(
        Toast(
            style=ToastStyle.failure,
            title=UNSUPPORTED_TITLE,
            message=f"Unknown frame type {frame_type!r}",
        )
    )
