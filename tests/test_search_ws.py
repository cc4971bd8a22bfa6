"""
tests.test_search_ws

WebSocket search session: initial search on connect, search/detail frames, toasts.
"""

from __future__ import annotations

import time

import httpx
from fastapi.testclient import TestClient

from tests.fakes import MY_TASKS, TITLE_TASKS, FakeWrike
from wrike_search.api.app import create_app
from wrike_search.settings import Settings


def _ids(frame: dict) -> list[str]:
    return [t["id"] for t in frame["results"]]


def test_session_searches_and_renders_details(settings: Settings, fake_wrike: FakeWrike) -> None:
    app = create_app(settings=settings, transport=fake_wrike.transport())

    with TestClient(app) as client, client.websocket_connect("/v1/ws/search") as ws:
        # Connecting starts the "my active tasks" search.
        assert ws.receive_json() == {
            "type": "state",
            "is_loading": True,
            "results": [],
            "items": [],
        }
        frame = ws.receive_json()
        assert frame["type"] == "state"
        assert frame["is_loading"] is False
        assert _ids(frame) == [t["id"] for t in MY_TASKS]
        assert frame["results"][0]["briefDescription"] == MY_TASKS[0]["briefDescription"]
        item = frame["items"][0]
        assert item["id"] == MY_TASKS[0]["id"]
        assert item["copy_title_permalink"] == f"{MY_TASKS[0]['title']} - {MY_TASKS[0]['permalink']}"
        assert item["copy_permalink"] == MY_TASKS[0]["permalink"]

        ws.send_json({"type": "detail", "task_id": MY_TASKS[0]["id"]})
        detail = ws.receive_json()
        assert detail["type"] == "detail"
        assert detail["markdown"].startswith(f"# {MY_TASKS[0]['title']}\n")
        assert detail["link_url"] == MY_TASKS[0]["permalink"]

        ws.send_json({"type": "search", "text": "release plan"})
        loading = ws.receive_json()
        # Previous results stay visible while the new search runs.
        assert loading["is_loading"] is True
        assert _ids(loading) == [t["id"] for t in MY_TASKS]
        done = ws.receive_json()
        assert done["is_loading"] is False
        assert _ids(done) == [t["id"] for t in TITLE_TASKS["release plan"]]


def test_session_reports_failures_as_toasts(settings: Settings, fake_wrike: FakeWrike) -> None:
    fake_wrike.tasks_response = httpx.Response(401, json={"errorDescription": "Invalid token"})
    app = create_app(settings=settings, transport=fake_wrike.transport())

    with TestClient(app) as client, client.websocket_connect("/v1/ws/search") as ws:
        assert ws.receive_json()["is_loading"] is True
        idle = ws.receive_json()
        assert idle == {"type": "state", "is_loading": False, "results": [], "items": []}
        toast = ws.receive_json()
        assert toast == {
            "type": "toast",
            "style": "failure",
            "title": "Could not perform search",
            "message": "Invalid token",
        }

        ws.send_json({"type": "detail", "task_id": "missing"})
        assert ws.receive_json()["title"] == "Task not found"

        ws.send_json({"type": "bogus"})
        assert ws.receive_json()["title"] == "Unsupported message"


def test_session_survives_a_frame_that_is_not_json(
    settings: Settings, fake_wrike: FakeWrike
) -> None:
    app = create_app(settings=settings, transport=fake_wrike.transport())

    with TestClient(app) as client, client.websocket_connect("/v1/ws/search") as ws:
        ws.receive_json()
        ws.receive_json()

        ws.send_text("not json")
        toast = ws.receive_json()
        assert toast["type"] == "toast"
        assert toast["style"] == "failure"
        assert toast["title"] == "Unsupported message"

        ws.send_json({"type": "search", "text": "release plan"})
        assert ws.receive_json()["is_loading"] is True
        done = ws.receive_json()
        assert _ids(done) == [t["id"] for t in TITLE_TASKS["release plan"]]


def test_disconnect_cancels_the_running_search(settings: Settings) -> None:
    fake_wrike = FakeWrike(hang_titles={"slow"})
    app = create_app(settings=settings, transport=fake_wrike.transport())

    with TestClient(app) as client:
        with client.websocket_connect("/v1/ws/search") as ws:
            ws.receive_json()
            ws.receive_json()

            ws.send_json({"type": "search", "text": "slow"})
            assert ws.receive_json()["is_loading"] is True

            # Wait until the request is actually in flight on the server loop.
            deadline = time.monotonic() + 5
            while not fake_wrike.hanging.is_set() and time.monotonic() < deadline:
                time.sleep(0.01)
            assert fake_wrike.hanging.is_set()

        # Leaving the app lifespan waits for the session handler to finish.

    assert fake_wrike.cancelled == ["slow"]
