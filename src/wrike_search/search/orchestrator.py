"""
wrike_search.search.orchestrator

Query orchestrator: turns a stream of search-text changes into exactly one live
task-list request and a single owned `SearchState`.

Responsibilities:
- Cancel the in-flight search before starting a new one (latest search wins).
- Publish loading/result state to the host and report failures as toasts.
- Keep prior results on failure; never report cancellation.
"""

from __future__ import annotations

import asyncio
import contextlib

from wrike_search.errors import WrikeSearchError
from wrike_search.observability.logging import get_logger
from wrike_search.search.query import DEFAULT_TASK_LIMIT, perform_search
from wrike_search.search.state import (
    Notifier,
    SearchState,
    StateListener,
    Toast,
    ToastStyle,
)
from wrike_search.wrike.client import WrikeApiClient

log = get_logger(__name__)

SEARCH_FAILED_TITLE = "Could not perform search"


async def _ignore_state(state: SearchState) -> None:
    return None


async def _ignore_toast(toast: Toast) -> None:
    return None


class QueryOrchestrator:
    """
    One instance per search session (one launcher panel / one WebSocket).

    `search()` is the only entry point that starts work. State is written only by
    the run whose generation is still current, so a stale continuation can never
    overwrite a newer result even if it slipped past cancellation.
    """

    def __init__(
        self,
        *,
        client: WrikeApiClient,
        on_state: StateListener | None = None,
        notify: Notifier | None = None,
        limit: int = DEFAULT_TASK_LIMIT,
    ) -> None:
        self._client = client
        self._on_state = on_state or _ignore_state
        self._notify = notify or _ignore_toast
        self._limit = limit

        self._state = SearchState()
        self._generation = 0
        self._inflight: asyncio.Task[None] | None = None

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    async def search(self, search_text: str) -> asyncio.Task[None]:
        """
        Supersede any running search and start a new one.

        Returns the task running the search; awaiting it raises
        `asyncio.CancelledError` if a later search (or `cancel()`) superseded it.
        """

        self._cancel_inflight()
        self._generation += 1
        generation = self._generation

        await self._publish(self._state.loading())
        task = asyncio.create_task(
            self._run(search_text, generation),
            name=f"wrike-search-{generation}",
        )
        self._inflight = task
        return task

    async def cancel(self) -> None:
        """
        Teardown: stop the in-flight search and clear the loading flag.
        Results are left as they were and no notification is emitted.
        """

        task = self._inflight
        self._cancel_inflight()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        # A task cancelled before its first step never ran its own cleanup.
        if self._state.is_loading:
            await self._publish(self._state.idle())

    def _cancel_inflight(self) -> None:
        task, self._inflight = self._inflight, None
        if task is not None and not task.done():
            task.cancel()

    async def _run(self, search_text: str, generation: int) -> None:
        log.info("search_started", generation=generation, empty=len(search_text) == 0)
        try:
            results = await perform_search(self._client, search_text, limit=self._limit)
        except asyncio.CancelledError:
            log.info("search_cancelled", generation=generation)
            raise
        except WrikeSearchError as e:
            if not self._is_current(generation):
                return
            log.error("search_failed", generation=generation, error=str(e))
            await self._publish(self._state.idle())
            await self._notify(
                Toast(style=ToastStyle.failure, title=SEARCH_FAILED_TITLE, message=str(e))
            )
            return

        if not self._is_current(generation):
            return
        log.info("search_completed", generation=generation, count=len(results))
        await self._publish(SearchState(results=tuple(results), is_loading=False))

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _publish(self, state: SearchState) -> None:
        self._state = state
        await self._on_state(state)


# --- Module Notes -----------------------------------------------------------
# Cancellation is the asyncio kind: `Task.cancel()` interrupts the pending httpx call
# at its current await point, which also releases the underlying connection.
