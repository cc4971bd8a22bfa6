"""
wrike_search.search.query

Task query construction and the single search round trip.

Responsibilities:
- Build the `GET /tasks` parameters for the "my active tasks" view (empty input) and
  for title search (non-empty input).
- Run one search: resolve the current user, then fetch tasks.
"""

from __future__ import annotations

from wrike_search.errors import CurrentUserNotFoundError
from wrike_search.wrike.client import WrikeApiClient
from wrike_search.wrike.models import WrikeTask

DEFAULT_TASK_LIMIT = 100


def build_task_query(
    search_text: str,
    *,
    current_user_id: str | None,
    limit: int = DEFAULT_TASK_LIMIT,
) -> dict[str, str]:
    """
    Empty text lists the caller's active tasks, most recently updated first, capped at
    `limit`. Any other text (whitespace included) is a title search ordered by status,
    uncapped, and never filtered by author or status.
    """

    params: dict[str, str] = {"fields": "[description]"}

    if len(search_text) == 0:
        if not current_user_id:
            raise CurrentUserNotFoundError("Could not resolve the current Wrike user")
        params["authors"] = f"[{current_user_id}]"
        params["status"] = "Active"
        params["sortField"] = "UpdatedDate"
        params["sortOrder"] = "Desc"
        params["limit"] = str(limit)
    else:
        params["title"] = search_text
        params["sortField"] = "status"
        params["sortOrder"] = "Asc"

    return params


async def perform_search(
    client: WrikeApiClient,
    search_text: str,
    *,
    limit: int = DEFAULT_TASK_LIMIT,
) -> list[WrikeTask]:
    # The contacts lookup runs for every search, title searches included.
    current_user = await client.current_user()
    params = build_task_query(
        search_text,
        current_user_id=current_user.id if current_user else None,
        limit=limit,
    )
    return await client.tasks(params)
