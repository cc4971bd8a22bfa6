"""
tests.test_query

Parameter construction for the two search modes.
"""

from __future__ import annotations

import pytest

from wrike_search.errors import CurrentUserNotFoundError
from wrike_search.search.query import build_task_query


def test_empty_text_lists_my_active_tasks() -> None:
    params = build_task_query("", current_user_id="KUAAAME1")
    assert params == {
        "fields": "[description]",
        "authors": "[KUAAAME1]",
        "status": "Active",
        "sortField": "UpdatedDate",
        "sortOrder": "Desc",
        "limit": "100",
    }
    assert next(iter(params)) == "fields"


def test_title_search_has_no_author_or_status_filter() -> None:
    params = build_task_query("release plan", current_user_id="KUAAAME1")
    assert params == {
        "fields": "[description]",
        "title": "release plan",
        "sortField": "status",
        "sortOrder": "Asc",
    }


@pytest.mark.parametrize("text", [" ", "a", "[x]"])
def test_any_non_empty_text_is_a_title_search(text: str) -> None:
    params = build_task_query(text, current_user_id=None)
    assert params["title"] == text
    assert "authors" not in params
    assert "status" not in params
    assert "limit" not in params


def test_limit_is_configurable() -> None:
    assert build_task_query("", current_user_id="U1", limit=25)["limit"] == "25"


def test_empty_text_requires_a_current_user() -> None:
    with pytest.raises(CurrentUserNotFoundError):
        build_task_query("", current_user_id=None)


def test_params_are_built_fresh_per_call() -> None:
    first = build_task_query("a", current_user_id="U1")
    first["title"] = "mutated"
    assert build_task_query("a", current_user_id="U1")["title"] == "a"
