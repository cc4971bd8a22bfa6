"""
tests.test_renderer

Detail view and list-row rendering.
"""

from __future__ import annotations

from tests.fakes import task_json
from wrike_search.detail.renderer import (
    DEFAULT_STATUS_COLOR,
    OPEN_LINK_TEXT,
    render_task_detail,
    status_color,
    to_list_item,
)
from wrike_search.wrike.models import WrikeTask


def test_detail_markdown_converts_the_description() -> None:
    task = WrikeTask.model_validate(
        task_json(
            "T1",
            "Release plan",
            status="Completed",
            description="<h2>Scope</h2><p>Ship <b>it</b></p>",
        )
    )

    detail = render_task_detail(task)

    assert detail.navigation_title == "Release plan"
    assert detail.markdown.startswith("# Release plan\n\n## Description\n")
    assert "## Scope" in detail.markdown
    assert "Ship **it**" in detail.markdown
    assert "<b>" not in detail.markdown
    assert detail.status == "Completed"
    assert detail.status_color == status_color("Completed")
    assert detail.link_url == "https://www.wrike.com/open.htm?id=T1"
    assert detail.link_text == OPEN_LINK_TEXT


def test_empty_description_renders_an_empty_section() -> None:
    task = WrikeTask(id="T2", title="No body")
    assert render_task_detail(task).markdown == "# No body\n\n## Description\n\n"


def test_status_colors() -> None:
    assert status_color("Active") == DEFAULT_STATUS_COLOR
    assert status_color("Cancelled") != DEFAULT_STATUS_COLOR
    assert status_color("In Review") == DEFAULT_STATUS_COLOR


def test_list_item_offers_the_clipboard_texts() -> None:
    item = to_list_item(WrikeTask.model_validate(task_json("T3", "Book venue")))

    assert item.title == "Book venue"
    assert item.subtitle == "Book venue details"
    assert item.accessory == "Active"
    assert item.copy_title_permalink == "Book venue - https://www.wrike.com/open.htm?id=T3"
    assert item.copy_permalink == item.permalink
