"""
wrike_search.detail.renderer

Task detail and list-row rendering.

Responsibilities:
- Convert a task's HTML description to markdown (via `markdownify`).
- Map a Wrike status label to a tag colour from a static table.
- Build the list row, including the clipboard texts offered for each task.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from markdownify import ATX, markdownify

from wrike_search.wrike.models import WrikeTask

DEFAULT_STATUS_COLOR = "#3cb043"

STATUS_COLORS: dict[str, str] = {
    "Active": DEFAULT_STATUS_COLOR,
    "Completed": "#2f80ed",
    "Deferred": "#f2994a",
    "Cancelled": "#eb5757",
}

OPEN_LINK_TEXT = "Open in Wrike"


@dataclass(frozen=True, slots=True)
class TaskDetail:
    navigation_title: str
    markdown: str
    status: str
    status_color: str
    link_url: str
    link_text: str = OPEN_LINK_TEXT

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TaskListItem:
    id: str
    title: str
    subtitle: str
    accessory: str
    permalink: str
    copy_title_permalink: str
    copy_permalink: str

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


def description_markdown(html: str) -> str:
    if not html:
        return ""
    return markdownify(html, heading_style=ATX).strip()


def render_task_detail(task: WrikeTask) -> TaskDetail:
    markdown = f"# {task.title}\n\n## Description\n{description_markdown(task.description)}\n"
    return TaskDetail(
        navigation_title=task.title,
        markdown=markdown,
        status=task.status,
        status_color=status_color(task.status),
        link_url=task.permalink,
    )


def to_list_item(task: WrikeTask) -> TaskListItem:
    return TaskListItem(
        id=task.id,
        title=task.title,
        subtitle=task.brief_description,
        accessory=task.status,
        permalink=task.permalink,
        copy_title_permalink=f"{task.title} - {task.permalink}",
        copy_permalink=task.permalink,
    )


# --- Module Notes -----------------------------------------------------------
# Wrike's built-in status groups are Active/Completed/Deferred/Cancelled; custom
# workflow statuses fall back to the default colour.
