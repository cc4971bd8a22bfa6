"""
wrike_search.detail

Presentation records derived from a task: list rows and the detail view.
"""

from wrike_search.detail.renderer import (
    TaskDetail,
    TaskListItem,
    render_task_detail,
    status_color,
    to_list_item,
)

__all__ = ["TaskDetail", "TaskListItem", "render_task_detail", "status_color", "to_list_item"]
