"""
wrike_search.search.state

Value types handed across the presentation boundary.

Responsibilities:
- `SearchState`: the result list and loading flag owned by an orchestrator.
- `Toast`: a transient user-facing notification.
- `Notifier` / `StateListener`: the callbacks a host supplies to receive both.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from wrike_search.detail.renderer import to_list_item
from wrike_search.wrike.models import WrikeTask


@dataclass(frozen=True, slots=True)
class SearchState:
    """
    Replaced wholesale on every change; `results` keeps server order.
    A fresh orchestrator starts out loading, with no results.
    """

    results: tuple[WrikeTask, ...] = ()
    is_loading: bool = True

    def loading(self) -> SearchState:
        return replace(self, is_loading=True)

    def idle(self) -> SearchState:
        return replace(self, is_loading=False)

    def to_payload(self) -> dict[str, Any]:
        return {
            "is_loading": self.is_loading,
            "results": [t.model_dump(by_alias=True) for t in self.results],
            # Display rows, index-aligned with `results`.
            "items": [to_list_item(t).to_payload() for t in self.results],
        }


class ToastStyle(str, Enum):
    failure = "failure"
    success = "success"


@dataclass(frozen=True, slots=True)
class Toast:
    style: ToastStyle
    title: str
    message: str = ""

    def to_payload(self) -> dict[str, str]:
        return {"style": self.style.value, "title": self.title, "message": self.message}


class Notifier(Protocol):
    async def __call__(self, toast: Toast) -> None: ...


class StateListener(Protocol):
    async def __call__(self, state: SearchState) -> None: ...
