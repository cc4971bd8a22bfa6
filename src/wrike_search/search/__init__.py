"""
wrike_search.search

Search package: query building, search state and the query orchestrator.
"""

from wrike_search.search.orchestrator import QueryOrchestrator
from wrike_search.search.query import build_task_query, perform_search
from wrike_search.search.state import SearchState, Toast, ToastStyle

__all__ = [
    "QueryOrchestrator",
    "SearchState",
    "Toast",
    "ToastStyle",
    "build_task_query",
    "perform_search",
]
