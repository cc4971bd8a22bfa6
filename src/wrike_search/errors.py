"""
wrike_search.errors

Domain-specific exceptions raised by the Wrike client and the search layer.

Responsibilities:
- Give every non-cancellation failure a common base (`WrikeSearchError`) so callers
  can report it without catching unrelated bugs.
- Carry the server-provided message for API-reported failures.
"""

from __future__ import annotations


class WrikeSearchError(Exception):
    """Base class for failures that are reported to the user and are not fatal."""


class WrikeApiError(WrikeSearchError):
    """
    Wrike answered with a non-success status or an `errorDescription` body.
    `str(err)` is the server message (or the HTTP status text as fallback).
    """

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WrikeTransportError(WrikeSearchError):
    """No usable response: DNS, connect, timeout, redirect loop or undecodable body."""


class MalformedResponseError(WrikeSearchError):
    """The response was successful but not shaped like `{"data": [...]}`."""


class CurrentUserNotFoundError(WrikeSearchError):
    """No contact is flagged as the authenticated caller."""


# --- Module Notes -----------------------------------------------------------
# `asyncio.CancelledError` is not part of this hierarchy: a superseded search is not a
# failure and must never be wrapped into one of these types.
