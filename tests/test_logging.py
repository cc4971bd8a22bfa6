"""
tests.test_logging

Credentials never reach rendered log lines.
"""

from __future__ import annotations

from wrike_search.observability.logging import _redact_secrets


def test_secret_keys_are_redacted() -> None:
    event = _redact_secrets(
        None,
        "info",
        {"event": "wrike_request", "endpoint": "tasks", "authorization": "bearer abc"},
    )
    assert event == {"event": "wrike_request", "endpoint": "tasks", "authorization": "***"}
