"""
tests.conftest

Shared fixtures for the test suite.
"""

from __future__ import annotations

import pytest

from tests.fakes import FakeWrike, Recorder
from wrike_search.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", wrike_api_token="test-token", log_level="WARNING")


@pytest.fixture
def fake_wrike() -> FakeWrike:
    return FakeWrike()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
