"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from unisearch.config.settings import Settings
from unisearch.models.request import SearchRequest
from unisearch.observability.debug import DebugOptions


class DebugRecorder:
    """Collects (message, data) pairs emitted through a custom debug logger."""

    def __init__(self) -> None:
        self.records: list[tuple[str, Any]] = []

    def __call__(self, message: str, data: Any = None) -> None:
        self.records.append((message, data))

    def messages(self) -> list[str]:
        return [m for m, _ in self.records]

    def find(self, fragment: str) -> list[tuple[str, Any]]:
        return [(m, d) for m, d in self.records if fragment in m]


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        providers={
            "brave": {"api_key": "brave-test-key"},
            "arxiv": {},
            "google": {"enabled": False, "api_key": "g-key", "extra": {"cx": "cx-1"}},
        },
    )


@pytest.fixture
def recorder() -> DebugRecorder:
    return DebugRecorder()


@pytest.fixture
def debug_options(recorder: DebugRecorder) -> DebugOptions:
    """Debug options with every log point enabled, routed to ``recorder``."""
    return DebugOptions(enabled=True, log_requests=True, log_responses=True, logger=recorder)


@pytest.fixture
def simple_request() -> SearchRequest:
    """A plain query request with default options."""
    return SearchRequest(query="python asyncio tutorial", max_results=5)
