"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from typing import Any

import pytest

from agentloop.tracker import RawIssue


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the real GitHub API (local only)")


def build_issue_payload(
    number: int,
    title: str = "",
    state: str = "open",
    labels: list[str] | None = None,
    body: str | None = None,
    created_at: str = "2026-01-10T08:00:00Z",
    updated_at: str = "2026-01-12T09:30:00Z",
    **extra: Any,
) -> dict[str, Any]:
    """Build an issue payload shaped like the GitHub REST API."""
    payload: dict[str, Any] = {
        "id": 1000 + number,
        "number": number,
        "title": title or f"Issue {number}",
        "body": body,
        "state": state,
        "created_at": created_at,
        "updated_at": updated_at,
        "labels": [{"name": name, "color": "ededed"} for name in labels or []],
    }
    payload.update(extra)
    return payload


@pytest.fixture
def make_issue() -> Callable[..., RawIssue]:
    """Factory for RawIssue objects built from REST-shaped payloads."""

    def factory(number: int, **kwargs: Any) -> RawIssue:
        return RawIssue.from_api(build_issue_payload(number, **kwargs))

    return factory


@pytest.fixture
def issue_payload() -> Callable[..., dict[str, Any]]:
    """Factory for REST-shaped issue payloads."""
    return build_issue_payload
