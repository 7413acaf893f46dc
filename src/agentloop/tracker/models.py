"""Data models for tracker records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class IssueState(StrEnum):
    """Issue state as reported by the tracker."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Label:
    """Issue label."""

    name: str
    color: str | None = None


@dataclass(frozen=True)
class RawIssue:
    """Issue record as listed by the tracker."""

    id: int
    number: int
    title: str
    state: IssueState
    body: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    labels: tuple[Label, ...] = field(default_factory=tuple)
    is_pull_request: bool = False

    @property
    def is_open(self) -> bool:
        return self.state == IssueState.OPEN

    @property
    def label_names(self) -> list[str]:
        """Lower-cased label names, in tracker order."""
        return [label.name.lower() for label in self.labels]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> RawIssue:
        """Build a RawIssue from a REST issue payload."""
        labels = tuple(
            Label(name=label.get("name") or "", color=label.get("color"))
            for label in data.get("labels") or []
        )
        state = IssueState.CLOSED if data.get("state") == "closed" else IssueState.OPEN
        return cls(
            id=data["id"],
            number=data["number"],
            title=data.get("title") or "",
            state=state,
            body=data.get("body"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            labels=labels,
            is_pull_request=bool(data.get("pull_request")),
        )
