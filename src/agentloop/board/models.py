"""View-model types for the kanban board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ColumnId(StrEnum):
    """Kanban column identifiers, in board order."""

    READY = "ready"
    ACTIVE = "active"
    REVIEW = "review"
    DONE = "done"


class Priority(StrEnum):
    """Task priority tier."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Tone(StrEnum):
    """Tag color category."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    SLATE = "slate"


class TagIcon(StrEnum):
    """Tag icon name."""

    BRANCH = "branch"
    CHECK = "check"
    SUMMARY = "summary"
    COMMIT = "commit"


class ActivityIcon(StrEnum):
    """Live activity icon name."""

    SEARCH = "search"
    BOOK = "book"
    CHAT = "chat"


class RunState(StrEnum):
    """Coarse agent status. PAUSED is only ever set by the UI."""

    RUNNING = "Running"
    IDLE = "Idle"
    PAUSED = "Paused"


@dataclass(frozen=True)
class Tag:
    label: str
    tone: Tone
    icon: TagIcon | None = None


@dataclass(frozen=True)
class Task:
    """Card derived from one issue."""

    id: str
    priority: Priority
    group: str
    title: str
    description: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class ColumnMeta:
    title: str
    accent: str


COLUMN_META: dict[ColumnId, ColumnMeta] = {
    ColumnId.READY: ColumnMeta(title="Ready", accent="border-amber-300"),
    ColumnId.ACTIVE: ColumnMeta(title="Active", accent="border-blue-400"),
    ColumnId.REVIEW: ColumnMeta(title="Review", accent="border-purple-400"),
    ColumnId.DONE: ColumnMeta(title="Done", accent="border-emerald-400"),
}


@dataclass
class Column:
    """One kanban bucket with its tasks in source-issue order."""

    id: ColumnId
    title: str
    accent: str
    tasks: list[Task] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.tasks)


@dataclass(frozen=True)
class Activity:
    icon: ActivityIcon
    label: str
    detail: str


@dataclass(frozen=True)
class CurrentTask:
    title: str
    priority: Priority


@dataclass(frozen=True)
class Status:
    """Agent status panel.

    Attributes:
        state: RUNNING when any issue is open, else IDLE.
        running_since: HH:MM:SS creation time of the oldest open issue.
        last_update: HH:MM:SS update time of the most recently updated issue.
    """

    state: RunState
    running_since: str | None = None
    last_update: str | None = None


@dataclass(frozen=True)
class Logs:
    preview: str
    expanded: str


@dataclass
class BoardView:
    """Aggregate dashboard payload."""

    columns: list[Column]
    activities: list[Activity]
    current_task: CurrentTask
    status: Status
    log_preview: str
    log_expanded: str
    system_count: int
