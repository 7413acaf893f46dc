"""Board assembler - aggregates classified issues into the dashboard view."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime

from agentloop.board.classifier import build_task, place_issue
from agentloop.board.models import (
    COLUMN_META,
    Activity,
    ActivityIcon,
    BoardView,
    Column,
    ColumnId,
    CurrentTask,
    Logs,
    Priority,
    RunState,
    Status,
    Task,
)
from agentloop.logging import get_logger
from agentloop.tracker.models import RawIssue

logger = get_logger("board")

ACTIVE_ISSUE_PATTERN = re.compile(r"Issue #(\d+)", re.IGNORECASE)

LOG_PREVIEW_LINES = 12
LOG_EXPANDED_LINES = 120
LOG_FALLBACK_ISSUES = 6
NO_PROGRESS = "No progress yet."


def extract_active_issue_number(progress_text: str) -> int | None:
    """Return the issue number of the last "Issue #N" reference in the log."""
    matches = ACTIVE_ISSUE_PATTERN.findall(progress_text)
    if not matches:
        return None
    try:
        return int(matches[-1])
    except ValueError:
        return None


def format_time(value: str | None) -> str | None:
    """Format an ISO-8601 timestamp as local 24-hour HH:MM:SS."""
    if not value:
        return None
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Unparseable timestamp: %r", value)
        return None
    return moment.astimezone().strftime("%H:%M:%S")


def build_columns(
    issues: Sequence[RawIssue], active_issue_number: int | None = None
) -> list[Column]:
    """Partition issues into the four columns, keeping input order."""
    columns = {
        column_id: Column(id=column_id, title=meta.title, accent=meta.accent)
        for column_id, meta in COLUMN_META.items()
    }
    for issue in issues:
        columns[place_issue(issue, active_issue_number)].tasks.append(build_task(issue))
    return list(columns.values())


def _first_task(columns: Sequence[Column], column_id: ColumnId) -> Task | None:
    for column in columns:
        if column.id == column_id and column.tasks:
            return column.tasks[0]
    return None


def build_live_activity(columns: Sequence[Column], issues: Sequence[RawIssue]) -> list[Activity]:
    """Produce the single live activity entry."""
    active_task = _first_task(columns, ColumnId.ACTIVE)
    if active_task is not None:
        return [Activity(icon=ActivityIcon.SEARCH, label="Working", detail=active_task.title)]

    latest = next((issue for issue in issues if issue.is_open), None)
    if latest is None and issues:
        latest = issues[0]
    if latest is None:
        return [Activity(icon=ActivityIcon.CHAT, label="Idle", detail="No active tasks")]

    return [
        Activity(
            icon=ActivityIcon.BOOK,
            label="Queued" if latest.is_open else "Recently closed",
            detail=f"#{latest.number} {latest.title}",
        )
    ]


def build_current_task(columns: Sequence[Column]) -> CurrentTask:
    task = _first_task(columns, ColumnId.ACTIVE) or _first_task(columns, ColumnId.READY)
    if task is None:
        task = next((column.tasks[0] for column in columns if column.tasks), None)
    if task is None:
        return CurrentTask(title="No open tasks", priority=Priority.LOW)
    return CurrentTask(title=task.title, priority=task.priority)


def build_status(issues: Sequence[RawIssue]) -> Status:
    """Derive the status panel.

    `issues` must be in the tracker's listing order (newest-updated first):
    the last open issue is taken as the oldest, and the first issue as the
    latest update.
    """
    open_issues = [issue for issue in issues if issue.is_open]
    oldest_open = open_issues[-1].created_at if open_issues else None
    latest_update = issues[0].updated_at if issues else None

    return Status(
        state=RunState.RUNNING if open_issues else RunState.IDLE,
        running_since=format_time(oldest_open),
        last_update=format_time(latest_update),
    )


def build_logs(progress_text: str, issues: Sequence[RawIssue]) -> Logs:
    """Log preview and expanded text, falling back to recent issues."""
    trimmed = progress_text.strip()
    if trimmed:
        lines = trimmed.split("\n")
        return Logs(
            preview="\n".join(lines[:LOG_PREVIEW_LINES]),
            expanded="\n".join(lines[:LOG_EXPANDED_LINES]),
        )

    fallback = "\n".join(
        f"#{issue.number} {issue.title}" for issue in issues[:LOG_FALLBACK_ISSUES]
    )
    text = fallback or NO_PROGRESS
    return Logs(preview=text, expanded=text)


def assemble_board(issues: Sequence[RawIssue], progress_text: str = "") -> BoardView:
    """Build the full dashboard view.

    Args:
        issues: Tracker issues with pull requests removed, newest-updated first.
        progress_text: Raw progress log, empty when unavailable.

    Returns:
        The aggregate BoardView.
    """
    active_issue_number = extract_active_issue_number(progress_text)
    columns = build_columns(issues, active_issue_number)
    logs = build_logs(progress_text, issues)

    view = BoardView(
        columns=columns,
        activities=build_live_activity(columns, issues),
        current_task=build_current_task(columns),
        status=build_status(issues),
        log_preview=logs.preview,
        log_expanded=logs.expanded,
        system_count=sum(1 for issue in issues if issue.is_open),
    )
    logger.debug(
        "Assembled board: %s (active issue %s)",
        ", ".join(f"{column.id}={column.count}" for column in columns),
        active_issue_number,
    )
    return view
