"""Pydantic models for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from agentloop.board.models import (
    Activity,
    ActivityIcon,
    BoardView,
    Column,
    ColumnId,
    Priority,
    RunState,
    Tag,
    TagIcon,
    Task,
    Tone,
)


class WireModel(BaseModel):
    """Response base with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error document."""

    error: str


# Board models


class TagResponse(WireModel):
    """Response model for a task tag."""

    label: str
    tone: Tone
    icon: TagIcon | None = None


class TaskResponse(WireModel):
    """Response model for a task card."""

    id: str
    priority: Priority
    group: str
    title: str
    description: str
    tags: list[TagResponse]


class ColumnResponse(WireModel):
    """Response model for a board column."""

    id: ColumnId
    title: str
    count: int
    accent: str
    tasks: list[TaskResponse]


class ActivityResponse(WireModel):
    """Response model for a live activity entry."""

    icon: ActivityIcon
    label: str
    detail: str


class CurrentTaskResponse(WireModel):
    """Response model for the current task."""

    title: str
    priority: Priority


class StatusResponse(WireModel):
    """Response model for the run status."""

    state: RunState
    running_since: str | None
    last_update: str | None


class BoardViewResponse(WireModel):
    """Response model for the dashboard view."""

    columns: list[ColumnResponse]
    activities: list[ActivityResponse]
    current_task: CurrentTaskResponse
    status: StatusResponse
    log_preview: str
    log_expanded: str
    system_count: int


def tag_to_response(tag: Tag) -> TagResponse:
    return TagResponse(label=tag.label, tone=tag.tone, icon=tag.icon)


def task_to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        priority=task.priority,
        group=task.group,
        title=task.title,
        description=task.description,
        tags=[tag_to_response(tag) for tag in task.tags],
    )


def column_to_response(column: Column) -> ColumnResponse:
    return ColumnResponse(
        id=column.id,
        title=column.title,
        count=column.count,
        accent=column.accent,
        tasks=[task_to_response(task) for task in column.tasks],
    )


def activity_to_response(activity: Activity) -> ActivityResponse:
    return ActivityResponse(icon=activity.icon, label=activity.label, detail=activity.detail)


def board_to_response(view: BoardView) -> BoardViewResponse:
    """Convert a BoardView to BoardViewResponse."""
    return BoardViewResponse(
        columns=[column_to_response(column) for column in view.columns],
        activities=[activity_to_response(activity) for activity in view.activities],
        current_task=CurrentTaskResponse(
            title=view.current_task.title,
            priority=view.current_task.priority,
        ),
        status=StatusResponse(
            state=view.status.state,
            running_since=view.status.running_since,
            last_update=view.status.last_update,
        ),
        log_preview=view.log_preview,
        log_expanded=view.log_expanded,
        system_count=view.system_count,
    )


# Issue creation models


class CreateIssueRequest(BaseModel):
    """Request model for filing a new issue.

    Title is checked by the route so a blank one gets the dashboard's own
    error message; priority is free text and falls back to MEDIUM.
    """

    title: str | None = None
    body: str | None = None
    priority: str | None = None
    labels: list[str] | None = None


class CreatedIssueResponse(BaseModel):
    """Response model wrapping the tracker's created issue record."""

    issue: dict[str, Any]
