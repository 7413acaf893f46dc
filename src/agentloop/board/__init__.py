"""Board - Classifies tracker issues and assembles the dashboard view."""

from agentloop.board.assembler import assemble_board, extract_active_issue_number
from agentloop.board.classifier import build_task, pick_column, pick_priority, place_issue
from agentloop.board.labels import normalize_labels, parse_priority, trim_description
from agentloop.board.models import (
    Activity,
    BoardView,
    Column,
    ColumnId,
    CurrentTask,
    Priority,
    RunState,
    Status,
    Tag,
    TagIcon,
    Task,
    Tone,
)

__all__ = [
    "Activity",
    "BoardView",
    "Column",
    "ColumnId",
    "CurrentTask",
    "Priority",
    "RunState",
    "Status",
    "Tag",
    "TagIcon",
    "Task",
    "Tone",
    "assemble_board",
    "build_task",
    "extract_active_issue_number",
    "normalize_labels",
    "parse_priority",
    "pick_column",
    "pick_priority",
    "place_issue",
    "trim_description",
]
