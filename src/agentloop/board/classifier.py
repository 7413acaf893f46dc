"""Issue classifier.

Maps a tracker issue onto a board column, a priority tier, a group tag and
a short list of decorated tags. Every rule table below is ordered and the
first matching entry wins.
"""

from __future__ import annotations

import re

from agentloop.board.labels import label_match, token_match, trim_description
from agentloop.board.models import ColumnId, Priority, Tag, TagIcon, Task, Tone
from agentloop.tracker.models import Label, RawIssue

MAX_TAGS = 4

DONE_KEYWORDS = ("merged", "done", "completed", "complete")

# Checked after DONE_KEYWORDS and the closed-state rule. Each rule is
# (column, substrings, whole-word tokens); "pr" is a token so that labels
# such as "in-progress" do not read as review.
COLUMN_RULES: tuple[tuple[ColumnId, tuple[str, ...], tuple[str, ...]], ...] = (
    (
        ColumnId.REVIEW,
        ("review", "in-review", "needs-review", "pr-open", "pull-request"),
        ("pr",),
    ),
    (
        ColumnId.ACTIVE,
        ("active", "in-progress", "in progress", "doing", "running", "workflow"),
        (),
    ),
    (ColumnId.READY, ("ready", "todo", "backlog"), ()),
)

PRIORITY_RULES: tuple[tuple[Priority, tuple[str, ...]], ...] = (
    (Priority.HIGH, ("p0", "p1", "high", "urgent", "critical")),
    (Priority.MEDIUM, ("p2", "medium", "normal")),
)

TONE_RULES: tuple[tuple[Tone, tuple[str, ...]], ...] = (
    (Tone.PURPLE, ("bug", "critical", "urgent")),
    (Tone.GREEN, ("done", "ready", "complete", "approved")),
    (Tone.BLUE, ("feat", "feature", "enhancement")),
)

ICON_RULES: tuple[tuple[TagIcon, tuple[str, ...]], ...] = (
    (TagIcon.BRANCH, ("feat", "feature", "branch")),
    (TagIcon.CHECK, ("done", "ready", "complete", "approved")),
    (TagIcon.SUMMARY, ("summary", "spec")),
)

GROUP_PATTERN = re.compile(r"^prd[-\s]?", re.IGNORECASE)
COMMIT_PATTERN = re.compile(r"^[0-9a-f]{6,}$")


def pick_column(issue: RawIssue) -> ColumnId:
    """Assign the label-driven column for an issue."""
    labels = issue.label_names

    if label_match(labels, DONE_KEYWORDS):
        return ColumnId.DONE

    if not issue.is_open:
        return ColumnId.DONE

    for column, keywords, tokens in COLUMN_RULES:
        if label_match(labels, keywords) or token_match(labels, tokens):
            return column

    return ColumnId.READY


def place_issue(issue: RawIssue, active_issue_number: int | None = None) -> ColumnId:
    """Assign the final column, promoting the log-referenced issue.

    An open issue that would default to READY moves to ACTIVE when its number
    is the active issue number taken from the progress log.
    """
    column = pick_column(issue)
    if (
        column == ColumnId.READY
        and active_issue_number
        and issue.is_open
        and issue.number == active_issue_number
    ):
        return ColumnId.ACTIVE
    return column


def pick_priority(labels: list[str]) -> Priority:
    """Priority tier from lower-cased label names, LOW when nothing matches."""
    for priority, keywords in PRIORITY_RULES:
        if label_match(labels, keywords):
            return priority
    return Priority.LOW


def pick_group(issue: RawIssue) -> str:
    for label in issue.labels:
        if GROUP_PATTERN.match(label.name):
            return label.name.upper()
    return f"AL-{issue.number}"


def pick_tone(label: Label) -> Tone:
    name = label.name.lower()
    for tone, keywords in TONE_RULES:
        if label_match([name], keywords):
            return tone
    return Tone.SLATE


def pick_icon(label: Label) -> TagIcon | None:
    name = label.name.lower()
    for icon, keywords in ICON_RULES:
        if label_match([name], keywords):
            return icon
    if COMMIT_PATTERN.match(name) or label_match([name], ("commit",)):
        return TagIcon.COMMIT
    return None


def build_tags(issue: RawIssue) -> tuple[Tag, ...]:
    named = [label for label in issue.labels if label.name][:MAX_TAGS]
    return tuple(
        Tag(label=label.name, tone=pick_tone(label), icon=pick_icon(label)) for label in named
    )


def build_task(issue: RawIssue) -> Task:
    """Build the card for an issue. Pure function of the issue fields."""
    return Task(
        id=f"issue-{issue.number}",
        priority=pick_priority(issue.label_names),
        group=pick_group(issue),
        title=issue.title,
        description=trim_description(issue.body),
        tags=build_tags(issue),
    )
