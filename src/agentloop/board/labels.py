"""Label and text helpers shared by the classifier and the write path."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from agentloop.board.models import Priority

MAX_LABELS = 10

TOKEN_SPLIT = re.compile(r"[^a-z0-9]+", re.IGNORECASE)

PRIORITY_LABELS: dict[Priority, str] = {
    Priority.HIGH: "p1",
    Priority.MEDIUM: "p2",
    Priority.LOW: "p3",
}


def label_match(labels: Iterable[str], keywords: Sequence[str]) -> bool:
    """Return True if any label contains any keyword as a substring."""
    return any(keyword in label for label in labels for keyword in keywords)


def parse_priority(value: str | None, default: Priority = Priority.MEDIUM) -> Priority:
    """Map a submitted priority to a tier; unknown values give the default."""
    try:
        return Priority(value)
    except ValueError:
        return default


def normalize_labels(labels: Iterable[str] | None, priority: Priority) -> list[str]:
    """Clean submitted labels for issue creation.

    Labels are trimmed and blanks dropped, the priority label (p1/p2/p3) is
    appended when missing, then exact duplicates are removed keeping first
    occurrence, capped at MAX_LABELS.
    """
    normalized = [label.strip() for label in labels or []]
    normalized = [label for label in normalized if label]

    priority_label = PRIORITY_LABELS[priority]
    if priority_label not in normalized:
        normalized.append(priority_label)

    return list(dict.fromkeys(normalized))[:MAX_LABELS]


def first_line(text: str | None) -> str | None:
    """Return the first non-blank line of text, stripped."""
    for line in (text or "").split("\n"):
        if line.strip():
            return line.strip()
    return None


def trim_description(body: str | None, limit: int = 120) -> str:
    """Shorten an issue body to its first line, at most `limit` characters."""
    line = first_line(body)
    if not line:
        return "No description provided."
    if len(line) <= limit:
        return line
    return f"{line[: limit - 3]}..."


def label_tokens(label: str) -> list[str]:
    """Split a label into alphanumeric words."""
    return [token for token in TOKEN_SPLIT.split(label) if token]


def token_match(labels: Iterable[str], tokens: Sequence[str]) -> bool:
    """Return True if any label has any of the tokens as a whole word."""
    return any(token in label_tokens(label) for label in labels for token in tokens)
