"""Tracker client - Reads and files issues on GitHub."""

from agentloop.tracker.client import TrackerClient
from agentloop.tracker.exceptions import (
    InvalidResponseError,
    IssueCreateError,
    IssueListError,
    TrackerError,
    TrackerResponseError,
)
from agentloop.tracker.models import IssueState, Label, RawIssue

__all__ = [
    "InvalidResponseError",
    "IssueCreateError",
    "IssueListError",
    "IssueState",
    "Label",
    "RawIssue",
    "TrackerClient",
    "TrackerError",
    "TrackerResponseError",
]
