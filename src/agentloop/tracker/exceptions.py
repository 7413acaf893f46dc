"""Custom exceptions for the tracker client."""

from __future__ import annotations


class TrackerError(Exception):
    """Base exception for tracker client errors."""


class TrackerResponseError(TrackerError):
    """Tracker answered with a non-success status.

    Attributes:
        status_code: Upstream HTTP status.
        detail: Upstream response body text.
    """

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"{status_code} - {detail}")
        self.status_code = status_code
        self.detail = detail


class IssueListError(TrackerResponseError):
    """Listing issues failed."""


class IssueCreateError(TrackerResponseError):
    """Creating an issue failed."""


class InvalidResponseError(TrackerError):
    """Tracker answered with a success status but an unreadable body."""
