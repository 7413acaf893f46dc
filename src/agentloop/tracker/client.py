"""TrackerClient - GitHub REST access for issues and the progress log."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from agentloop.config import DEFAULT_API_URL, DEFAULT_PROGRESS_PATH
from agentloop.logging import get_logger, response_excerpt
from agentloop.tracker.exceptions import (
    InvalidResponseError,
    IssueCreateError,
    IssueListError,
    TrackerError,
)
from agentloop.tracker.models import RawIssue

if TYPE_CHECKING:
    from agentloop.config import Settings

logger = get_logger("tracker")

ISSUES_PER_PAGE = 100


class TrackerClient:
    """Client for the issue tracker REST API.

    Lists issues, fetches the raw progress log, and files new issues for a
    single repository.
    """

    def __init__(
        self,
        repo: str,
        token: str,
        base_url: str = DEFAULT_API_URL,
        progress_path: str = DEFAULT_PROGRESS_PATH,
    ) -> None:
        """Initialize the tracker client.

        Args:
            repo: GitHub repo in "owner/repo" format
            token: GitHub access token
            base_url: GitHub API base URL (for testing/enterprise)
            progress_path: Repository path of the progress log file
        """
        self.repo = repo
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.progress_path = progress_path.lstrip("/")
        self._client: httpx.Client | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> TrackerClient:
        return cls(
            repo=settings.repo,
            token=settings.token,
            base_url=settings.api_url,
            progress_path=settings.progress_path,
        )

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def list_issues(self) -> list[RawIssue]:
        """List issues in all states, newest-updated first.

        Pull requests are dropped; the tracker's ordering is kept.

        Returns:
            Issues from the first page of results

        Raises:
            IssueListError: If the tracker answers with a non-200 status
            InvalidResponseError: If the listing body is not a list of issues
            TrackerError: If the request cannot be sent
        """
        logger.debug("Listing issues for %s", self.repo)
        try:
            response = self.client.get(
                f"/repos/{self.repo}/issues",
                params={"state": "all", "per_page": ISSUES_PER_PAGE, "sort": "updated"},
            )
        except httpx.HTTPError as e:
            logger.error("Issue listing for %s failed: %s", self.repo, e)
            raise TrackerError(f"Failed to list issues: {e}") from e

        if response.status_code != 200:
            logger.error(
                "Issue listing failed with %d: %s",
                response.status_code,
                response_excerpt(response.text),
            )
            raise IssueListError(response.status_code, response.text)

        try:
            payload = response.json()
            if not isinstance(payload, list):
                raise TypeError(f"expected a list, got {type(payload).__name__}")
            issues = [RawIssue.from_api(item) for item in payload]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(
                "Unreadable issue listing for %s: %s", self.repo, response_excerpt(response.text)
            )
            raise InvalidResponseError(f"Invalid tracker response: {e}") from e

        filtered = [issue for issue in issues if not issue.is_pull_request]
        logger.info(
            "Listed %d issue(s) for %s (%d pull request(s) skipped)",
            len(filtered),
            self.repo,
            len(issues) - len(filtered),
        )
        return filtered

    def fetch_progress_log(self) -> str:
        """Fetch the raw progress log.

        Any failure yields an empty string.
        """
        try:
            response = self.client.get(
                f"/repos/{self.repo}/contents/{self.progress_path}",
                headers={"Accept": "application/vnd.github.raw"},
            )
        except httpx.HTTPError as e:
            logger.warning("Progress log fetch failed: %s", e)
            return ""

        if response.status_code != 200:
            logger.debug(
                "Progress log %s unavailable (%d)", self.progress_path, response.status_code
            )
            return ""

        return response.text

    def create_issue(self, title: str, body: str, labels: list[str]) -> dict[str, Any]:
        """Create an issue.

        Args:
            title: Issue title
            body: Issue description
            labels: Label names to attach

        Returns:
            The created issue record

        Raises:
            IssueCreateError: If the tracker answers with a non-2xx status
            InvalidResponseError: If the created record cannot be decoded
            TrackerError: If the request cannot be sent
        """
        logger.info("Creating issue in %s: %s (labels=%s)", self.repo, title, labels)
        try:
            response = self.client.post(
                f"/repos/{self.repo}/issues",
                json={
                    "title": title,
                    "body": body,
                    "labels": labels,
                },
            )
        except httpx.HTTPError as e:
            logger.error("Issue creation for %s failed: %s", self.repo, e)
            raise TrackerError(f"Failed to create issue: {e}") from e

        if not response.is_success:
            logger.error(
                "Failed to create issue (%d): %s",
                response.status_code,
                response_excerpt(response.text),
            )
            raise IssueCreateError(response.status_code, response.text)

        try:
            issue = response.json()
        except ValueError as e:
            logger.error("Unreadable created issue: %s", response_excerpt(response.text))
            raise InvalidResponseError(f"Invalid tracker response: {e}") from e
        if not isinstance(issue, dict):
            raise InvalidResponseError(
                f"Invalid tracker response: expected an object, got {type(issue).__name__}"
            )

        logger.info("Created issue #%s", issue.get("number"))
        return issue
