"""Dashboard endpoints: board view and issue filing."""

from fastapi import APIRouter

from agentloop.api.dependencies import TrackerFactoryDep
from agentloop.api.errors import InvalidRequestError
from agentloop.api.models import (
    BoardViewResponse,
    CreatedIssueResponse,
    CreateIssueRequest,
    ErrorResponse,
    board_to_response,
)
from agentloop.board import assemble_board, normalize_labels, parse_priority
from agentloop.logging import get_logger

logger = get_logger("api")

router = APIRouter(prefix="/agent-loop", tags=["board"])


@router.get(
    "",
    response_model=BoardViewResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_board(open_tracker: TrackerFactoryDep) -> BoardViewResponse:
    """Fetch issues and the progress log, and return the assembled board."""
    tracker = open_tracker()
    try:
        issues = tracker.list_issues()
        progress_text = tracker.fetch_progress_log()
    finally:
        tracker.close()

    return board_to_response(assemble_board(issues, progress_text))


@router.post(
    "",
    response_model=CreatedIssueResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_issue(
    payload: CreateIssueRequest, open_tracker: TrackerFactoryDep
) -> CreatedIssueResponse:
    """File a new issue on the tracker."""
    title = (payload.title or "").strip()
    if not title:
        raise InvalidRequestError("Title is required.")

    priority = parse_priority(payload.priority)
    body = (payload.body or "").strip()
    labels = normalize_labels(payload.labels, priority)

    tracker = open_tracker()
    try:
        issue = tracker.create_issue(title=title, body=body, labels=labels)
    finally:
        tracker.close()

    logger.info("Filed issue #%s (%s)", issue.get("number"), priority)
    return CreatedIssueResponse(issue=issue)
