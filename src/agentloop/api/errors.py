"""Exception-to-response mapping for the REST API."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from agentloop.api.models import ErrorResponse
from agentloop.config import ConfigurationError
from agentloop.logging import get_logger
from agentloop.tracker import IssueCreateError, IssueListError, TrackerError

logger = get_logger("api")


class InvalidRequestError(Exception):
    """Client supplied an unusable request."""


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error document handlers to an application."""

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(_request: Request, exc: InvalidRequestError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request body: %s", exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body.")

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        _request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Configuration error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(IssueListError)
    async def issue_list_error_handler(_request: Request, exc: IssueListError) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.detail)

    @app.exception_handler(IssueCreateError)
    async def issue_create_error_handler(
        _request: Request, exc: IssueCreateError
    ) -> JSONResponse:
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(_request: Request, exc: TrackerError) -> JSONResponse:
        logger.error("Tracker error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
