"""REST API for Agent Loop."""

from agentloop.api.app import app, create_app
from agentloop.api.models import BoardViewResponse, CreateIssueRequest, ErrorResponse

__all__ = [
    "BoardViewResponse",
    "CreateIssueRequest",
    "ErrorResponse",
    "app",
    "create_app",
]
