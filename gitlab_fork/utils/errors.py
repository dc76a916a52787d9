"""Structured error handling utilities."""

import json
import logging
from typing import Any, Dict, Optional

from ..config import ErrorCode


# Configure module logger
logger = logging.getLogger(__name__)


class GitLabForkError(Exception):
    """Base exception for GitLab fork action errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
        logger.error(f"GitLabForkError ({code}): {message}", extra={"details": self.details})

    def to_dict(self) -> dict:
        """Convert error to standardized dictionary format."""
        return {
            "ok": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details
            }
        }

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


class GitLabApiError(GitLabForkError):
    """Exception for GitLab API errors raised by the HTTP client."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        full_details = details or {}
        if status_code:
            full_details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(ErrorCode.GITLAB_API_ERROR, message, full_details)


class InputError(GitLabForkError):
    """User-facing error: the caller can recover by correcting its input."""
    def __init__(self, message: str, code: str = ErrorCode.INVALID_INPUT, details: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, details)


class ProjectNotFoundError(InputError):
    """The source project does not exist or is not visible to the token."""
    def __init__(self, project_id: Any):
        super().__init__(
            f"GitLab project not found: {project_id}. "
            "Please verify the project ID/path and token permissions.",
            code=ErrorCode.GITLAB_NOT_FOUND,
            details={"project_id": project_id}
        )


class AuthenticationError(InputError):
    """The token was rejected or lacks the scope needed to fork."""
    def __init__(self):
        super().__init__(
            "GitLab authentication failed. Please verify your token has the 'api' "
            "scope and necessary permissions.",
            code=ErrorCode.GITLAB_AUTH_FAILED,
            details={"hint": "Create a personal access token with the 'api' scope"}
        )


class NoResponseError(InputError):
    """The fork call returned nothing, or a body without the new project's ID."""
    def __init__(self, message: str = "Failed to fork project - no response from GitLab API"):
        super().__init__(
            message,
            code=ErrorCode.NO_RESPONSE
        )


class ForkFailedError(InputError):
    """GitLab reported the fork import as failed."""
    def __init__(self, import_error: Optional[str] = None, project_id: Optional[int] = None):
        details = {}
        if project_id is not None:
            details["forked_project_id"] = project_id
        super().__init__(
            f"Fork failed: {import_error or 'Unknown error'}",
            code=ErrorCode.FORK_FAILED,
            details=details
        )


def success_response(data: Any) -> dict:
    """Create a standardized success response."""
    return {
        "ok": True,
        "data": data
    }


def error_response(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    """Create a standardized error response."""
    return {
        "ok": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or {}
        }
    }


def format_error_json(code: str, message: str, hint: Optional[str] = None, context: Optional[Dict[str, Any]] = None) -> str:
    """
    Format an error response as JSON string with optional hint and context.

    Args:
        code: Error code
        message: Human-readable error message
        hint: Optional hint for resolution
        context: Optional context information

    Returns:
        JSON-formatted error string
    """
    error_dict = error_response(code, message, context)
    if hint:
        error_dict["error"]["hint"] = hint
    return json.dumps(error_dict, indent=2)


def format_success_json(data: Any) -> str:
    """
    Format a success response as JSON string.

    Args:
        data: Data to include in response

    Returns:
        JSON-formatted success string
    """
    return json.dumps(success_response(data), indent=2)
