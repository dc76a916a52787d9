"""Map exceptions raised while forking onto user-facing errors."""

from typing import Any, Optional

from ..config import ErrorCode
from ..utils.errors import AuthenticationError, GitLabApiError, InputError, ProjectNotFoundError
from ..utils.redact import safe_error_message


NOT_FOUND_STATUS = 404
AUTH_STATUSES = (401, 403)


def error_status_code(error: Exception) -> Optional[int]:
    """
    Get the HTTP status code carried by an error, if any.

    Understands GitLabApiError.status_code and httpx.HTTPStatusError.response.
    """
    status_code = getattr(error, "status_code", None)
    if status_code is None:
        response = getattr(error, "response", None)
        status_code = getattr(response, "status_code", None)
    return status_code if isinstance(status_code, int) else None


def classify_error(error: Exception, project_id: Any) -> InputError:
    """
    Translate an exception from the fork call or status polling.

    The status code decides when the error carries one; otherwise the message
    is searched for '404'/'not found' and '401'/'403'. Errors that are already
    user-facing pass through unchanged.

    Args:
        error: The exception that was raised
        project_id: Source project the caller asked to fork

    Returns:
        An InputError (or subclass) ready to be raised
    """
    if isinstance(error, InputError):
        return error

    status_code = error_status_code(error)
    message = str(error)

    if status_code is not None:
        if status_code == NOT_FOUND_STATUS:
            return ProjectNotFoundError(project_id)
        if status_code in AUTH_STATUSES:
            return AuthenticationError()
    else:
        if "404" in message or "not found" in message:
            return ProjectNotFoundError(project_id)
        if "401" in message or "403" in message:
            return AuthenticationError()

    code = ErrorCode.GITLAB_API_ERROR if isinstance(error, GitLabApiError) else ErrorCode.UNEXPECTED_ERROR
    return InputError(
        safe_error_message(error, "Failed to fork GitLab project") if message
        else "Failed to fork GitLab project: Unknown error",
        code=code,
        details={"error_type": type(error).__name__}
    )
