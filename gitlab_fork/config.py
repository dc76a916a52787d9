"""Configuration and constants for the GitLab fork action."""

import os
from typing import Optional

# GitLab API Configuration
DEFAULT_GITLAB_BASE_URL = "https://gitlab.com"
GITLAB_BASE_URL: str = os.getenv("GITLAB_BASE_URL", DEFAULT_GITLAB_BASE_URL)
GITLAB_TOKEN: Optional[str] = os.getenv("GITLAB_TOKEN")
GITLAB_API_PREFIX = "/api/v4"
DEFAULT_API_TIMEOUT = int(os.getenv("GITLAB_API_TIMEOUT", "30"))

# Fork polling
DEFAULT_POLLING_INTERVAL_MS = int(os.getenv("GITLAB_FORK_POLL_INTERVAL_MS", "2000"))
DEFAULT_MAX_POLLING_ATTEMPTS = int(os.getenv("GITLAB_FORK_MAX_POLL_ATTEMPTS", "30"))

# Import statuses reported on a forked project
IN_PROGRESS_STATUSES = ("started", "scheduled")
FAILED_STATUS = "failed"

VALID_VISIBILITIES = ("private", "internal", "public")

# Action identity
ACTION_ID = "gitlab:project:fork"
ACTION_DESCRIPTION = "Forks a project on a GitLab instance"

# Logging
LOG_LEVEL = os.getenv("GITLAB_FORK_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("GITLAB_FORK_LOG_FILE")

# Error Codes
class ErrorCode:
    """Standardized error codes for consistent error handling."""
    INVALID_INPUT = "INVALID_INPUT"
    GITLAB_API_ERROR = "GITLAB_API_ERROR"
    GITLAB_NOT_FOUND = "GITLAB_NOT_FOUND"
    GITLAB_AUTH_FAILED = "GITLAB_AUTH_FAILED"
    NO_RESPONSE = "NO_RESPONSE"
    FORK_FAILED = "FORK_FAILED"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"

# GitLab API Headers
def get_gitlab_headers(token: Optional[str] = None) -> dict:
    """Get GitLab API headers with optional authentication."""
    headers = {
        "Accept": "application/json",
    }
    if token:
        headers["PRIVATE-TOKEN"] = token
    return headers
