"""GitLab API client for making HTTP requests."""

import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx

from ..config import DEFAULT_API_TIMEOUT, DEFAULT_GITLAB_BASE_URL, GITLAB_API_PREFIX, get_gitlab_headers
from ..utils.errors import GitLabApiError
from ..utils.redact import safe_error_message
from .models import GitLabProject


logger = logging.getLogger(__name__)


def encode_project_id(project_id: Union[str, int]) -> str:
    """URL-encode a numeric ID or a 'group/project' path for use in a URL."""
    return quote(str(project_id), safe="")


class GitLabClient:
    """Client for interacting with the GitLab REST API."""

    def __init__(self, base_url: str = DEFAULT_GITLAB_BASE_URL, token: Optional[str] = None, timeout: int = DEFAULT_API_TIMEOUT):
        """
        Initialize the GitLab API client.

        Args:
            base_url: Base URL of the GitLab instance, e.g. https://gitlab.com
            token: Personal access token with api scope
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.api_url = f"{base_url.rstrip('/')}{GITLAB_API_PREFIX}"
        self.token = token
        self.timeout = timeout
        logger.debug(f"GitLabClient initialized for {self.base_url} with {timeout}s timeout")

    def _extract_rate_limit_info(self, response: httpx.Response) -> Dict[str, Any]:
        """Extract rate limit information from response headers."""
        return {
            "limit": response.headers.get("RateLimit-Limit"),
            "remaining": response.headers.get("RateLimit-Remaining"),
            "reset": response.headers.get("RateLimit-Reset")
        }

    def _check_rate_limit(self, response: httpx.Response) -> None:
        """Check and log rate limit status from response headers."""
        rate_info = self._extract_rate_limit_info(response)
        remaining = rate_info.get("remaining")
        limit = rate_info.get("limit")

        if remaining and limit:
            logger.debug(f"GitLab API rate limit: {remaining}/{limit} remaining")

            if not (remaining.isdigit() and limit.isdigit()):
                return
            if int(remaining) < int(limit) * 0.1:
                logger.warning(f"Approaching GitLab API rate limit: {remaining}/{limit}")

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Pull the provider's error text out of an error response body."""
        try:
            data = response.json()
        except ValueError:
            return response.text.strip()
        if isinstance(data, dict):
            detail = data.get("message") or data.get("error_description") or data.get("error")
            return str(detail) if detail else ""
        return str(data)

    async def _request(self, method: str, path: str, json_body: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Send a request to the API and decode the JSON body.

        Returns:
            Decoded JSON, or None when the response has no body

        Raises:
            GitLabApiError: On non-2xx responses (with status_code) or network errors
        """
        url = f"{self.api_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    url,
                    json=json_body,
                    headers=get_gitlab_headers(self.token)
                )
        except httpx.RequestError as e:
            logger.error(f"Network error: {safe_error_message(e, 'Network error')}")
            raise GitLabApiError(
                safe_error_message(e, "Network error while contacting GitLab")
            ) from e

        self._check_rate_limit(response)

        if response.is_error:
            detail = self._error_detail(response)
            message = f"{response.status_code} {response.reason_phrase}"
            if detail:
                message = f"{message}: {detail}"
            logger.error(f"GitLab API {method} {path} failed: {message}")
            raise GitLabApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    async def fork(self, project_id: Union[str, int], options: Dict[str, Any]) -> Optional[GitLabProject]:
        """
        Fork a project.

        Args:
            project_id: Numeric ID or 'group/project' path of the source project
            options: Fork parameters (namespace_id, namespace_path, name, ...)

        Returns:
            The new project, or None if GitLab returned an empty body

        Raises:
            GitLabApiError: If the API request fails
        """
        logger.info(f"POST fork for project {project_id}")
        data = await self._request("POST", f"/projects/{encode_project_id(project_id)}/fork", json_body=options)
        if not data:
            return None
        return GitLabProject(data)

    async def show(self, project_id: Union[str, int]) -> GitLabProject:
        """
        Get a single project.

        Args:
            project_id: Numeric ID or 'group/project' path

        Returns:
            GitLabProject object

        Raises:
            GitLabApiError: If the API request fails or returns no body
        """
        data = await self._request("GET", f"/projects/{encode_project_id(project_id)}")
        if not data:
            raise GitLabApiError(f"Empty response for project {project_id}")
        return GitLabProject(data)
