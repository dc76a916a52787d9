"""Data models for GitLab API responses."""

from typing import Any, Dict, Optional

from ..config import FAILED_STATUS, IN_PROGRESS_STATUSES


class GitLabProject:
    """Represents a GitLab project as returned by the fork and show endpoints."""

    def __init__(self, data: Dict[str, Any]):
        self.id: Optional[int] = data.get("id")
        self.name = data.get("name", "")
        self.path = data.get("path", "")
        self.path_with_namespace = data.get("path_with_namespace", "")
        self.web_url = data.get("web_url", "")
        self.ssh_url_to_repo = data.get("ssh_url_to_repo", "")
        self.http_url_to_repo = data.get("http_url_to_repo", "")
        self.default_branch = data.get("default_branch")
        self.visibility = data.get("visibility")
        self.import_status: Optional[str] = data.get("import_status")
        self.import_error: Optional[str] = data.get("import_error")
        self.forked_from_id = (data.get("forked_from_project") or {}).get("id")

    @property
    def in_progress(self) -> bool:
        """Whether the fork's import is still scheduled or running."""
        return self.import_status in IN_PROGRESS_STATUSES

    @property
    def failed(self) -> bool:
        return self.import_status == FAILED_STATUS
