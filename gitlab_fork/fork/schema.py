"""Declared input and output schema of the fork action.

The input model documents what the action accepts; the orchestrator itself
reads the raw input mapping and drops wrong-typed optional fields instead of
rejecting them, so ForkInput is never used to validate requests.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import ACTION_DESCRIPTION, ACTION_ID, DEFAULT_GITLAB_BASE_URL


class ForkInput(BaseModel):
    """Input accepted by the gitlab:project:fork action."""

    model_config = ConfigDict(title="GitLab fork input")

    projectId: Union[str, int] = Field(
        ..., title="Project ID", description="The ID or URL-encoded path of the project to fork"
    )
    token: str = Field(
        ..., title="GitLab Token", description="GitLab personal access token with api scope"
    )
    baseUrl: str = Field(
        DEFAULT_GITLAB_BASE_URL, title="GitLab Base URL", description="Base URL of the GitLab instance"
    )
    namespace: Optional[Union[str, int]] = Field(
        None, title="Target Namespace", description="The ID or path of the namespace to fork to"
    )
    name: Optional[str] = Field(None, title="Project Name", description="The name of the forked project")
    path: Optional[str] = Field(None, title="Project Path", description="The path of the forked project")
    description: Optional[str] = Field(
        None, title="Description", description="The description of the forked project"
    )
    visibility: Optional[Literal["private", "internal", "public"]] = Field(
        None, title="Visibility", description="The visibility level of the forked project"
    )
    defaultBranch: Optional[str] = Field(
        None, title="Default Branch", description="The default branch of the forked project"
    )


class ForkOutcome(BaseModel):
    """Identifiers and URLs of a successfully forked project."""

    model_config = ConfigDict(title="GitLab fork output", frozen=True)

    projectId: int = Field(..., title="Project ID", description="The ID of the forked project")
    projectPath: str = Field(..., title="Project Path", description="The path of the forked project")
    projectUrl: str = Field(..., title="Project URL", description="The web URL of the forked project")
    sshUrl: str = Field(..., title="SSH URL", description="The SSH URL of the forked project")
    httpUrl: str = Field(..., title="HTTP URL", description="The HTTP URL of the forked project")


def describe_action() -> Dict[str, Any]:
    """Return the action's identity together with its JSON schemas."""
    return {
        "id": ACTION_ID,
        "description": ACTION_DESCRIPTION,
        "schema": {
            "input": ForkInput.model_json_schema(),
            "output": ForkOutcome.model_json_schema(),
        },
    }
