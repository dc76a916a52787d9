"""GitLab Fork MCP Server.

A local MCP server that forks GitLab projects and waits for the fork's
import to finish, for use by automation agents and workflows.
"""

import sys
from pathlib import Path
from typing import Optional, Union

# Add parent directory to Python path to support running directly
# This allows: python gitlab_fork/server.py from the project root
if __name__ == "__main__":
    parent_dir = str(Path(__file__).parent.parent)
    if parent_dir not in sys.path:
        sys.path.insert(0, parent_dir)

from mcp.server.fastmcp import FastMCP

from gitlab_fork.config import (
    GITLAB_BASE_URL,
    GITLAB_TOKEN,
    DEFAULT_POLLING_INTERVAL_MS,
    DEFAULT_MAX_POLLING_ATTEMPTS,
    LOG_LEVEL,
    LOG_FILE,
    ErrorCode,
)
from gitlab_fork.utils.logging_config import setup_logging, get_logger
from gitlab_fork.utils.errors import InputError, format_success_json, format_error_json
from gitlab_fork.utils.redact import redact_token
from gitlab_fork.fork.orchestrator import ForkOrchestrator
from gitlab_fork.fork.schema import describe_action

# Setup logging before initializing MCP server
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)

# Initialize MCP server
mcp = FastMCP("gitlab_fork")

logger.info("GitLab Fork MCP Server initialized")
if GITLAB_TOKEN:
    logger.info("GitLab token configured")
else:
    logger.warning("No GITLAB_TOKEN set - every fork_project call must pass a token")


# ============================================================================
# MCP Tools
# ============================================================================

@mcp.tool(
    name="fork_project",
    annotations={
        "title": "Fork GitLab Project",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True
    }
)
async def fork_project(
    project_id: Union[str, int],
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    namespace: Optional[Union[str, int]] = None,
    name: Optional[str] = None,
    path: Optional[str] = None,
    description: Optional[str] = None,
    visibility: Optional[str] = None,
    default_branch: Optional[str] = None
) -> str:
    """Fork a GitLab project and wait until the fork is ready.

    Requires a GitLab personal access token with 'api' scope (provided or via
    GITLAB_TOKEN env). Waits for GitLab to finish copying the repository; if
    that takes longer than the polling budget the fork is still reported, with
    its identifiers, as GitLab keeps working on it in the background.

    Args:
        project_id: Numeric ID or 'group/project' path of the project to fork
        token: GitLab PAT (uses env if not provided)
        base_url: GitLab instance URL (default: GITLAB_BASE_URL or https://gitlab.com)
        namespace: Target namespace, numeric ID or path (default: your user namespace)
        name: Name of the forked project
        path: Path of the forked project
        description: Description of the forked project
        visibility: 'private', 'internal' or 'public'
        default_branch: Default branch of the forked project

    Returns:
        JSON string with projectId, projectPath, projectUrl, sshUrl and httpUrl
    """
    inputs = {
        "projectId": project_id,
        "token": token or GITLAB_TOKEN,
        "baseUrl": base_url or GITLAB_BASE_URL,
        "namespace": namespace,
        "name": name,
        "path": path,
        "description": description,
        "visibility": visibility,
        "defaultBranch": default_branch,
    }

    try:
        logger.info(f"fork_project called: project_id={project_id}, namespace={namespace}")

        if not inputs["token"]:
            logger.warning("fork_project called without a token")
            return format_error_json(
                code=ErrorCode.INVALID_INPUT,
                message="GitLab token required for forking",
                hint="Pass token or set the GITLAB_TOKEN environment variable (scope: api)"
            )

        orchestrator = ForkOrchestrator(
            polling_interval_ms=DEFAULT_POLLING_INTERVAL_MS,
            max_polling_attempts=DEFAULT_MAX_POLLING_ATTEMPTS
        )
        outcome = await orchestrator.run(inputs)

        logger.info(f"Successfully forked {project_id} to {outcome.projectPath}")
        return format_success_json(outcome.model_dump())

    except InputError as e:
        logger.error(f"Fork of {project_id} failed: {e}")
        return e.to_json()
    except Exception as e:
        logger.error(f"Unexpected error forking {project_id}: {redact_token(str(e))}", exc_info=True)
        return format_error_json(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected error during fork",
            context={"error": redact_token(str(e))}
        )


@mcp.tool(
    name="describe_fork_action",
    annotations={
        "title": "Describe Fork Action",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False
    }
)
async def describe_fork_action() -> str:
    """Describe the fork action: its ID, input schema and output schema.

    Returns:
        JSON string with the action description and JSON schemas
    """
    return format_success_json(describe_action())


# ============================================================================
# Server Entry Point
# ============================================================================

def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
