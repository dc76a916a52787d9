"""Fork a GitLab project and wait for the fork's import to finish."""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from ..config import (
    DEFAULT_GITLAB_BASE_URL,
    DEFAULT_MAX_POLLING_ATTEMPTS,
    DEFAULT_POLLING_INTERVAL_MS,
    VALID_VISIBILITIES,
)
from ..gitlab.client import GitLabClient
from ..utils.errors import ForkFailedError, InputError, NoResponseError
from ..utils.redact import redact_dict
from .errors import classify_error
from .poller import ForkPoller, PollPhase
from .schema import ForkOutcome


logger = logging.getLogger(__name__)

# Optional string inputs copied as-is, keyed by input name -> fork parameter
PASS_THROUGH_FIELDS = {
    "name": "name",
    "path": "path",
    "description": "description",
    "defaultBranch": "default_branch",
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_fork_options(inputs: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build GitLab fork parameters from action input.

    Only present, correctly typed fields are copied; anything else is dropped
    silently. A numeric namespace becomes namespace_id, a string namespace
    becomes namespace_path.
    """
    options: Dict[str, Any] = {}

    namespace = inputs.get("namespace")
    if _is_number(namespace):
        options["namespace_id"] = namespace
    elif isinstance(namespace, str):
        options["namespace_path"] = namespace

    for input_name, option_name in PASS_THROUGH_FIELDS.items():
        value = inputs.get(input_name)
        if isinstance(value, str):
            options[option_name] = value

    visibility = inputs.get("visibility")
    if isinstance(visibility, str) and visibility in VALID_VISIBILITIES:
        options["visibility"] = visibility

    return options


class ForkOrchestrator:
    """
    The gitlab:project:fork action.

    Polling interval and attempt budget are fixed when the orchestrator is
    built; each call to run() is independent of any other.
    """

    def __init__(
        self,
        polling_interval_ms: int = DEFAULT_POLLING_INTERVAL_MS,
        max_polling_attempts: int = DEFAULT_MAX_POLLING_ATTEMPTS,
        client_factory: Optional[Callable[..., Any]] = None
    ):
        """
        Args:
            polling_interval_ms: Delay between status checks, in milliseconds
            max_polling_attempts: Maximum number of status checks
            client_factory: Called with base_url= and token= to build the API
                client; defaults to GitLabClient
        """
        self._polling_interval_ms = polling_interval_ms
        self._max_polling_attempts = max_polling_attempts
        self._client_factory = client_factory

    @property
    def polling_interval_ms(self) -> int:
        return self._polling_interval_ms

    @property
    def max_polling_attempts(self) -> int:
        return self._max_polling_attempts

    def _create_client(self, base_url: str, token: str):
        factory = self._client_factory or GitLabClient
        return factory(base_url=base_url, token=token)

    async def run(self, inputs: Mapping[str, Any]) -> ForkOutcome:
        """
        Fork a project and wait for the fork to complete.

        Args:
            inputs: Action input (projectId, token, baseUrl, namespace, name,
                path, description, visibility, defaultBranch)

        Returns:
            ForkOutcome describing the new project

        Raises:
            InputError: For invalid input and for every failure while forking or
                polling; unexpected exceptions are wrapped with their message
        """
        project_id = inputs.get("projectId")
        token = inputs.get("token")

        if not isinstance(token, str):
            raise InputError("token must be a string")

        if not isinstance(project_id, str) and not _is_number(project_id):
            raise InputError("projectId must be a string or number")

        base_url = inputs.get("baseUrl", DEFAULT_GITLAB_BASE_URL)
        gitlab_host = base_url if isinstance(base_url, str) else DEFAULT_GITLAB_BASE_URL

        logger.info(f"Forking GitLab project {project_id} on {gitlab_host}")
        logger.debug(f"Fork input: {redact_dict(dict(inputs))}")

        try:
            client = self._create_client(gitlab_host, token)

            fork_options = build_fork_options(inputs)
            logger.info(f"Creating fork with options: {fork_options}")

            forked_project = await client.fork(project_id, fork_options)
            if not forked_project:
                raise NoResponseError()
            if forked_project.id is None:
                raise NoResponseError("Failed to fork project - GitLab API response has no project id")

            logger.info(f"Successfully forked project to {forked_project.path_with_namespace}")

            poller = ForkPoller(client.show, self._polling_interval_ms, self._max_polling_attempts)
            result = await poller.wait(forked_project)

            if result.phase is PollPhase.FAILED:
                raise ForkFailedError(result.snapshot.import_error, project_id=forked_project.id)

            logger.info(f"Fork completed with status: {result.snapshot.import_status or 'finished'}")

            return ForkOutcome(
                projectId=forked_project.id,
                projectPath=forked_project.path_with_namespace,
                projectUrl=forked_project.web_url,
                sshUrl=forked_project.ssh_url_to_repo,
                httpUrl=forked_project.http_url_to_repo
            )

        except InputError:
            raise
        except Exception as e:
            raise classify_error(e, project_id) from e
