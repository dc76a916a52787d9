"""Bounded polling of a fork's import status."""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable

from ..gitlab.models import GitLabProject


logger = logging.getLogger(__name__)


class PollPhase(str, Enum):
    """States of the fork completion poll."""
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    EXHAUSTED = "exhausted"


def evaluate_phase(snapshot: GitLabProject, attempts: int, max_attempts: int) -> PollPhase:
    """
    Decide the poll phase for a project snapshot.

    A failed import wins over exhaustion, so a failure seen on the last
    allowed attempt is still reported as a failure.
    """
    if snapshot.failed:
        return PollPhase.FAILED
    if snapshot.in_progress:
        if attempts >= max_attempts:
            return PollPhase.EXHAUSTED
        return PollPhase.POLLING
    return PollPhase.SUCCEEDED


class PollResult:
    """Final snapshot and phase once polling stops."""

    def __init__(self, snapshot: GitLabProject, phase: PollPhase, attempts: int):
        self.snapshot = snapshot
        self.phase = phase
        self.attempts = attempts

    def __repr__(self) -> str:
        return f"PollResult(phase={self.phase.value}, attempts={self.attempts}, status={self.snapshot.import_status})"


class ForkPoller:
    """Waits for a forked project's import to leave the scheduled/started states."""

    def __init__(
        self,
        show: Callable[[int], Awaitable[GitLabProject]],
        polling_interval_ms: int,
        max_polling_attempts: int
    ):
        """
        Args:
            show: Coroutine function fetching a project by ID
            polling_interval_ms: Delay between status checks
            max_polling_attempts: Number of status checks before giving up
        """
        self._show = show
        self.polling_interval_ms = polling_interval_ms
        self.max_polling_attempts = max_polling_attempts

    @property
    def total_wait_seconds(self) -> float:
        return (self.max_polling_attempts * self.polling_interval_ms) / 1000

    async def wait(self, forked: GitLabProject) -> PollResult:
        """
        Poll until the import reaches a terminal state or attempts run out.

        Args:
            forked: Project returned by the fork call

        Returns:
            PollResult with the last known snapshot. Exhaustion is not an error;
            it is logged as a warning and reported as PollPhase.EXHAUSTED.
        """
        snapshot = forked
        attempts = 0
        phase = evaluate_phase(snapshot, attempts, self.max_polling_attempts)

        while phase is PollPhase.POLLING:
            logger.info(f"Fork status: {snapshot.import_status}, waiting {self.polling_interval_ms}ms...")
            await asyncio.sleep(self.polling_interval_ms / 1000)

            snapshot = await self._show(forked.id)
            attempts += 1
            logger.debug(f"Poll attempt {attempts}/{self.max_polling_attempts}: {snapshot.import_status}")
            phase = evaluate_phase(snapshot, attempts, self.max_polling_attempts)

        if phase is PollPhase.EXHAUSTED:
            logger.warning(
                f"Fork is still in progress after {self.max_polling_attempts} attempts "
                f"({self.total_wait_seconds:g}s)"
            )

        return PollResult(snapshot, phase, attempts)
