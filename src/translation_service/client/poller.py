"""Client-side task poller.

Polls a task's status on a fixed interval until it is terminal. A task that
reports FAILED raises TaskFailedError; running out of attempts raises
PollTimeoutError; the two are separate exception types.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from ..config import PipelineConfig
from ..errors import PollTimeoutError, TaskFailedError
from ..messages import TaskStatusResponse
from ..observability.logger import bind_task_context, get_logger
from ..tasks.models import TranslationStatus

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL_S = 5.0
DEFAULT_MAX_ATTEMPTS = 60  # ~5 minutes at the default interval

ProgressCallback = Callable[[TaskStatusResponse], Awaitable[None] | None]
FetchStatus = Callable[[str], Awaitable[TaskStatusResponse]]


@runtime_checkable
class StatusFetcher(Protocol):
    """Fetches the current status of a task.

    Implementations raise TaskNotFoundError for unknown ids.
    """

    async def fetch(self, task_id: str) -> TaskStatusResponse:
        ...


class TaskPoller:
    """Polls a status source with a bounded number of attempts."""

    def __init__(
        self,
        fetch_status: "StatusFetcher | FetchStatus",
        interval_s: float = DEFAULT_POLL_INTERVAL_S,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        on_progress: ProgressCallback | None = None,
    ):
        """Initialize the poller.

        Args:
            fetch_status: StatusFetcher, or an async callable taking a task id
            interval_s: Seconds to wait between polls
            max_attempts: Total polls before giving up
            on_progress: Called with every non-terminal status observed
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if interval_s < 0:
            raise ValueError("interval_s must be >= 0")
        if isinstance(fetch_status, StatusFetcher):
            fetch_status = fetch_status.fetch
        self._fetch_status = fetch_status
        self._interval_s = interval_s
        self._max_attempts = max_attempts
        self._on_progress = on_progress

    @classmethod
    def from_config(
        cls,
        fetch_status: "StatusFetcher | FetchStatus",
        config: PipelineConfig,
        on_progress: ProgressCallback | None = None,
    ) -> "TaskPoller":
        """Build a poller using POLL_INTERVAL_S and POLL_MAX_ATTEMPTS."""
        return cls(
            fetch_status,
            interval_s=config.poll_interval_s,
            max_attempts=config.poll_max_attempts,
            on_progress=on_progress,
        )

    async def poll(self, task_id: str) -> TaskStatusResponse:
        """Poll until the task completes.

        Returns:
            The COMPLETED status

        Raises:
            TaskFailedError: The task reached FAILED
            PollTimeoutError: max_attempts polls without a terminal state
            TaskNotFoundError: The task id is unknown
        """
        log = bind_task_context(logger, task_id)
        last_status: TranslationStatus | None = None

        for attempt in range(1, self._max_attempts + 1):
            status = await self._fetch_status(task_id)
            last_status = status.status

            if status.status == TranslationStatus.COMPLETED:
                log.info("poll_completed", attempts=attempt)
                return status

            if status.status == TranslationStatus.FAILED:
                log.warning("poll_task_failed", attempts=attempt, error=status.error)
                raise TaskFailedError(task_id, status.error)

            if self._on_progress is not None:
                maybe_awaitable = self._on_progress(status)
                if inspect.isawaitable(maybe_awaitable):
                    await maybe_awaitable

            log.debug(
                "poll_pending",
                attempt=attempt,
                status=status.status.value,
                progress=status.progress,
            )
            if attempt < self._max_attempts:
                await asyncio.sleep(self._interval_s)

        log.warning("poll_timed_out", attempts=self._max_attempts)
        raise PollTimeoutError(
            task_id,
            self._max_attempts,
            last_status.value if last_status is not None else None,
        )
