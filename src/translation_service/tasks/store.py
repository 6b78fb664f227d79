"""In-memory task store.

Holds TranslationTask snapshots keyed by task id. Every mutation replaces
the stored record under a lock, so a reader never observes a half-applied
update (e.g. a results tuple with a torn append).
"""

import threading
from collections import OrderedDict
from datetime import datetime

from ..errors import InvalidTaskTransitionError, TaskNotFoundError
from ..observability.logger import get_logger
from ..observability.metrics import set_tasks_stored
from .models import TranslationResult, TranslationStatus, TranslationTask, utcnow

logger = get_logger(__name__)


class TaskStore:
    """Thread-safe registry of task id -> task record.

    Retention is bounded by ``max_tasks``: when the limit is exceeded the
    oldest terminal tasks are evicted. Tasks that are still PENDING or
    TRANSLATING are never evicted. ``max_tasks=0`` disables eviction.
    """

    def __init__(self, max_tasks: int = 1000) -> None:
        self._tasks: OrderedDict[str, TranslationTask] = OrderedDict()
        self._lock = threading.Lock()
        self._max_tasks = max_tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    @property
    def max_tasks(self) -> int:
        return self._max_tasks

    def add(self, task: TranslationTask) -> TranslationTask:
        """Register a new task.

        Raises:
            ValueError: If a task with the same id already exists.
        """
        with self._lock:
            if task.id in self._tasks:
                raise ValueError(f"Duplicate task id: {task.id}")
            self._tasks[task.id] = task
            self._evict_locked()
            count = len(self._tasks)
        set_tasks_stored(count)
        return task

    def get(self, task_id: str) -> TranslationTask:
        """Return the current snapshot of a task.

        Raises:
            TaskNotFoundError: If the id is unknown (or was evicted).
        """
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def find(self, task_id: str) -> TranslationTask | None:
        """Return the task, or None if not found."""
        return self._tasks.get(task_id)

    def list_tasks(self, status: TranslationStatus | None = None) -> list[TranslationTask]:
        """Return task snapshots in creation order, optionally filtered by status."""
        with self._lock:
            tasks = list(self._tasks.values())
        if status is None:
            return tasks
        return [task for task in tasks if task.status == status]

    # -------------------------------------------------------------------------
    # Mutations (worker only)
    # -------------------------------------------------------------------------

    def transition(
        self,
        task_id: str,
        new_status: TranslationStatus,
        **changes,
    ) -> TranslationTask:
        """Move a task to new_status, applying any extra field changes.

        Raises:
            TaskNotFoundError: If the id is unknown.
            InvalidTaskTransitionError: If the transition is not allowed.
        """
        with self._lock:
            task = self._require_locked(task_id)
            if not task.can_transition_to(new_status):
                raise InvalidTaskTransitionError(
                    f"Task {task_id} cannot move from {task.status.value} to {new_status.value}",
                    {"task_id": task_id, "from": task.status.value, "to": new_status.value},
                )
            updated = task.model_copy(update={"status": new_status, **changes})
            self._tasks[task_id] = updated
            return updated

    def start(self, task_id: str, started_at: datetime | None = None) -> TranslationTask:
        """PENDING -> TRANSLATING."""
        return self.transition(
            task_id, TranslationStatus.TRANSLATING, started_at=started_at or utcnow()
        )

    def append_result(self, task_id: str, result: TranslationResult) -> TranslationTask:
        """Append one pair result to a TRANSLATING task.

        Raises:
            TaskNotFoundError: If the id is unknown.
            InvalidTaskTransitionError: If the task is not TRANSLATING.
        """
        with self._lock:
            task = self._require_locked(task_id)
            if task.status != TranslationStatus.TRANSLATING:
                raise InvalidTaskTransitionError(
                    f"Cannot append results to task {task_id} in state {task.status.value}",
                    {"task_id": task_id, "status": task.status.value},
                )
            updated = task.model_copy(update={"results": (*task.results, result)})
            self._tasks[task_id] = updated
            return updated

    def complete(self, task_id: str) -> TranslationTask:
        """TRANSLATING -> COMPLETED."""
        return self.transition(task_id, TranslationStatus.COMPLETED, completed_at=utcnow())

    def fail(self, task_id: str, error: str) -> TranslationTask:
        """TRANSLATING -> FAILED with a top-level error message."""
        return self.transition(
            task_id, TranslationStatus.FAILED, completed_at=utcnow(), error=error
        )

    # -------------------------------------------------------------------------
    # Internals (call with lock held)
    # -------------------------------------------------------------------------

    def _require_locked(self, task_id: str) -> TranslationTask:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _evict_locked(self) -> None:
        if self._max_tasks <= 0:
            return
        overflow = len(self._tasks) - self._max_tasks
        if overflow <= 0:
            return
        expired = [task_id for task_id, task in self._tasks.items() if task.is_terminal][:overflow]
        for task_id in expired:
            self._tasks.pop(task_id, None)
        if expired:
            logger.info("tasks_evicted", count=len(expired), retained=len(self._tasks))
