"""Translation tasks: data model, store, queue/worker and progress."""

from .models import (
    TERMINAL_STATUSES,
    TranslationResult,
    TranslationStatus,
    TranslationTask,
    generate_task_id,
    group_results,
)
from .progress import compute_progress
from .store import TaskStore
from .queue import TranslationTaskQueue, normalize_content

__all__ = [
    "TERMINAL_STATUSES",
    "TranslationResult",
    "TranslationStatus",
    "TranslationTask",
    "generate_task_id",
    "group_results",
    "compute_progress",
    "TaskStore",
    "TranslationTaskQueue",
    "normalize_content",
]
