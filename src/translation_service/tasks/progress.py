"""Progress computation for translation tasks."""

from .models import TranslationStatus, TranslationTask


def compute_progress(task: TranslationTask) -> float:
    """Return the fraction of attempted pairs, clamped to [0, 1].

    progress = len(results) / (len(target_languages) * len(content))

    A task with nothing to translate reports 0.0 until it is terminal and 1.0
    afterwards. COMPLETED tasks always report exactly 1.0.
    """
    if task.status == TranslationStatus.COMPLETED:
        return 1.0

    expected = task.expected_result_count
    if expected == 0:
        return 1.0 if task.is_terminal else 0.0

    return max(0.0, min(1.0, len(task.results) / expected))
