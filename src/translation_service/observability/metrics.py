"""Prometheus metrics for the translation service.

Defines and exports metrics for monitoring:
- Submitted and finished tasks (counters)
- Per-pair translation outcomes (counter)
- Provider call latency (histogram)
- Queue depth and stored task count (gauges)
"""

import logging

from prometheus_client import Counter, Gauge, Histogram

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Task Metrics
# -----------------------------------------------------------------------------

translation_tasks_submitted_total = Counter(
    "translation_tasks_submitted_total",
    "Total translation tasks submitted",
    labelnames=["mode"],
)

translation_tasks_finished_total = Counter(
    "translation_tasks_finished_total",
    "Total translation tasks that reached a terminal state",
    labelnames=["status"],
)

translation_queue_depth = Gauge(
    "translation_queue_depth",
    "Number of tasks waiting in the translation queue",
)

translation_tasks_stored = Gauge(
    "translation_tasks_stored",
    "Number of task records held by the task store",
)

# -----------------------------------------------------------------------------
# Pair Metrics
# -----------------------------------------------------------------------------

translation_pairs_total = Counter(
    "translation_pairs_total",
    "Translated (field, language) pairs by outcome",
    labelnames=["language", "status"],
)

translation_provider_duration_seconds = Histogram(
    "translation_provider_duration_seconds",
    "Provider call duration in seconds",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, float("inf")),
)

# -----------------------------------------------------------------------------
# Metric Recording Functions
# -----------------------------------------------------------------------------


def record_task_submitted(mode: str) -> None:
    """Record a Submit request ("sync" or "async")."""
    try:
        translation_tasks_submitted_total.labels(mode=mode).inc()
    except Exception as e:
        logger.error(f"Failed to record task submission: {e}")


def record_task_finished(status: str) -> None:
    """Record a task reaching COMPLETED or FAILED."""
    try:
        translation_tasks_finished_total.labels(status=status).inc()
    except Exception as e:
        logger.error(f"Failed to record task finish: {e}")


def record_pair_outcome(language: str, status: str, duration_ms: int | None = None) -> None:
    """Record one (field, language) pair outcome.

    Args:
        language: Target language code
        status: Result status ("completed" or "failed")
        duration_ms: Provider call duration, when a call was made
    """
    try:
        translation_pairs_total.labels(language=language, status=status).inc()
        if duration_ms is not None:
            translation_provider_duration_seconds.observe(duration_ms / 1000.0)
    except Exception as e:
        logger.error(f"Failed to record pair outcome: {e}")


def set_queue_depth(depth: int) -> None:
    try:
        translation_queue_depth.set(depth)
    except Exception as e:
        logger.error(f"Failed to set queue depth: {e}")


def set_tasks_stored(count: int) -> None:
    try:
        translation_tasks_stored.set(count)
    except Exception as e:
        logger.error(f"Failed to set stored task count: {e}")
