"""Client helpers for polling translation tasks."""

from .fetchers import HttpStatusFetcher, LocalStatusFetcher
from .poller import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL_S, StatusFetcher, TaskPoller

__all__ = [
    "TaskPoller",
    "StatusFetcher",
    "LocalStatusFetcher",
    "HttpStatusFetcher",
    "DEFAULT_POLL_INTERVAL_S",
    "DEFAULT_MAX_ATTEMPTS",
]
