"""Logging and metrics for the translation service."""

from .logger import bind_task_context, get_logger, setup_logging

__all__ = ["setup_logging", "get_logger", "bind_task_context"]
