"""
Structured logging configuration for the translation service.

Uses structlog with consistent context binding for task_id, field and
language throughout a task's lifecycle.
"""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure structlog for the service.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
        json_format: Render JSON lines when True, human-readable console output otherwise
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_task_context(
    logger: structlog.BoundLogger,
    task_id: str,
    field: str | None = None,
    language: str | None = None,
) -> structlog.BoundLogger:
    """
    Bind translation task context to logger.

    Args:
        logger: Base logger instance
        task_id: Translation task identifier
        field: Content field name (optional)
        language: Target language code (optional)

    Returns:
        BoundLogger with context bound

    Example:
        >>> logger = bind_task_context(get_logger(__name__), task_id="trans_1_abc")
        >>> logger.info("task_started")  # Includes task_id
    """
    context = {"task_id": task_id}
    if field:
        context["field"] = field
    if language:
        context["language"] = language

    return logger.bind(**context)
