"""
Error taxonomy for the translation service.

Maps upstream provider exceptions to ProviderErrorType with a retryable
classification, and defines the exceptions raised across the service:

- ValidationError: bad input, surfaced immediately to the caller
- ProviderError: a single provider call failed (contained per pair)
- ContentTranslationError: structural failure of a batch (task-level FAILED)
- TaskNotFoundError: poll for an unknown task id
- InvalidTaskTransitionError: illegal task state change
- PollTimeoutError: client-side poll gave up (distinct from task failure)
- TaskFailedError: client-side view of a task that reached FAILED
"""

from enum import Enum
from typing import Any

__all__ = [
    "ProviderErrorType",
    "TranslationServiceError",
    "ValidationError",
    "ProviderError",
    "ContentTranslationError",
    "TaskNotFoundError",
    "InvalidTaskTransitionError",
    "PollTimeoutError",
    "TaskFailedError",
    "classify_error",
    "is_retryable",
    "create_provider_error",
]


class ProviderErrorType(str, Enum):
    """Classification of provider failures."""

    EMPTY_INPUT = "empty_input"
    UNSUPPORTED_LANGUAGE_PAIR = "unsupported_language_pair"
    PROVIDER_ERROR = "provider_error"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


_RETRYABLE_ERRORS = {
    ProviderErrorType.TIMEOUT,
    ProviderErrorType.PROVIDER_ERROR,
}

# DeepL exception types (lazy import to avoid import errors if deepl not installed)
_DEEPL_AUTH_EXCEPTIONS: tuple[type, ...] = ()
_DEEPL_QUOTA_EXCEPTIONS: tuple[type, ...] = ()
_DEEPL_RATE_LIMIT_EXCEPTIONS: tuple[type, ...] = ()
_DEEPL_CONNECTION_EXCEPTIONS: tuple[type, ...] = ()
_DEEPL_BASE_EXCEPTION: type | None = None

try:
    import deepl

    _DEEPL_BASE_EXCEPTION = deepl.DeepLException
    _DEEPL_AUTH_EXCEPTIONS = (deepl.AuthorizationException,)
    _DEEPL_QUOTA_EXCEPTIONS = (deepl.QuotaExceededException,)
    _DEEPL_RATE_LIMIT_EXCEPTIONS = (deepl.TooManyRequestsException,)
    _DEEPL_CONNECTION_EXCEPTIONS = (deepl.ConnectionException,)
except ImportError:
    pass


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class TranslationServiceError(Exception):
    """Base class for all translation service errors."""

    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TranslationServiceError):
    """Caller supplied invalid input. Never retried."""

    code = "VALIDATION_ERROR"


class ProviderError(TranslationServiceError):
    """A single provider call failed.

    The upstream exception is kept as ``__cause__`` when raised with
    ``raise ... from exc``.
    """

    code = "PROVIDER_ERROR"

    def __init__(
        self,
        message: str,
        error_type: ProviderErrorType = ProviderErrorType.PROVIDER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.error_type = error_type

    @property
    def retryable(self) -> bool:
        return is_retryable(self.error_type)


class ContentTranslationError(TranslationServiceError):
    """Batch orchestration failed as a whole."""

    code = "CONTENT_TRANSLATION_ERROR"


class TaskNotFoundError(TranslationServiceError):
    """No task exists with the given id."""

    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str):
        super().__init__(f"Translation task not found: {task_id}", {"task_id": task_id})
        self.task_id = task_id


class InvalidTaskTransitionError(TranslationServiceError):
    """A task status change would move backwards or leave a terminal state."""

    code = "INVALID_TRANSITION"


class PollTimeoutError(TranslationServiceError):
    """Client gave up polling before the task reached a terminal state."""

    code = "POLL_TIMEOUT"

    def __init__(self, task_id: str, attempts: int, last_status: str | None = None):
        super().__init__(
            f"Translation task {task_id} did not finish after {attempts} polls",
            {"task_id": task_id, "attempts": attempts, "last_status": last_status},
        )
        self.task_id = task_id
        self.attempts = attempts
        self.last_status = last_status


class TaskFailedError(TranslationServiceError):
    """Task reached FAILED, as reported by the service."""

    code = "TASK_FAILED"

    def __init__(self, task_id: str, error: str | None):
        super().__init__(error or f"Translation task {task_id} failed", {"task_id": task_id})
        self.task_id = task_id
        self.error = error


# -----------------------------------------------------------------------------
# Provider error classification
# -----------------------------------------------------------------------------


def classify_error(exception: Exception) -> ProviderErrorType:
    """Classify a Python exception to a ProviderErrorType.

    Handles DeepL-specific exceptions when the deepl library is available.

    Args:
        exception: The exception to classify

    Returns:
        The corresponding ProviderErrorType
    """
    if isinstance(exception, ProviderError):
        return exception.error_type

    if _DEEPL_BASE_EXCEPTION and isinstance(exception, _DEEPL_BASE_EXCEPTION):
        if _DEEPL_AUTH_EXCEPTIONS and isinstance(exception, _DEEPL_AUTH_EXCEPTIONS):
            return ProviderErrorType.PROVIDER_ERROR
        if _DEEPL_QUOTA_EXCEPTIONS and isinstance(exception, _DEEPL_QUOTA_EXCEPTIONS):
            return ProviderErrorType.PROVIDER_ERROR
        if _DEEPL_RATE_LIMIT_EXCEPTIONS and isinstance(exception, _DEEPL_RATE_LIMIT_EXCEPTIONS):
            return ProviderErrorType.TIMEOUT  # Rate limiting is retryable
        if _DEEPL_CONNECTION_EXCEPTIONS and isinstance(exception, _DEEPL_CONNECTION_EXCEPTIONS):
            return ProviderErrorType.PROVIDER_ERROR
        return ProviderErrorType.PROVIDER_ERROR

    if isinstance(exception, TimeoutError):
        return ProviderErrorType.TIMEOUT
    elif isinstance(exception, ConnectionError):
        return ProviderErrorType.PROVIDER_ERROR
    else:
        return ProviderErrorType.UNKNOWN


def is_retryable(error_type: ProviderErrorType) -> bool:
    """Determine if an error type is worth retrying.

    Retryable errors are transient (TIMEOUT, PROVIDER_ERROR). The service
    itself never retries; the flag is recorded for operators and callers.
    """
    return error_type in _RETRYABLE_ERRORS


def create_provider_error(exception: Exception) -> ProviderError:
    """Wrap an arbitrary exception as a ProviderError.

    ProviderError instances are returned unchanged.

    Args:
        exception: The exception to convert

    Returns:
        ProviderError with classified type; the original is chained as __cause__
    """
    if isinstance(exception, ProviderError):
        return exception

    error_type = classify_error(exception)
    message = str(exception) if str(exception) else f"{type(exception).__name__}"

    error = ProviderError(
        message=message,
        error_type=error_type,
        details={"exception_type": type(exception).__name__},
    )
    error.__cause__ = exception
    return error
