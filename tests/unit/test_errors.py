"""Tests for the error taxonomy and provider error classification."""

import pytest

from translation_service.errors import (
    ContentTranslationError,
    PollTimeoutError,
    ProviderError,
    ProviderErrorType,
    TaskFailedError,
    TaskNotFoundError,
    TranslationServiceError,
    ValidationError,
    classify_error,
    create_provider_error,
    is_retryable,
)


class TestErrorHierarchy:
    """Tests for exception types and codes."""

    @pytest.mark.parametrize(
        "error, code",
        [
            (ValidationError("bad"), "VALIDATION_ERROR"),
            (ProviderError("boom"), "PROVIDER_ERROR"),
            (ContentTranslationError("broken"), "CONTENT_TRANSLATION_ERROR"),
            (TaskNotFoundError("trans_1_abc"), "TASK_NOT_FOUND"),
            (PollTimeoutError("trans_1_abc", 3), "POLL_TIMEOUT"),
            (TaskFailedError("trans_1_abc", "all failed"), "TASK_FAILED"),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, TranslationServiceError)
        assert error.code == code

    def test_task_not_found_carries_id(self):
        error = TaskNotFoundError("trans_1_abc")
        assert error.task_id == "trans_1_abc"
        assert error.details == {"task_id": "trans_1_abc"}
        assert "trans_1_abc" in error.message

    def test_poll_timeout_is_not_task_failure(self):
        """Test client timeout and task failure are distinct types."""
        timeout = PollTimeoutError("t", attempts=60, last_status="translating")
        assert not isinstance(timeout, TaskFailedError)
        assert timeout.attempts == 60
        assert timeout.last_status == "translating"

    def test_task_failed_default_message(self):
        error = TaskFailedError("t", None)
        assert error.message == "Translation task t failed"


class TestClassifyError:
    """Tests for classify_error and is_retryable."""

    def test_timeout(self):
        assert classify_error(TimeoutError("slow")) == ProviderErrorType.TIMEOUT

    def test_connection_error(self):
        assert classify_error(ConnectionError("refused")) == ProviderErrorType.PROVIDER_ERROR

    def test_value_error_is_unknown(self):
        """Test a provider ValueError is not labelled as empty input."""
        assert classify_error(ValueError("bad response")) == ProviderErrorType.UNKNOWN

    def test_unknown(self):
        assert classify_error(RuntimeError("?")) == ProviderErrorType.UNKNOWN

    def test_provider_error_keeps_type(self):
        error = ProviderError("x", error_type=ProviderErrorType.UNSUPPORTED_LANGUAGE_PAIR)
        assert classify_error(error) == ProviderErrorType.UNSUPPORTED_LANGUAGE_PAIR

    def test_retryable_types(self):
        assert is_retryable(ProviderErrorType.TIMEOUT)
        assert is_retryable(ProviderErrorType.PROVIDER_ERROR)
        assert not is_retryable(ProviderErrorType.EMPTY_INPUT)
        assert not is_retryable(ProviderErrorType.UNKNOWN)


class TestCreateProviderError:
    """Tests for create_provider_error."""

    def test_wraps_with_cause(self):
        original = ConnectionError("refused")
        error = create_provider_error(original)

        assert isinstance(error, ProviderError)
        assert error.__cause__ is original
        assert error.error_type == ProviderErrorType.PROVIDER_ERROR
        assert error.retryable is True
        assert error.details["exception_type"] == "ConnectionError"

    def test_provider_error_returned_unchanged(self):
        error = ProviderError("x")
        assert create_provider_error(error) is error

    def test_empty_message_uses_type_name(self):
        assert create_provider_error(RuntimeError()).message == "RuntimeError"
