"""
Request and response shapes for the Submit and Poll operations.

Wire format uses camelCase keys (``sourceLanguage``, ``taskId``) while the
Python attributes stay snake_case. Responses are wrapped in the envelope
``{"success": true, "data": {...}}``; errors in
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import ValidationError
from .languages import SupportedLanguage, default_targets, is_supported, resolve_target_languages
from .tasks.models import TranslationResult, TranslationStatus, TranslationTask, utcnow
from .tasks.progress import compute_progress
from .tasks.queue import normalize_content


class WireModel(BaseModel):
    """Base for boundary models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# -----------------------------------------------------------------------------
# Submit
# -----------------------------------------------------------------------------


class SubmitRequest(WireModel):
    """Validated Submit input."""

    content: dict[str, str]
    source_language: SupportedLanguage
    target_languages: list[SupportedLanguage]
    async_mode: bool = Field(default=False, alias="async")


class SyncSubmitResponse(WireModel):
    """Returned when Submit runs with async=false."""

    source_language: SupportedLanguage
    target_languages: list[SupportedLanguage]
    results: dict[str, dict[str, str]]
    translated_at: datetime = Field(default_factory=utcnow)


class AsyncSubmitResponse(WireModel):
    """Returned when Submit runs with async=true."""

    task_id: str
    status: TranslationStatus = TranslationStatus.PENDING
    message: str = "Translation task created and queued for background processing"


def parse_submit_request(
    payload: Any,
    default_source_language: SupportedLanguage | str = SupportedLanguage.ZH,
) -> SubmitRequest:
    """Validate a raw Submit payload.

    Defaults: ``sourceLanguage`` falls back to default_source_language and
    ``targetLanguages`` to every supported language except the source.
    Unsupported target codes are filtered out.

    Raises:
        ValidationError: Missing/invalid content, unsupported source
            language, or an empty target set after filtering.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")

    content = payload.get("content")
    if content is None or not isinstance(content, Mapping):
        raise ValidationError("content is required and must be an object")

    source_language = payload.get("sourceLanguage", payload.get("source_language"))
    if source_language is None:
        source_language = default_source_language
    if not is_supported(source_language):
        raise ValidationError(f"Unsupported source language: {source_language!r}")
    source = SupportedLanguage(source_language)

    requested = payload.get("targetLanguages", payload.get("target_languages"))
    if requested is None:
        requested = default_targets(source)
    elif isinstance(requested, (str, bytes)) or not isinstance(requested, (list, tuple)):
        raise ValidationError("targetLanguages must be a list of language codes")

    targets = resolve_target_languages(requested, source)
    if not targets:
        raise ValidationError("No valid target languages")

    async_mode = payload.get("async", False)
    if not isinstance(async_mode, bool):
        raise ValidationError("async must be a boolean")

    return SubmitRequest(
        content=normalize_content(content),
        source_language=source,
        target_languages=targets,
        async_mode=async_mode,
    )


# -----------------------------------------------------------------------------
# Poll
# -----------------------------------------------------------------------------


class TaskStatusResponse(WireModel):
    """Poll output for one task."""

    task_id: str
    status: TranslationStatus
    progress: float = Field(..., ge=0.0, le=1.0)
    results: list[TranslationResult] = Field(default_factory=list)
    translations: dict[str, dict[str, str]] = Field(
        default_factory=dict, description="Results grouped like a synchronous Submit"
    )
    source_language: SupportedLanguage | None = None
    target_languages: list[SupportedLanguage] = Field(default_factory=list)
    created_at: datetime
    completed_at: datetime | None = None
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @classmethod
    def from_task(cls, task: TranslationTask) -> "TaskStatusResponse":
        return cls(
            task_id=task.id,
            status=task.status,
            progress=compute_progress(task),
            results=list(task.results),
            translations=task.translations,
            source_language=task.source_language,
            target_languages=list(task.target_languages),
            created_at=task.created_at,
            completed_at=task.completed_at,
            error=task.error,
        )


# -----------------------------------------------------------------------------
# Envelopes
# -----------------------------------------------------------------------------


class ErrorBody(WireModel):
    code: str
    message: str = Field(..., min_length=1)
    details: dict[str, Any] | None = None


def success_envelope(data: WireModel) -> dict[str, Any]:
    return {"success": True, "data": data.to_wire()}


def error_envelope(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"success": False, "error": ErrorBody(code=code, message=message, details=details).to_wire()}
