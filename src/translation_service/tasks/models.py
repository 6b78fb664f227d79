"""
Pydantic data models for translation tasks.

Task records are frozen; the store replaces a record on every change so
readers only ever see whole snapshots.
"""

import secrets
import string
import time
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..languages import SupportedLanguage

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class TranslationStatus(str, Enum):
    """Status of a task or of a single translation result."""

    PENDING = "pending"
    TRANSLATING = "translating"
    COMPLETED = "completed"
    FAILED = "failed"
    NEEDS_UPDATE = "needs_update"  # source text changed after translation

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES: frozenset[TranslationStatus] = frozenset(
    {TranslationStatus.COMPLETED, TranslationStatus.FAILED}
)

# Task-level state machine. NEEDS_UPDATE only applies to individual results.
VALID_TASK_TRANSITIONS: dict[TranslationStatus, set[TranslationStatus]] = {
    TranslationStatus.PENDING: {TranslationStatus.TRANSLATING},
    TranslationStatus.TRANSLATING: {TranslationStatus.COMPLETED, TranslationStatus.FAILED},
    TranslationStatus.COMPLETED: set(),  # Terminal state
    TranslationStatus.FAILED: set(),  # Terminal state
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_task_id() -> str:
    """Return an opaque task id, e.g. ``trans_1718000000000_k3j9x0a2b``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"trans_{int(time.time() * 1000)}_{suffix}"


# -----------------------------------------------------------------------------
# Result Model
# -----------------------------------------------------------------------------


class TranslationResult(BaseModel):
    """Outcome of one attempted (field, target language) pair."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    field: str = Field(..., description="Content field name (e.g., 'title')")
    language: SupportedLanguage = Field(..., description="Target language")
    text: str = Field(..., description="Translated text, or the source text on fallback")
    status: TranslationStatus = Field(..., description="COMPLETED or FAILED")
    quality_score: int | None = Field(
        default=None, ge=0, le=100, description="Heuristic quality score"
    )
    translated_at: datetime = Field(default_factory=utcnow)
    needs_review: bool | None = Field(
        default=None, description="Flag for human review (fallbacks, low scores)"
    )
    error: str | None = Field(default=None, description="Provider error message (FAILED only)")

    @property
    def is_fallback(self) -> bool:
        """True if the source text was used in place of a translation."""
        return self.status == TranslationStatus.FAILED


# -----------------------------------------------------------------------------
# Task Model
# -----------------------------------------------------------------------------


class TranslationTask(BaseModel):
    """A submitted translation batch and its accumulated results."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=generate_task_id)
    source_language: SupportedLanguage
    target_languages: tuple[SupportedLanguage, ...]
    content: dict[str, str] = Field(
        default_factory=dict, description="Field name -> non-empty source text"
    )
    status: TranslationStatus = TranslationStatus.PENDING
    results: tuple[TranslationResult, ...] = ()
    created_at: datetime = Field(default_factory=utcnow)
    started_at: datetime | None = None
    completed_at: datetime | None = None
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def expected_result_count(self) -> int:
        return len(self.target_languages) * len(self.content)

    @property
    def failed_results(self) -> list[TranslationResult]:
        return [r for r in self.results if r.status == TranslationStatus.FAILED]

    def can_transition_to(self, new_status: TranslationStatus) -> bool:
        """Check whether the task may move to new_status.

        Valid transitions:
        - PENDING -> TRANSLATING (worker picks the task up)
        - TRANSLATING -> COMPLETED (all pairs resolved)
        - TRANSLATING -> FAILED (hard translator error)
        """
        return new_status in VALID_TASK_TRANSITIONS.get(self.status, set())

    @property
    def translations(self) -> dict[str, dict[str, str]]:
        """Results regrouped like a synchronous Submit (see group_results)."""
        return group_results(self.results, self.source_language, self.content, self.target_languages)


def group_results(
    results: Iterable[TranslationResult],
    source_language: SupportedLanguage | str,
    content: Mapping[str, str],
    target_languages: Iterable[SupportedLanguage | str] | None = None,
) -> dict[str, dict[str, str]]:
    """Regroup a flat result list as field -> {language code -> text}.

    The source language entry comes first. Targets follow in
    target_languages order when given, otherwise in result order. Pairs with
    no result yet are left out.
    """
    source_code = SupportedLanguage(source_language).value
    by_pair: dict[tuple[str, str], str] = {}
    seen_languages: list[str] = []
    for result in results:
        code = result.language.value
        by_pair[(result.field, code)] = result.text
        if code not in seen_languages:
            seen_languages.append(code)

    if target_languages is None:
        order = seen_languages
    else:
        order = [SupportedLanguage(t).value for t in target_languages]

    grouped: dict[str, dict[str, str]] = {}
    for field, source_text in content.items():
        entry = {source_code: source_text}
        for code in order:
            if (field, code) in by_pair:
                entry[code] = by_pair[(field, code)]
        grouped[field] = entry
    return grouped
