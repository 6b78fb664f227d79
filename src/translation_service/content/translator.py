"""
Content translator.

Translates a flat mapping of field name -> source text into every target
language, one provider call per (field, language) pair. A failed pair falls
back to the source text and is recorded as FAILED; the rest of the batch
carries on.
"""

import asyncio
import inspect
import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from ..errors import (
    ContentTranslationError,
    ProviderError,
    ProviderErrorType,
    create_provider_error,
)
from ..languages import SupportedLanguage, is_supported
from ..observability.logger import get_logger
from ..observability.metrics import record_pair_outcome
from ..provider.interface import TranslationProvider
from ..tasks.models import TranslationResult, TranslationStatus
from .scorer import QualityScorer

logger = get_logger(__name__)

# language code -> text for one field; the source language entry is always present
MultiLanguageContent = dict[str, str]
ResultCallback = Callable[[TranslationResult], Awaitable[None] | None]


class ContentTranslator:
    """Fans content fields out to the provider, isolating failures per pair."""

    def __init__(
        self,
        provider: TranslationProvider,
        scorer: QualityScorer | None = None,
        timeout_s: float | None = 30.0,
        max_concurrency: int = 1,
    ):
        """Initialize the translator.

        Args:
            provider: Provider used for every pair
            scorer: Quality scorer (defaults to QualityScorer())
            timeout_s: Per-call deadline in seconds, None to wait indefinitely
            max_concurrency: Pairs translated at once (1 = sequential)
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._provider = provider
        self._scorer = scorer or QualityScorer()
        self._timeout_s = timeout_s
        self._max_concurrency = max_concurrency

    @property
    def provider(self) -> TranslationProvider:
        return self._provider

    async def translate_text(
        self,
        text: str,
        source_language: SupportedLanguage,
        target_language: SupportedLanguage,
    ) -> str:
        """Translate one string.

        Empty input returns "" and identical languages return the text, both
        without calling the provider.

        Raises:
            ProviderError: The provider failed or exceeded the deadline.
        """
        if not text or not text.strip():
            return ""
        if source_language == target_language:
            return text

        call = asyncio.to_thread(
            self._provider.translate, text, source_language.value, target_language.value
        )
        try:
            if self._timeout_s is None:
                return await call
            return await asyncio.wait_for(call, timeout=self._timeout_s)
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"Provider call exceeded {self._timeout_s}s deadline",
                error_type=ProviderErrorType.TIMEOUT,
            ) from e
        except Exception as e:
            raise create_provider_error(e) from e

    async def translate_content(
        self,
        content: Mapping[str, Any],
        source_language: SupportedLanguage | str,
        target_languages: Iterable[SupportedLanguage | str],
        on_result: ResultCallback | None = None,
    ) -> dict[str, MultiLanguageContent]:
        """Translate every non-empty field into every target language.

        Args:
            content: Field name -> source text; empty fields are skipped
            source_language: Language of the source text
            target_languages: Targets in the order they should be attempted;
                duplicates and the source language are ignored
            on_result: Called with each pair's TranslationResult as it resolves

        Returns:
            Field name -> {language code -> text}, source entry first, targets
            in caller order. Failed pairs hold the source text.

        Raises:
            ContentTranslationError: Malformed input or an unexpected error
                outside the per-pair scope.
        """
        source, targets, fields = self._prepare(content, source_language, target_languages)

        try:
            outcomes = await self._run_pairs(fields, source, targets, on_result)
        except ContentTranslationError:
            raise
        except Exception as e:
            raise ContentTranslationError(
                f"Content translation aborted: {type(e).__name__}: {e}"
            ) from e

        results: dict[str, MultiLanguageContent] = {}
        for field, source_text in fields.items():
            entry: MultiLanguageContent = {source.value: source_text}
            for target in targets:
                entry[target.value] = outcomes[(field, target)].text
            results[field] = entry
        return results

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _prepare(
        self,
        content: Mapping[str, Any],
        source_language: SupportedLanguage | str,
        target_languages: Iterable[SupportedLanguage | str],
    ) -> tuple[SupportedLanguage, list[SupportedLanguage], dict[str, str]]:
        if not isinstance(content, Mapping):
            raise ContentTranslationError(
                f"Content must be a mapping of field name to text, got {type(content).__name__}"
            )
        if not is_supported(source_language):
            raise ContentTranslationError(f"Unsupported source language: {source_language!r}")
        source = SupportedLanguage(source_language)

        targets: list[SupportedLanguage] = []
        for code in target_languages:
            if not is_supported(code):
                raise ContentTranslationError(f"Unsupported target language: {code!r}")
            language = SupportedLanguage(code)
            if language != source and language not in targets:
                targets.append(language)

        fields: dict[str, str] = {}
        for field, text in content.items():
            if not isinstance(field, str):
                raise ContentTranslationError(f"Field names must be strings, got {field!r}")
            if text is None:
                continue
            if not isinstance(text, str):
                raise ContentTranslationError(
                    f"Field {field!r} must be a string, got {type(text).__name__}"
                )
            if text.strip():
                fields[field] = text
        return source, targets, fields

    async def _run_pairs(
        self,
        fields: dict[str, str],
        source: SupportedLanguage,
        targets: list[SupportedLanguage],
        on_result: ResultCallback | None,
    ) -> dict[tuple[str, SupportedLanguage], TranslationResult]:
        outcomes: dict[tuple[str, SupportedLanguage], TranslationResult] = {}

        async def run(field: str, target: SupportedLanguage) -> None:
            result = await self._translate_pair(field, fields[field], source, target)
            outcomes[(field, target)] = result
            if on_result is not None:
                maybe_awaitable = on_result(result)
                if inspect.isawaitable(maybe_awaitable):
                    await maybe_awaitable

        pairs = [(field, target) for field in fields for target in targets]

        if self._max_concurrency == 1:
            for field, target in pairs:
                await run(field, target)
            return outcomes

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(field: str, target: SupportedLanguage) -> None:
            async with semaphore:
                await run(field, target)

        await asyncio.gather(*(bounded(field, target) for field, target in pairs))
        return outcomes

    async def _translate_pair(
        self,
        field: str,
        source_text: str,
        source: SupportedLanguage,
        target: SupportedLanguage,
    ) -> TranslationResult:
        start_time = time.monotonic()
        try:
            text = await self.translate_text(source_text, source, target)
        except ProviderError as e:
            duration_ms = int((time.monotonic() - start_time) * 1000)
            logger.warning(
                "pair_translation_failed",
                field=field,
                source_language=source.value,
                language=target.value,
                error_type=e.error_type.value,
                error=e.message,
            )
            record_pair_outcome(target.value, TranslationStatus.FAILED.value, duration_ms)
            return TranslationResult(
                field=field,
                language=target,
                text=source_text,
                status=TranslationStatus.FAILED,
                needs_review=True,
                error=e.message,
            )

        duration_ms = int((time.monotonic() - start_time) * 1000)
        record_pair_outcome(target.value, TranslationStatus.COMPLETED.value, duration_ms)
        quality_score = self._scorer.score(text)
        return TranslationResult(
            field=field,
            language=target,
            text=text,
            status=TranslationStatus.COMPLETED,
            quality_score=quality_score,
            needs_review=self._scorer.needs_review(quality_score),
        )
