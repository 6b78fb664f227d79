"""Translation task queue and worker.

Submission is synchronous and non-blocking: it stores a PENDING task and
puts its id on an asyncio.Queue. A single worker coroutine consumes the
queue, so exactly one task is translated at a time, in submission order.
"""

import asyncio
import contextlib
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import ContentTranslationError, TranslationServiceError, ValidationError
from ..languages import SupportedLanguage, is_supported, resolve_target_languages
from ..observability.logger import bind_task_context, get_logger
from ..observability.metrics import record_task_finished, set_queue_depth
from .models import TranslationResult, TranslationStatus, TranslationTask
from .store import TaskStore

if TYPE_CHECKING:
    from ..content.translator import ContentTranslator

logger = get_logger(__name__)


def normalize_content(content: Any) -> dict[str, str]:
    """Return only the non-empty string fields of content.

    Raises:
        ValidationError: If content is not a mapping of field name to text.
    """
    if not isinstance(content, Mapping):
        raise ValidationError("content must be an object mapping field names to text")

    fields: dict[str, str] = {}
    for field, text in content.items():
        if not isinstance(field, str):
            raise ValidationError(f"content field names must be strings, got {field!r}")
        if text is None:
            continue
        if not isinstance(text, str):
            raise ValidationError(f"content field {field!r} must be a string")
        if text.strip():
            fields[field] = text
    return fields


class TranslationTaskQueue:
    """FIFO queue of translation tasks drained by one worker coroutine.

    Lifecycle is owned by the caller: ``start()`` inside a running event
    loop, ``stop()`` on shutdown. Tasks submitted before ``start()`` stay
    PENDING until the worker runs.
    """

    def __init__(self, translator: "ContentTranslator", store: TaskStore) -> None:
        self._translator = translator
        self._store = store
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._worker: asyncio.Task | None = None

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def is_running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    @property
    def pending_count(self) -> int:
        """Number of tasks waiting to be picked up."""
        return self._queue.qsize()

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def create_translation_task(
        self,
        content: Mapping[str, Any],
        source_language: SupportedLanguage | str,
        target_languages: Iterable[SupportedLanguage | str],
    ) -> TranslationTask:
        """Store a PENDING task, enqueue it, and return immediately.

        Args:
            content: Field name -> source text; empty fields are dropped
            source_language: Language of the content
            target_languages: Requested targets; unsupported codes, duplicates
                and the source language are dropped

        Returns:
            Snapshot of the new task (status PENDING)

        Raises:
            ValidationError: Bad content, unsupported source language, or no
                usable target language.
        """
        if not is_supported(source_language):
            raise ValidationError(f"Unsupported source language: {source_language!r}")
        source = SupportedLanguage(source_language)

        targets = resolve_target_languages(target_languages, source)
        if not targets:
            raise ValidationError("No supported target languages")

        task = TranslationTask(
            source_language=source,
            target_languages=tuple(targets),
            content=normalize_content(content),
        )
        self._store.add(task)
        self._queue.put_nowait(task.id)
        set_queue_depth(self._queue.qsize())

        bind_task_context(logger, task.id).info(
            "task_submitted",
            source_language=source.value,
            target_languages=[t.value for t in targets],
            fields=list(task.content),
            queue_depth=self._queue.qsize(),
        )
        return task

    # -------------------------------------------------------------------------
    # Worker lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Start the worker coroutine on the running event loop."""
        if self.is_running:
            return
        loop = asyncio.get_running_loop()
        self._worker = loop.create_task(self._drain(), name="translation-worker")
        logger.info("worker_started", queued=self._queue.qsize())

    async def stop(self, drain: bool = False) -> None:
        """Stop the worker.

        Args:
            drain: Wait for queued tasks to finish before stopping
        """
        if self._worker is None:
            return
        if drain and self.is_running:
            await self.join()
        self._worker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._worker
        self._worker = None
        logger.info("worker_stopped", queued=self._queue.qsize())

    async def join(self) -> None:
        """Wait until every queued task has been processed."""
        await self._queue.join()

    async def _drain(self) -> None:
        while True:
            task_id = await self._queue.get()
            set_queue_depth(self._queue.qsize())
            try:
                await self._process_task(task_id)
            except Exception:
                # Keep draining; one task must not stop the worker
                bind_task_context(logger, task_id).exception("worker_task_crashed")
            finally:
                self._queue.task_done()

    # -------------------------------------------------------------------------
    # Task processing
    # -------------------------------------------------------------------------

    async def _process_task(self, task_id: str) -> None:
        log = bind_task_context(logger, task_id)
        try:
            task = self._store.start(task_id)
        except TranslationServiceError as e:
            log.error("task_start_rejected", error=e.message)
            return

        log.info(
            "task_started",
            fields=len(task.content),
            target_languages=len(task.target_languages),
        )

        attempted: list[TranslationResult] = []

        def on_result(result: TranslationResult) -> None:
            self._store.append_result(task_id, result)
            attempted.append(result)

        try:
            await self._translator.translate_content(
                task.content,
                task.source_language,
                task.target_languages,
                on_result=on_result,
            )
            failed = [r for r in attempted if r.status == TranslationStatus.FAILED]
            if attempted and len(failed) == len(attempted):
                raise ContentTranslationError(
                    f"All {len(attempted)} translations failed; last error: {failed[-1].error}"
                )
        except ContentTranslationError as e:
            self._store.fail(task_id, e.message)
            record_task_finished(TranslationStatus.FAILED.value)
            log.error("task_failed", error=e.message)
            return
        except Exception as e:
            self._store.fail(task_id, f"{type(e).__name__}: {e}")
            record_task_finished(TranslationStatus.FAILED.value)
            log.exception("task_failed_unexpectedly", error_type=type(e).__name__)
            return

        done = self._store.complete(task_id)
        record_task_finished(TranslationStatus.COMPLETED.value)
        log.info(
            "task_completed",
            results=len(done.results),
            fallbacks=len(done.failed_results),
        )
