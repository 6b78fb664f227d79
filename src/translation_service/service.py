"""Translation service facade.

Owns one provider, translator, task store and task queue. Constructed by
the process entry point (or a test) and passed to whatever needs it; there
is no module-level instance.
"""

from collections.abc import Mapping
from typing import Any

from .config import PipelineConfig
from .content.scorer import QualityScorer
from .content.translator import ContentTranslator
from .errors import ValidationError
from .languages import SupportedLanguage
from .messages import (
    AsyncSubmitResponse,
    SyncSubmitResponse,
    TaskStatusResponse,
    parse_submit_request,
)
from .observability.logger import get_logger
from .observability.metrics import record_task_submitted
from .provider.factory import create_translation_provider
from .provider.interface import TranslationProvider
from .tasks.store import TaskStore
from .tasks.queue import TranslationTaskQueue

logger = get_logger(__name__)


class TranslationService:
    """Submit and Poll operations over an injected translation provider."""

    def __init__(
        self,
        provider: TranslationProvider,
        default_source_language: SupportedLanguage | str = SupportedLanguage.ZH,
        provider_timeout_s: float | None = 30.0,
        max_concurrency: int = 1,
        review_score_threshold: int = 70,
        max_tasks: int = 1000,
    ):
        self.provider = provider
        self.default_source_language = SupportedLanguage(default_source_language)
        self.scorer = QualityScorer(review_threshold=review_score_threshold)
        self.translator = ContentTranslator(
            provider,
            scorer=self.scorer,
            timeout_s=provider_timeout_s,
            max_concurrency=max_concurrency,
        )
        self.store = TaskStore(max_tasks=max_tasks)
        self.queue = TranslationTaskQueue(self.translator, self.store)

    @classmethod
    def from_config(
        cls,
        config: PipelineConfig,
        provider: TranslationProvider | None = None,
    ) -> "TranslationService":
        """Build a service from pipeline configuration.

        Args:
            config: Pipeline configuration
            provider: Provider override (defaults to the configured provider)
        """
        if provider is None:
            provider = create_translation_provider(
                provider=config.provider,
                auth_key=config.deepl_auth_key,
            )
        return cls(
            provider,
            default_source_language=config.default_source_language,
            provider_timeout_s=config.provider_timeout_s,
            max_concurrency=config.max_concurrency,
            review_score_threshold=config.review_score_threshold,
            max_tasks=config.max_tasks,
        )

    async def start(self) -> None:
        """Start the background worker (requires a running event loop)."""
        self.queue.start()
        logger.info(
            "translation_service_started",
            provider=self.provider.component_instance,
            default_source_language=self.default_source_language.value,
        )

    async def shutdown(self, drain: bool = False) -> None:
        """Stop the worker and release the provider."""
        await self.queue.stop(drain=drain)
        self.provider.shutdown()
        logger.info("translation_service_stopped")

    async def submit(self, payload: Mapping[str, Any]) -> SyncSubmitResponse | AsyncSubmitResponse:
        """Validate and run a Submit request.

        async=true queues a task and returns its id immediately; async=false
        translates inline and returns the best-effort mapping, with source
        text in place of any failed pair.

        Raises:
            ValidationError: Invalid payload
        """
        request = parse_submit_request(payload, self.default_source_language)

        if request.async_mode:
            task = self.queue.create_translation_task(
                request.content,
                request.source_language,
                request.target_languages,
            )
            record_task_submitted("async")
            return AsyncSubmitResponse(task_id=task.id, status=task.status)

        record_task_submitted("sync")
        results = await self.translator.translate_content(
            request.content,
            request.source_language,
            request.target_languages,
        )
        logger.info(
            "sync_translation_completed",
            source_language=request.source_language.value,
            target_languages=[t.value for t in request.target_languages],
            fields=list(results),
        )
        return SyncSubmitResponse(
            source_language=request.source_language,
            target_languages=request.target_languages,
            results=results,
        )

    def get_task_status(self, task_id: str | None) -> TaskStatusResponse:
        """Return the Poll view of a task.

        Raises:
            ValidationError: task_id missing
            TaskNotFoundError: Unknown task id
        """
        if not task_id:
            raise ValidationError("taskId is required")
        return TaskStatusResponse.from_task(self.store.get(task_id))
