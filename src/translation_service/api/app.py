"""FastAPI application for the translation service.

Thin HTTP surface over TranslationService: Submit and Poll routes, the
supported-language listing, health and Prometheus metrics. The service is
created by the caller and injected; the app's lifespan starts and stops its
worker.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .. import __version__
from ..errors import TaskNotFoundError, TranslationServiceError, ValidationError
from ..languages import LANGUAGE_NAMES
from ..messages import error_envelope, success_envelope
from ..observability.logger import get_logger
from ..service import TranslationService

logger = get_logger(__name__)

API_PREFIX = "/api/translation"


def create_app(service: TranslationService) -> FastAPI:
    """Create the FastAPI application.

    Args:
        service: Service instance the routes delegate to

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await service.start()
        try:
            yield
        finally:
            await service.shutdown()

    app = FastAPI(
        title="Translation Service",
        description="Multi-language content translation with background tasks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "translation-service",
            "provider": service.provider.component_instance,
            "providerReady": service.provider.is_ready,
            "workerRunning": service.queue.is_running,
            "queued": service.queue.pending_count,
        }

    @app.get("/metrics")
    async def metrics_endpoint():
        """Prometheus metrics endpoint."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.post(f"{API_PREFIX}/auto-translate")
    async def submit(request: Request):
        """Submit content for translation (sync or async)."""
        try:
            payload: Any = await request.json()
        except ValueError as e:
            raise ValidationError("Request body must be valid JSON") from e
        response = await service.submit(payload)
        return success_envelope(response)

    @app.get(f"{API_PREFIX}/auto-translate")
    async def poll(task_id: str | None = Query(default=None, alias="taskId")):
        """Poll a task by ``?taskId=``."""
        return success_envelope(service.get_task_status(task_id))

    @app.get(f"{API_PREFIX}/tasks/{{task_id}}")
    async def get_task(task_id: str):
        """Poll a task by path."""
        return success_envelope(service.get_task_status(task_id))

    @app.get(f"{API_PREFIX}/languages")
    async def list_languages():
        """List supported languages with display names."""
        languages = [
            {"code": code.value, "nativeName": native, "englishName": english}
            for code, (native, english) in LANGUAGE_NAMES.items()
        ]
        return {
            "success": True,
            "data": {
                "languages": languages,
                "defaultSourceLanguage": service.default_source_language.value,
            },
        }

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("request_rejected", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=400,
            content=error_envelope(exc.code, exc.message, exc.details or None),
        )

    @app.exception_handler(TaskNotFoundError)
    async def handle_task_not_found(request: Request, exc: TaskNotFoundError):
        return JSONResponse(
            status_code=404,
            content=error_envelope(exc.code, exc.message, exc.details or None),
        )

    @app.exception_handler(TranslationServiceError)
    async def handle_service_error(request: Request, exc: TranslationServiceError):
        logger.error("request_failed", path=request.url.path, code=exc.code, error=exc.message)
        return JSONResponse(
            status_code=500,
            content=error_envelope("INTERNAL_ERROR", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("request_crashed", path=request.url.path, error_type=type(exc).__name__)
        return JSONResponse(
            status_code=500,
            content=error_envelope("INTERNAL_ERROR", "Internal server error"),
        )
