"""Main entry point for the translation service.

Starts the FastAPI app with uvicorn.
"""

import uvicorn

from .api import create_app
from .config import get_config
from .observability.logger import get_logger, setup_logging
from .service import TranslationService

logger = get_logger(__name__)


def main() -> None:
    """Main entry point for the translation service."""
    config = get_config()
    setup_logging(
        level=config.observability.log_level,
        json_format=config.observability.json_logs,
    )

    service = TranslationService.from_config(config.pipeline)
    app = create_app(service)

    logger.info(
        "starting_translation_service",
        host=config.server.host,
        port=config.server.port,
        provider=config.pipeline.provider,
    )

    uvicorn_config = uvicorn.Config(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.observability.log_level.lower(),
        access_log=True,
    )
    server = uvicorn.Server(uvicorn_config)
    server.run()


if __name__ == "__main__":
    main()
