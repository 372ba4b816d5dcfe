import logging
import logging.config
from typing import Optional

from fastapi import FastAPI

from src.application.container import Container
from src.application.error_handlers import register_exception_handlers
from src.application.lifecycle import lifespan
from src.application.module_registry import register_modules

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings are resolved here, so a missing connection string fails
    before the server starts listening.
    """
    if container is None:
        from src.application.container import container as root_container
        container = root_container

    settings = container.config()
    logging.config.dictConfig(settings.get_logging_config())

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    register_modules(app, container)
    register_exception_handlers(app)

    logger.info(f"{settings.app_name} v{settings.app_version} configured "
                f"(order store: {settings.order_store.value})")
    return app
