from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from src.application.container import Container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    container: Container = app.state.container
    settings = container.config()

    if settings.uses_postgres:
        try:
            await container.db_client().init()
            logger.info("Database initialized successfully")
        except Exception as e:
            # keep serving: /health reports degraded and store calls retry init
            logger.error(f"Database unavailable at startup, serving degraded: {e}")
    else:
        logger.warning("Using in-memory order store, orders are lost on restart")

    try:
        yield
    finally:
        logger.info("Shutting down application...")

        if settings.uses_postgres:
            await container.db_client().close()
        logger.info("Application shut down successfully")
