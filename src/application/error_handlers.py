import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.domain.orders.errors import InvalidId, InvalidOrder, NotFound, PersistenceError

logger = logging.getLogger(__name__)


async def invalid_request_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        status_code=500,
        content={"error": "Unexpected error", "detail": exc.detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidOrder, invalid_request_handler)
    app.add_exception_handler(InvalidId, invalid_request_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
