"""FastAPI application for the media channel registry.

This is the web service entry point. It wires the channel routes, maps
domain errors to HTTP status codes and exposes a health check.

Error Mapping:
    InvalidInputError / RequestValidationError -> 400
    ForbiddenError -> 403
    NotFoundError -> 404
    ConflictError -> 409
    SQLAlchemyError (store failure) -> 500
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app import database
from app.exceptions import (
    ChannelRegistryError,
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from app.routes import channels
from app.utils.logging import configure_logging

log = structlog.get_logger()

SERVICE_NAME = "channel-registry"

ERROR_STATUS_CODES: dict[type[ChannelRegistryError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and release the connection pool on shutdown."""
    configure_logging()
    if database.engine is None:
        log.warning(
            "database_not_configured",
            message="DATABASE_URL not set, channel routes will fail until it is",
        )
    else:
        log.info("database_configured", dialect=database.engine.dialect.name)

    yield  # Application runs here

    if database.engine is not None:
        log.info("disposing_database_engine")
        await database.engine.dispose()


app = FastAPI(
    title="Media Channel Registry",
    description="Manages the social media channels that posts are published on",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(channels.router)


def status_code_for(exc: ChannelRegistryError) -> int:
    """Resolve the HTTP status for a domain error (500 for unmapped kinds)."""
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(ChannelRegistryError)
async def handle_channel_registry_error(
    request: Request, exc: ChannelRegistryError
) -> JSONResponse:
    status_code = status_code_for(exc)
    log.info(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
        detail=exc.message,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 (FastAPI defaults to 422)."""
    error = InvalidInputError("Invalid request", errors=jsonable_encoder(exc.errors()))
    log.info(
        "request_invalid",
        method=request.method,
        path=request.url.path,
        error_count=len(error.errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error.errors},
    )


@app.exception_handler(SQLAlchemyError)
async def handle_store_failure(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error(
        "store_failure",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal storage error"},
    )


@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> JSONResponse:
    """Health check endpoint for deployment validation.

    Returns:
        JSONResponse: Status and service name
    """
    return JSONResponse(content={"status": "healthy", "service": SERVICE_NAME})


if __name__ == "__main__":
    import uvicorn

    # Binding to 0.0.0.0 is intentional for container deployments
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",  # noqa: S104
        port=8000,
        reload=True,
    )
