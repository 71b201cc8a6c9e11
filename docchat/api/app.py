"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error handlers and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docchat.agent.errors import (
    ConnectionFailedError,
    DispatchError,
    MissingCredentialError,
    RetriesExhaustedError,
)
from docchat.api.chat import router as chat_router
from docchat.api.documents import router as documents_router
from docchat.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _status_for(exc: DispatchError) -> int:
    """HTTP status returned to API clients for a dispatch failure."""
    if isinstance(exc, MissingCredentialError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, RetriesExhaustedError):
        return status.HTTP_429_TOO_MANY_REQUESTS
    if isinstance(exc, ConnectionFailedError):
        return status.HTTP_504_GATEWAY_TIMEOUT
    return status.HTTP_502_BAD_GATEWAY


async def dispatch_error_handler(request: Request, exc: DispatchError) -> JSONResponse:
    """Render a DispatchError as an ErrorResponse body."""
    code = _status_for(exc)
    logger.warning(f"{request.url.path} failed with {exc.kind}: {exc.message}")
    body = ErrorResponse(detail=exc.message, error=exc.kind)
    return JSONResponse(status_code=code, content=body.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Document Context Chat API...")
    yield
    logger.info("Shutting down Document Context Chat API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Document Context Chat API",
        description=(
            "Chat with a Google generative model, optionally grounded in an "
            "uploaded text or PDF document. Rate-limited requests are retried "
            "with exponential backoff."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.add_exception_handler(DispatchError, dispatch_error_handler)

    application.include_router(chat_router)
    application.include_router(documents_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "docchat"}

    return application


app = create_app()
