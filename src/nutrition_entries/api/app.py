"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrition_entries.api.entries import router as entries_router
from nutrition_entries.api.models import HealthResponse
from nutrition_entries.app_logging import configure_logging
from nutrition_entries.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(
        title="Nutrition Tracker API",
        description="A simple nutrition tracking API using Nutritionix integration.",
        version="1.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.include_router(entries_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_error(exc)
        logger.info("Rejected request to %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health(request: Request) -> HealthResponse:
        """Report liveness and the number of stored entries."""
        state_container: AppContainer = request.app.state.container
        return HealthResponse(
            status="healthy",
            entries=state_container.entry_store.count(),
            timestamp=datetime.now(tz=UTC),
        )

    return app


def _format_validation_error(exc: RequestValidationError) -> str:
    """Return a short message describing the first validation failure."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message
