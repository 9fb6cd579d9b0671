"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from whisked.api.favorites import router as favorites_router
from whisked.api.meals import router as meals_router
from whisked.api.offline_meals import router as offline_meals_router
from whisked.app_logging import configure_logging
from whisked.containers import AppContainer
from whisked.domain.errors import (
    MealServiceError,
    MealServiceErrorKind,
    PersistenceError,
)

CLIENT_CLOSED_REQUEST = 499

_STATUS_BY_KIND = {
    MealServiceErrorKind.NO_CONNECTION: 503,
    MealServiceErrorKind.TIMEOUT: 504,
    MealServiceErrorKind.INVALID_RESPONSE: 502,
    MealServiceErrorKind.MEAL_NOT_FOUND: 404,
    MealServiceErrorKind.NO_MEALS_FOUND: 404,
    MealServiceErrorKind.NETWORK_ERROR: 502,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Whisked", lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(favorites_router)
    app.include_router(offline_meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(MealServiceError)
    async def meal_service_error_handler(
        request: Request, exc: MealServiceError
    ) -> Response:
        if exc.is_silent:
            logger.debug("Silent meal error on %s: %r", request.url.path, exc)
            return Response(status_code=CLIENT_CLOSED_REQUEST)
        return JSONResponse(
            status_code=status_for_error(exc),
            content={
                "error": exc.kind.value,
                "message": exc.message,
                "failure_reason": exc.failure_reason,
                "recovery_suggestion": exc.recovery_suggestion,
            },
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(
        request: Request, exc: PersistenceError
    ) -> Response:
        logger.error("Persistence failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"error": "persistence_error", "message": str(exc)},
        )

    return app


def status_for_error(error: MealServiceError) -> int:
    """Pick the HTTP status used to report a domain error."""
    if error.kind is MealServiceErrorKind.SERVER_ERROR:
        code = error.status_code or 0
        return code if 400 <= code <= 599 else 502  # noqa: PLR2004
    if error.is_silent:
        return CLIENT_CLOSED_REQUEST
    return _STATUS_BY_KIND[error.kind]
