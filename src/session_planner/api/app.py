"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from session_planner.api.planner import router as planner_router
from session_planner.app_logging import configure_logging
from session_planner.containers import AppContainer
from session_planner.domain.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PlannerError,
    UnauthenticatedError,
)

_ERROR_STATUS: dict[type[PlannerError], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Session planner starting: environment=%s",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(planner_router)

    async def planner_error_handler(
        request: Request, exc: PlannerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        if status_code == status.HTTP_404_NOT_FOUND:
            logger.info("Not found: %s %s", request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    for error_type in _ERROR_STATUS:
        app.add_exception_handler(error_type, planner_error_handler)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
