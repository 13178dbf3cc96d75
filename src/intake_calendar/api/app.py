"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from intake_calendar.api.intake import router as intake_router
from intake_calendar.app_logging import configure_logging
from intake_calendar.containers import AppContainer
from intake_calendar.domain.errors import IntakeCalendarError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(IntakeCalendarError)
    async def intake_calendar_error_handler(
        request: Request, exc: IntakeCalendarError
    ) -> JSONResponse:
        logger.info("Request failed: path=%s code=%s", request.url.path, exc.code)
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

    app.include_router(intake_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
