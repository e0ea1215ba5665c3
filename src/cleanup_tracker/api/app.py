"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cleanup_tracker.api.routes import router as api_router
from cleanup_tracker.app_logging import configure_logging
from cleanup_tracker.config import parse_cors_origins
from cleanup_tracker.containers import AppContainer
from cleanup_tracker.errors import StorageError, Unauthorized


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Clean-Up Tracker API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)

    @app.exception_handler(Unauthorized)
    async def unauthorized_handler(
        request: Request, exc: Unauthorized
    ) -> JSONResponse:
        logger.info(
            "Rejected unattributed write",
            extra={"path": request.url.path},
        )
        return JSONResponse(status_code=401, content={"error": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        logger.error(
            "Document store failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
