"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from food_catalog.api.foods import router as foods_router
from food_catalog.app_logging import configure_logging
from food_catalog.config import parse_cors_origins
from food_catalog.containers import AppContainer
from food_catalog.domain.errors import FoodCatalogError, StorageUnavailableError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await run_in_threadpool(app.state.container.food_service.check_storage)
        except StorageUnavailableError:
            logger.exception("Error connecting to food storage")
        else:
            logger.info("Connected to food storage")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FoodCatalogError)
    async def food_catalog_error_handler(
        request: Request, exc: FoodCatalogError
    ) -> JSONResponse:
        """Render domain errors as a message body."""
        context = {"path": request.url.path, "error": exc.message}
        if isinstance(exc, StorageUnavailableError):
            logger.error("Storage failure", extra=context)
        else:
            logger.info("Rejected request", extra=context)
        return JSONResponse(
            status_code=exc.status_code, content={"message": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render malformed request bodies as 400 responses."""
        return JSONResponse(
            status_code=400, content={"message": _format_request_errors(exc)}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Use the message body shape for framework-raised errors too."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=exc.headers,
        )

    app.include_router(foods_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _format_request_errors(exc: RequestValidationError) -> str:
    """Summarize FastAPI request validation errors."""
    reasons = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        reasons.append(f"{field}: {error.get('msg', 'invalid')}")
    return "Invalid request: " + ", ".join(reasons)
