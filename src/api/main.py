from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware import BodySizeLimitMiddleware
from src.api.models import HealthResponse
from src.api.routes.extraction import router as extraction_router
from src.config import ConfigurationError, Settings, get_settings
from src.extraction.errors import ErrorKind, classify_kind

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Passing ``settings`` pins them for every request; otherwise the cached
    environment settings are used.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Refuse to serve without a provider credential.
        settings.completion_config()
        logger.info("Health check: http://localhost:%d/health", settings.api_port)
        yield

    app = FastAPI(
        title="Action Item Extractor API",
        description="Extract structured action items from meeting notes",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(extraction_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return HealthResponse(timestamp=now.replace("+00:00", "Z"))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and wrong methods are both reported as a missing endpoint.
        if exc.status_code in (404, 405):
            status, error = classify_kind(ErrorKind.ROUTE_NOT_FOUND)
            return JSONResponse(status_code=status, content=error)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # A body that is not a JSON object carries no usable notes.
        status, error = classify_kind(ErrorKind.INVALID_TYPE)
        logger.info("Rejected request (%d): %s", status, error["error"])
        return JSONResponse(status_code=status, content=error)

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Provider is not configured: %s", exc)
        status, error = classify_kind(ErrorKind.PROVIDER_AUTH)
        return JSONResponse(status_code=status, content=error)

    return app


app = create_app()


def run() -> None:
    """Console entry point: check configuration, then serve with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings.completion_config()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    logger.info("Server running on port %d", settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
