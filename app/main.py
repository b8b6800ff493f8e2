# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# Starts the Plant Care Tracker: turns on logging, opens the plant database, plugs in the plant,
# task, calendar and dashboard endpoints and shuts everything down cleanly when the server stops.
#
# 🧪 Purpose (Technical Summary):
# Application factory (create_application) with a lifespan that configures logging, the engine and
# the session factory; registers middleware, the /api/v1 router and the handlers that render every
# failure as the {"error": {...}} envelope.
#
# 🔗 Dependencies:
# - FastAPI, uvicorn
# - app.shared.config.settings, app.shared.utils.logging
# - app.shared.infrastructure.database (connection, session)
# - app.api.v1.router, app.api.middleware
#
# 🔄 Connected Modules / Calls From:
# - uvicorn ("app.main:app") and the plant-care-api console script
# - tests (TestClient over create_application())

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware import REQUEST_ID_HEADER, ErrorHandlingMiddleware, RequestLoggingMiddleware
from app.api.middleware.error_handling import build_error_response
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import PlantCareException
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import initialize_sessions, session_manager
from app.shared.utils.logging import (
    SERVICE_NAME,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Logging first, then the engine, then the session factory; torn down in reverse."""
    settings = get_settings()
    setup_logging()
    log_startup_event(SERVICE_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    try:
        await init_database()
        initialize_sessions()
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        await close_database()
        raise
    logger.info("✅ Plant Care API ready")

    try:
        yield
    finally:
        session_manager.reset()
        await close_database()
        log_shutdown_event(SERVICE_NAME)


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # Starlette runs the last-added middleware first.
    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-Response-Time"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)


def _add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PlantCareException)
    async def plant_care_exception_handler(request: Request, exc: PlantCareException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
        return build_error_response(
            request,
            exc.status_code,
            exc.error_code,
            exc.message,
            jsonable_encoder(exc.details),
            timestamp=exc.timestamp,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return build_error_response(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            {"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unknown routes, wrong methods and explicit HTTPExceptions."""
        if exc.status_code == 404:
            return build_error_response(
                request,
                404,
                "NOT_FOUND",
                "The requested resource was not found",
                {"path": request.url.path},
            )
        return build_error_response(request, exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


def create_application() -> FastAPI:
    """
    Build the FastAPI app from the current settings.

    Interactive docs are only served with DEBUG on.
    """
    settings = get_settings()
    docs_enabled = settings.DEBUG

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    _add_middleware(app, settings)
    app.include_router(api_v1_router, prefix=API_PREFIX)
    _add_exception_handlers(app)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if docs_enabled else None,
            "health_check": f"{API_PREFIX}/health",
            "api_base": API_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Entry point for ``python -m app.main`` and the ``plant-care-api`` script."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
