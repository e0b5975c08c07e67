"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, backend.api, backend.observability, backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from backend.configs import Settings, get_settings, validate_config
from backend.api import api_router, health_router, info_router
from backend.api.deps import ServiceContainer
from backend.boundary.db.create_tables import create_all_tables
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    RequestLoggingMiddleware,
    CorrelationMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    Builds the service container once; handles inside it are created lazily.
    """
    # Startup
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    validate_config(settings)

    services = ServiceContainer(settings)
    app.state.services = services

    if settings.database.create_tables_on_startup:
        await create_all_tables(services.engine)
        logger.info("Database tables created")

    logger.info("Application startup complete: service container ready")

    yield

    # Shutdown
    await services.aclose()
    logger.info("Application shutdown")


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <message>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{__name__}:validation_exception_handler - {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings override, mainly for tests

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Datagent API",
        description="Chat assistant that visualizes and cleans uploaded CSV data",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Last added runs first: correlation ID is bound before the request is logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routes
    app.include_router(info_router, prefix="/api")
    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
