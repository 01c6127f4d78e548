"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from carbon_aegis.api import (
    emission_factors_router,
    facilities_router,
    ghg_emissions_router,
    organizations_router,
    system_router,
    taxonomy_router,
)
from carbon_aegis.core.config import get_config
from carbon_aegis.database.base import get_db_url, get_engine_kw
from carbon_aegis.database.session_manager.db_session import Database
from carbon_aegis.services.exceptions import (
    AuthorizationGapError,
    EmissionRecordBuildError,
    FormValidationError,
    InvalidTransitionError,
    LookupNotFoundError,
)

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(system_router)
    app.include_router(taxonomy_router)
    app.include_router(emission_factors_router)
    app.include_router(ghg_emissions_router)
    app.include_router(organizations_router)
    app.include_router(facilities_router)


def register_exception_handlers(app: FastAPI):
    """Map domain and framework exceptions to JSON responses."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logging.error(f"HTTPException occurred: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code, content={"detail": str(exc.detail)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": exc.errors(),
                "message": "Validation error",
            },
        )

    @app.exception_handler(FormValidationError)
    async def form_validation_handler(request: Request, exc: FormValidationError):
        logging.info(f"Rejected emission form: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": "Validation error", "fieldErrors": exc.field_errors},
        )

    @app.exception_handler(LookupNotFoundError)
    async def lookup_not_found_handler(request: Request, exc: LookupNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
        )

    @app.exception_handler(AuthorizationGapError)
    async def authorization_gap_handler(request: Request, exc: AuthorizationGapError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.message}
        )

    @app.exception_handler(EmissionRecordBuildError)
    async def record_build_handler(request: Request, exc: EmissionRecordBuildError):
        logging.error(f"Could not build emission record: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(request: Request, exc: InvalidTransitionError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logging.error(f"Exception occurred: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Handles database initialization and cleanup.
    """
    logging.info("Application startup")
    async_db_url = get_db_url(app.state.config)

    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logging.info("Initialized database")

    try:
        yield
    finally:
        await Database.dispose()
        logging.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_config = config.section("api")

    app = FastAPI(
        title=api_config.get("title", "Carbon Aegis Emissions API"),
        description=api_config.get(
            "description", "GHG emission entry, factor lookup and reporting service"
        ),
        version=api_config.get("version", "1.0.0"),
        debug=api_config.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config

    register_routers(app)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.get("cors_origins", DEFAULT_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
