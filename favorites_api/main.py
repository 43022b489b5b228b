import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import assets, favorites
from .catalog import AssetCatalog
from .schemas.error import ErrorType, ValidationErrorDetail
from .services.catalog_loader import load_seed_file
from .settings import AppSettings, get_settings
from .store import FavoritesStore
from .utils.error_responses import (
    build_error_response,
    build_validation_error_response,
    error_type_for_status,
)
from .utils.request_context import get_request_id, set_request_id

# Configure logging
logging.basicConfig(
    level=get_settings().log_level_numeric,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _validate_environment(active_settings: AppSettings | None = None) -> None:
    """Log warnings for optional configuration that was left unset."""

    candidate = active_settings or get_settings()
    warnings = candidate.optional_config_warnings()

    if warnings:
        logger.warning("=" * 60)
        logger.warning("Environment Configuration Warnings:")
        for warning in warnings:
            logger.warning(f"  • {warning}")
        logger.warning("=" * 60)


def validate_environment(active_settings: AppSettings | None = None) -> None:
    """Public wrapper ensuring CLI tools can trigger configuration validation."""

    _validate_environment(active_settings)


def _build_lifespan(active_settings: AppSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the catalog seed before serving and log shutdown."""

        validate_environment(active_settings)

        catalog: AssetCatalog = app.state.catalog
        logger.info("=" * 60)
        logger.info("Asset Favorites API %s - startup", active_settings.app_version)
        logger.info("=" * 60)
        logger.info("Catalog seed: %s", active_settings.seed_path)

        load_seed_file(
            catalog,
            active_settings.seed_path,
            validate=active_settings.validate_seed_assets,
        )
        logger.info("Catalog ready with %d assets", catalog.count())

        yield

        logger.info("Shutting down Asset Favorites API")

    return lifespan


async def add_request_id(request: Request, call_next):
    """Add unique request ID to each request for tracking."""
    request_id = str(uuid.uuid4())
    set_request_id(request_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors."""
    errors = [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(errors),
    )

    error_response = build_validation_error_response(
        message="Request validation failed",
        detail=f"{len(errors)} validation error(s)",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        path=str(request.url.path),
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap ``HTTPException`` raised by routers in the standard error payload."""
    error_type = error_type_for_status(exc.status_code)
    logger.info(
        "Request %s to %s failed with %s: %s",
        get_request_id(),
        request.url.path,
        exc.status_code,
        exc.detail,
    )

    error_response = build_error_response(
        error_type=error_type,
        message=str(exc.detail),
        detail=None,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle all other unhandled exceptions."""
    logger.exception(
        "Unhandled exception for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        type(exc).__name__,
    )

    error_response = build_error_response(
        error_type=ErrorType.INTERNAL_ERROR,
        message="Internal server error",
        detail=f"An unexpected error occurred: {type(exc).__name__}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json"),
    )


def create_app(
    *,
    catalog: AssetCatalog | None = None,
    store: FavoritesStore | None = None,
    active_settings: AppSettings | None = None,
) -> FastAPI:
    """Build the FastAPI application around an explicit catalog and store.

    The catalog must be populated before requests are served; the lifespan
    hook loads the configured seed file into it.  When ``store`` is supplied
    it must have been constructed with the same ``catalog``.
    """

    resolved_settings = active_settings or get_settings()
    if catalog is None:
        catalog = AssetCatalog()
    if store is None:
        store = FavoritesStore(catalog)

    app = FastAPI(
        title="Asset Favorites API",
        version=resolved_settings.app_version,
        description="Per-user favorites over a shared catalog of charts, insights, and audiences.",
        lifespan=_build_lifespan(resolved_settings),
        redirect_slashes=False,  # Disable automatic trailing slash redirects
    )
    app.state.settings = resolved_settings
    app.state.catalog = catalog
    app.state.favorites_store = store

    allow_origins = resolved_settings.cors_allow_origins
    if allow_origins:
        logger.info("Configured CORS allow_origins: %s", ", ".join(allow_origins))
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.middleware("http")(add_request_id)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.get("/healthz", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Simple health endpoint for readiness checks."""
        return {"status": "ok", "version": resolved_settings.app_version}

    app.include_router(assets.router, prefix="/assets", tags=["assets"])
    app.include_router(favorites.router, prefix="/users", tags=["favorites"])
    return app


app = create_app()
