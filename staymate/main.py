import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import favorites, inspected, properties, search, session
from .schemas.error import ErrorType, ValidationErrorDetail
from .services.catalog import DatasetError, PropertyCatalog, load_catalog
from .services.dependencies import build_presentation_service
from .services.session import ListingSession
from .settings import AppSettings, get_settings
from .utils.error_responses import (
    build_error_response,
    build_validation_error_response,
)
from .utils.request_context import (
    REQUEST_ID_HEADER,
    get_request_id,
    resolve_request_id,
    set_request_id,
)

_settings = get_settings()

# Configure logging
logging.basicConfig(
    level=_settings.log_level_numeric,
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


def validate_environment() -> None:
    """Public wrapper ensuring CLI tools can trigger configuration validation."""

    _validate_environment()


def configure_state(
    target: FastAPI,
    active_settings: AppSettings,
    *,
    catalog: PropertyCatalog | None = None,
) -> ListingSession:
    """Load the catalog (unless supplied) and attach session services to ``target``."""

    resolved_catalog = catalog if catalog is not None else load_catalog(active_settings.dataset_path)
    listing_session = ListingSession(resolved_catalog)
    target.state.listing_session = listing_session
    target.state.presentation_service = build_presentation_service(active_settings)
    return listing_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    active_settings = get_settings()
    _validate_environment(active_settings)

    logger.info("=" * 60)
    logger.info("StayMate API - Catalog Preflight Check")
    logger.info("=" * 60)
    logger.info("Dataset: %s", active_settings.dataset_path)

    listing_session = configure_state(app, active_settings)
    flagged = listing_session.catalog.unresolved_date_ids
    if flagged:
        logger.warning(
            "%d listing(s) have unresolvable added dates: %s",
            len(flagged),
            ", ".join(flagged),
        )
    logger.info("=" * 60)

    yield

    logger.info("Shutting down StayMate API")


app = FastAPI(
    title="StayMate API",
    version="0.1.0",
    description="Browse, filter and favorite listings from a static property catalog.",
    lifespan=lifespan,
    redirect_slashes=False,  # Disable automatic trailing slash redirects
)


def _default_origins() -> list[str]:
    ports = list(range(3000, 3011)) + [5173]
    origins = []
    for host in ("localhost", "127.0.0.1"):
        origins.extend([f"http://{host}:{port}" for port in ports])
    origins.append("http://localhost")
    origins.append("http://127.0.0.1")
    return origins


def _combine_origins(*origin_groups: list[str]) -> list[str]:
    """Merge origins preserving order and removing duplicates."""
    seen: set[str] = set()
    combined: list[str] = []
    for group in origin_groups:
        for origin in group:
            normalized = origin.rstrip("/")
            if normalized and normalized not in seen:
                seen.add(normalized)
                combined.append(normalized)
    return combined


allow_origins = _combine_origins(_default_origins(), _settings.cors_allow_origins)
logger.debug("Configured CORS allow_origins: %s", ", ".join(allow_origins))

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware to add request ID to each request
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Tag the request with an id, echoed back in the response headers."""
    request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
    set_request_id(request_id)
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def _validation_details(errors: list[dict]) -> list[ValidationErrorDetail]:
    return [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in errors
    ]


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors."""
    errors = _validation_details(list(exc.errors()))

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


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    errors = _validation_details(list(exc.errors()))

    logger.warning(
        "Pydantic validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(errors),
    )

    error_response = build_validation_error_response(
        message="Data validation failed",
        detail=f"{len(errors)} validation error(s)",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        path=str(request.url.path),
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(DatasetError)
async def dataset_exception_handler(request: Request, exc: DatasetError):
    """Handle catalog problems surfacing while serving a request."""
    logger.error(
        "Dataset error for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        str(exc),
    )

    error_response = build_error_response(
        error_type=ErrorType.DATASET_ERROR,
        message="Property catalog unavailable",
        detail="The property dataset could not be loaded.",
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap ``HTTPException`` (including unknown routes) in the error envelope."""
    not_found = exc.status_code == status.HTTP_404_NOT_FOUND
    logger.info(
        "HTTP %s for request %s to %s",
        exc.status_code,
        get_request_id(),
        request.url.path,
    )

    error_response = build_error_response(
        error_type=ErrorType.NOT_FOUND if not_found else ErrorType.HTTP_ERROR,
        message="Resource not found" if not_found else "Request could not be completed",
        detail=str(exc.detail),
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
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


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple health endpoint for readiness checks."""
    return {"status": "ok"}


app.include_router(properties.router, prefix="/properties", tags=["properties"])
app.include_router(search.router, prefix="/search", tags=["search"])
app.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
app.include_router(inspected.router, prefix="/inspected", tags=["inspected"])
app.include_router(session.router, prefix="/session", tags=["session"])
