"""Website Builder Backend: FastAPI application entry point."""

import signal
import threading
import uuid
from contextlib import asynccontextmanager

# configure_structlog must run before the other app imports: structlog caches
# the processor chain on first use.
from app.core.logging import configure_structlog
from app.core.config import get_settings as _get_settings_early

_early_settings = _get_settings_early()
configure_structlog(
    log_level="DEBUG" if _early_settings.debug else "INFO",
    json_logs=not _early_settings.debug,
)

import structlog

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import ClientInputError
from app.integrations.openrouter import OpenRouterClient
from app.middleware.correlation import (
    setup_correlation_middleware,
    get_correlation_id,
)
from app.services.website_service import CompletionClient, WebsiteGenerationService

logger = structlog.get_logger(__name__)


def validate_provider_credentials(settings: Settings) -> None:
    """Fail fast if the OpenRouter API key is missing at startup."""
    if not settings.openrouter_api_key:
        raise RuntimeError(
            "OPENROUTER_API_KEY environment variable is not set. Please ensure it's in your .env file."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings: Settings = app.state.settings

    validate_provider_credentials(settings)
    logger.info("provider_credentials_validated", model=settings.llm_model)

    # SIGTERM flips this so the health check returns 503 while draining
    app.state.shutting_down = False

    def handle_sigterm(signum, frame):
        app.state.shutting_down = True
        logger.info("sigterm_received", action="health_check_503_draining_connections")

    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, handle_sigterm)

    logger.info(
        "startup_complete",
        app_name=settings.app_name,
        debug=settings.debug,
        output_dir=settings.generated_websites_dir,
    )

    yield

    logger.info("shutdown_complete")


def _request_context(request: Request) -> dict:
    """Fields attached to every error log entry; includes a fresh debug_id."""
    return {
        "debug_id": str(uuid.uuid4()),
        "correlation_id": get_correlation_id(),
        "path": request.url.path,
        "method": request.method,
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Log HTTPExceptions (including router 404/405) and return detail plus debug_id."""
    context = _request_context(request)
    logger.error("http_exception", status_code=exc.status_code, detail=exc.detail, **context)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "debug_id": context["debug_id"]},
    )


def _client_error_response(context: dict, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": message, "debug_id": context["debug_id"]},
    )


async def client_input_exception_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    """Reject invalid client input with 400 in the generation response shape."""
    context = _request_context(request)
    logger.info("client_input_rejected", reason=str(exc), **context)
    return _client_error_response(context, str(exc))


def _body_unusable(errors: list[dict]) -> bool:
    # Whole body missing, not JSON, or not an object: no description can be read
    return all(tuple(e.get("loc", ()))[:1] == ("body",) for e in errors) and any(
        tuple(e.get("loc", ())) == ("body",) or e.get("type") == "json_invalid" for e in errors
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map request validation errors to 400 in the generation response shape."""
    context = _request_context(request)
    errors = list(exc.errors())
    message = "Description is required." if _body_unusable(errors) else "Invalid request body."
    logger.info(
        "request_validation_rejected",
        error_types=[e.get("type") for e in errors],
        **context,
    )
    return _client_error_response(context, message)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled errors with traceback and return a generic 500."""
    context = _request_context(request)
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
        **context,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "debug_id": context["debug_id"]},
    )


def create_app(
    settings: Settings | None = None,
    completion_client: CompletionClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration for this app instance; defaults to get_settings()
        completion_client: Provider client; defaults to an OpenRouterClient
            built from settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Generate HTML, CSS, and JavaScript websites from a text description",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.website_service = WebsiteGenerationService(
        client=completion_client or OpenRouterClient(settings),
        output_dir=settings.generated_websites_dir,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Correlation ID middleware (runs first on incoming requests)
    setup_correlation_middleware(app)

    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(ClientInputError)(client_input_exception_handler)
    app.exception_handler(RequestValidationError)(validation_exception_handler)
    app.exception_handler(Exception)(generic_exception_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=get_settings().port,
        reload=get_settings().debug,
    )
