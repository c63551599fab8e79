"""Brandkit API application.

Run with ``uvicorn brandkit.main:app`` (or ``python -m brandkit.main``).

- ``/api/*``: JSON API (see ``brandkit.api``)
- ``/uploads/*``: uploaded logo files
- ``/health`` and ``/health/db``: liveness and database checks

Every response carries ``X-Request-ID``. Errors are returned as
``{"error": str, "code": str, "request_id": str}``; validation errors add
``errors: [{"field", "message"}]``. Requests are logged with timing; 4xx at
WARNING and 5xx at ERROR. JSON request bodies are logged at DEBUG with
credentials redacted.
"""

import json
import logging
import re
import signal
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from brandkit.api import router as api_router
from brandkit.api.deps import error_response, get_request_id
from brandkit.core.config import Settings, get_settings
from brandkit.core.database import db_manager
from brandkit.core.logging import get_logger, setup_logging
from brandkit.services.access import AccessDeniedError, ProjectNotFoundError
from brandkit.services.brand_asset import ColorNotFoundError, TypographyNotFoundError
from brandkit.services.upload import UPLOAD_URL_PREFIX

setup_logging()
logger = get_logger(__name__)

# Body keys containing any of these are redacted in request logs
SENSITIVE_FIELDS = ("password", "token", "secret", "authorization")

# Client-supplied request ids are reused only if they look like ids
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{8,64}$")

# Domain errors raised from dependencies -> (status, public message)
DOMAIN_ERRORS: dict[type[Exception], tuple[int, str]] = {
    ProjectNotFoundError: (status.HTTP_404_NOT_FOUND, "Project not found"),
    ColorNotFoundError: (status.HTTP_404_NOT_FOUND, "Color not found"),
    TypographyNotFoundError: (status.HTTP_404_NOT_FOUND, "Typography not found"),
    AccessDeniedError: (status.HTTP_403_FORBIDDEN, "Access denied"),
}


def sanitize_body(body: Any) -> Any:
    """Return ``body`` with credential-like values replaced by ``****``."""
    if isinstance(body, list):
        return [sanitize_body(item) for item in body]
    if not isinstance(body, dict):
        return body
    return {
        key: "****"
        if any(marker in str(key).lower() for marker in SENSITIVE_FIELDS)
        else sanitize_body(value)
        for key, value in body.items()
    }


def _field_path(loc: tuple[Any, ...]) -> str:
    """``("body", "colors", 0, "hex")`` -> ``"colors.0.hex"``."""
    parts = list(loc)
    if parts and parts[0] in ("body", "query", "path", "header", "cookie"):
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or str(loc[0] if loc else "")


def _request_id_for(request: Request) -> str:
    incoming = request.headers.get("X-Request-ID", "")
    if _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a request id, log the request and its outcome with timing."""

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        request_id = _request_id_for(request)
        request.state.request_id = request_id
        started = time.monotonic()

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": str(request.query_params) or None,
            },
        )
        if logger.isEnabledFor(logging.DEBUG):
            await self._log_json_body(request, request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        outcome = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.monotonic() - started) * 1000, 2),
        }
        if response.status_code >= 500:
            logger.error("Request failed", extra=outcome)
        elif response.status_code >= 400:
            logger.warning("Request error", extra=outcome)
        else:
            logger.info("Request completed", extra=outcome)
        return response

    @staticmethod
    async def _log_json_body(request: Request, request_id: str) -> None:
        # Logo uploads are multipart and never logged
        if request.method in ("GET", "HEAD", "OPTIONS", "DELETE"):
            return
        if not request.headers.get("content-type", "").startswith("application/json"):
            return
        raw = await request.body()
        if not raw:
            return
        try:
            body = sanitize_body(json.loads(raw))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug(
                "Request body (non-JSON)",
                extra={"request_id": request_id, "body_length": len(raw)},
            )
            return
        logger.debug("Request body", extra={"request_id": request_id, "body": body})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Schema failures are 400s listing each offending field."""
    errors = [
        {"field": _field_path(tuple(e["loc"])), "message": e["msg"]}
        for e in exc.errors()
    ]
    logger.warning(
        "Validation error",
        extra={"request_id": get_request_id(request), "errors": errors},
    )
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "; ".join(f"{e['field']}: {e['message']}" for e in errors),
        errors=errors,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """401s from the auth dependency, unknown routes, wrong methods."""
    return error_response(
        request, exc.status_code, str(exc.detail), headers=exc.headers
    )


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = DOMAIN_ERRORS[type(exc)]
    if status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(
            message,
            extra={"request_id": get_request_id(request), "error_message": str(exc)},
        )
    return error_response(request, status_code, message)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        extra={
            "request_id": get_request_id(request),
            "error_type": type(exc).__name__,
            "error_message": str(exc),
        },
        exc_info=True,
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred. Please try again later.",
    )


def _cors_origins(settings: Settings) -> list[str]:
    """``FRONTEND_URL`` may list several origins separated by commas."""
    if not settings.frontend_url:
        return ["*"]
    return [o.strip().rstrip("/") for o in settings.frontend_url.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Open the database engine on startup and dispose it on shutdown."""
    settings = get_settings()
    logger.info(
        "Starting application",
        extra={
            "app_name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
        },
    )

    db_manager.init_db()

    def handle_sigterm(*args: Any) -> None:
        logger.info("Received SIGTERM, initiating graceful shutdown")

    # signal.signal only works from the main thread
    try:
        signal.signal(signal.SIGTERM, handle_sigterm)
    except ValueError:
        logger.debug("SIGTERM handler not installed outside the main thread")

    yield

    logger.info("Shutting down application")
    await db_manager.close()


def create_app() -> FastAPI:
    """Build the FastAPI app: middleware, error handlers, routes, uploads."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Added before CORS, so it runs inside it
    app.add_middleware(RequestLoggingMiddleware)

    origins = _cors_origins(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Request-ID"],
    )
    if origins != ["*"]:
        logger.info("CORS restricted", extra={"allowed_origins": origins})

    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    for exc_class in DOMAIN_ERRORS:
        app.add_exception_handler(exc_class, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/db", tags=["Health"])
    async def database_health() -> dict[str, str | bool]:
        is_healthy = await db_manager.check_connection()
        return {"status": "ok" if is_healthy else "error", "database": is_healthy}

    app.include_router(api_router)

    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir),
        name="uploads",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "brandkit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
