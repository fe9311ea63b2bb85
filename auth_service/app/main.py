import json
import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from .api import health
from .config import Settings, settings as default_settings
from .core.auth import AuthManager
from .core.constants import INTERNAL_ERROR_CODE, VALIDATION_ERROR_CODE
from .exceptions import AuthAPIClientError, AuthAPIServerError
from .services.error_mapping import (
    ClientFacingError,
    build_bad_request_error,
    build_client_error,
    build_internal_server_error,
)

# configure a service logger; we will log structured JSON strings to stdout
logger = logging.getLogger("auth_service")
# Avoid adding duplicate handlers if module is imported more than once
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
# Prevent double-logging via propagation to root handlers
logger.propagate = False
logger.setLevel(default_settings.LOG_LEVEL.upper())


def log_json(obj: dict, level: str = "info"):
    try:
        payload = json.dumps(obj, default=str)
    except Exception:
        payload = json.dumps({"msg": "failed to serialize log object"})
    getattr(logger, level)(payload)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        started_at = time.time()
        # support X-Request-ID header propagation
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        log_json(
            {
                "event": "request.start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            }
        )

        response = await call_next(request)

        duration_ms = int((time.time() - started_at) * 1000)
        log_json(
            {
                "event": "request.end",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "request_id": request_id,
            }
        )
        # attach request id header back to client
        response.headers["X-Request-ID"] = request_id
        return response


def _respond(request: Request, error: ClientFacingError):
    request_id = getattr(request.state, "request_id", None)
    # client errors are routine; only surface them when debugging
    log_json(
        {
            "event": "error.response",
            "status_code": error.status_code,
            "code": error.payload.code,
            "request_id": request_id,
        },
        level="debug" if error.status_code < 500 else "info",
    )
    headers = {"X-Request-ID": request_id} if request_id else None
    return error.to_response(headers=headers)


def _register_exception_handlers(app: FastAPI) -> None:
    # Authentication core errors -> mapped payloads
    @app.exception_handler(AuthAPIClientError)
    async def client_error_handler(request: Request, exc: AuthAPIClientError):
        error = build_client_error(
            exc.description, exc.code, exc.error_type, exc.properties, logger, exc
        )
        return _respond(request, error)

    @app.exception_handler(AuthAPIServerError)
    async def server_error_handler(request: Request, exc: AuthAPIServerError):
        return _respond(request, build_internal_server_error(exc.code, logger, exc))

    # Pydantic/validation errors -> bad request with one property per failing field
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        properties = {
            ".".join(str(part) for part in err.get("loc", ())): str(err.get("msg", ""))
            for err in exc.errors()
        }
        error = build_bad_request_error(
            "request validation failed", VALIDATION_ERROR_CODE, properties, logger, exc
        )
        return _respond(request, error)

    # catch-all for unexpected errors -> 500 but safe response
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return _respond(request, build_internal_server_error(INTERNAL_ERROR_CODE, logger, exc))


def create_app(
    settings: Optional[Settings] = None, auth_manager: Optional[AuthManager] = None
) -> FastAPI:
    settings = settings or default_settings
    logger.setLevel(settings.LOG_LEVEL.upper())

    app = FastAPI(title="Auth Service", version=settings.APP_VERSION)
    app.state.settings = settings
    app.state.auth_manager = auth_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    _register_exception_handlers(app)

    app.include_router(health.router)

    @app.get("/")
    def root():
        """
        Root endpoint that provides service information and available endpoints.
        """
        return {
            "service": settings.PROJECT_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
            "status": "running",
            "endpoints": {
                "health": "/health",
                "docs": "/docs",
                "openapi": "/openapi.json",
            },
        }

    return app


app = create_app()
