"""Error Handlers - global exception handlers for the form service API.

Invariants:
    - FormServiceError -> its own http_status with {"error", "code"}
    - RequestValidationError -> 400 naming the missing/invalid fields
    - Framework HTTP errors keep their status; unmatched routes say "Endpoint not found"
    - Exception (catch-all) -> 500 "Internal server error", detail logged server-side only

Design Decisions:
    - Registered from one function so main.py stays a wiring file
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from formservice.core.errors import FormServiceError, StoreUnavailableError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
ENDPOINT_NOT_FOUND = "Endpoint not found"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(FormServiceError)
    async def form_service_error_handler(request: Request, exc: FormServiceError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "tenant_id": exc.context.tenant_id,
            "form_id": exc.context.form_id,
        }
        if isinstance(exc, StoreUnavailableError):
            logger.error(f"Store failure during {exc.operation}: {exc.detail}", extra=extra)
        elif exc.http_status >= 500:
            logger.error(f"FormServiceError: {exc.message}", extra=extra)
        else:
            logger.warning(f"FormServiceError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = ENDPOINT_NOT_FOUND
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR, "code": "INTERNAL_ERROR"},
        )


def _field_name(loc: tuple) -> str:
    # drop the leading "body"/"query"/"path" segment
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    missing = [_field_name(e["loc"]) for e in errors if e["type"] == "missing"]
    invalid = [_field_name(e["loc"]) for e in errors if e["type"] != "missing"]
    if missing:
        message = f"Missing required field(s): {', '.join(missing)}"
    elif invalid:
        message = f"Invalid value for field(s): {', '.join(dict.fromkeys(invalid))}"
    else:
        message = "Invalid request data"
    return {
        "error": message,
        "code": "VALIDATION_ERROR",
        "details": [
            {
                "field": _field_name(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
