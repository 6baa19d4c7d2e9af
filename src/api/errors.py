"""
Exception handlers - map domain errors to the API's JSON error bodies.

Every error response has an "error" string; validation failures add an
"errors" list of {field, message} entries.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import DuplicateRegistrationError, FieldViolation, ValidationError

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "You have already registered for this event"


def _error_body(message: str, violations: list[FieldViolation] | None = None) -> dict:
    body: dict = {"error": message}
    if violations:
        body["errors"] = [{"field": v.field, "message": v.message} for v in violations]
    return body


def _field_name(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "body"
    parts = [str(part) for part in error["loc"] if part != "body"]
    return ".".join(parts) or "body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable or mistyped bodies like any other validation failure."""
    violations = [FieldViolation(_field_name(err), err["msg"]) for err in exc.errors()]
    logger.info("Rejected malformed request to %s: %s", request.url.path, violations)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation failed", violations),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed for %s: %s", request.url.path, exc.violations or exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(exc.message, exc.violations),
    )


async def duplicate_registration_handler(
    request: Request, exc: DuplicateRegistrationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(DUPLICATE_MESSAGE),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(DuplicateRegistrationError, duplicate_registration_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
