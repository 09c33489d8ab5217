"""
Exception handlers.

Maps the shared exception hierarchy to HTTP responses so routes and
services can simply raise. Anything unexpected becomes a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    RideCompareError,
    ValidationError,
)
from .models.errors import ErrorResponse, FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their parents
STATUS_CODES: list[tuple[type[RideCompareError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_code_for(exc: RideCompareError) -> int:
    """HTTP status for an application error."""
    for error_type, code in STATUS_CODES:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Flatten pydantic errors to field/message/type triples."""
    result = []
    for error in exc.errors():
        # Drop the leading "body"/"path"/"query" segment
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        result.append(
            FieldError(field=field, message=error.get("msg", ""), type=error.get("type", ""))
        )
    return result


async def handle_app_error(request: Request, exc: RideCompareError) -> JSONResponse:
    code = status_code_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        exc = InternalError()
    return JSONResponse(
        status_code=code,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = ValidationErrorResponse(errors=field_errors(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(**InternalError().to_dict()).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(RideCompareError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
