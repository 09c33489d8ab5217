"""API models package."""

from .errors import ErrorResponse, FieldError, ValidationErrorResponse

__all__ = [
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
]
