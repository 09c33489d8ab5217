"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = {}


class FieldError(BaseModel):
    """One problem with one request field."""

    field: str
    message: str
    type: str


class ValidationErrorResponse(ErrorResponse):
    """Validation error response format."""

    error: str = "VALIDATION_ERROR"
    message: str = "Invalid input data"
    errors: list[FieldError]
