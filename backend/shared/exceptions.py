"""
Base exception classes for the RideCompare backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code, so a module
exception only has to pick the right parent.
"""

from typing import Optional, Any


class RideCompareError(Exception):
    """
    Base exception for all RideCompare errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(RideCompareError):
    """Resource not found."""

    pass


class ValidationError(RideCompareError):
    """Input validation failed."""

    pass


class AuthenticationError(RideCompareError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(RideCompareError):
    """Authorization failed (authenticated, but not the owner)."""

    pass


class ConflictError(RideCompareError):
    """The request collides with existing state (e.g. a duplicate key)."""

    pass


class InternalError(RideCompareError):
    """
    Unexpected failure, usually in the storage backend.

    The message sent to clients is always generic; the original
    exception is only logged.
    """

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")
