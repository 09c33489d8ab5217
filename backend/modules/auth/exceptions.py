"""
Authentication module exceptions.

These exceptions are raised by the auth module and turned into HTTP
responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login attempt fails.

    The message is the same whether the username or the password was
    wrong.
    """

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class NotAuthenticatedError(AuthenticationError):
    """Raised when a protected endpoint is called without a valid session."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")
