"""
Authentication module.

Handles registration, password login, logout and session resolution.

Public API:
- IAuthService: Interface for auth operations
- RegisterRequest / LoginRequest / PublicUser: API models
- Auth exceptions: InvalidCredentialsError, NotAuthenticatedError
"""

from .interfaces import IAuthService
from .models import AuthSession, LoginRequest, LogoutResponse, PublicUser, RegisterRequest
from .exceptions import InvalidCredentialsError, NotAuthenticatedError

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthSession",
    "LoginRequest",
    "LogoutResponse",
    "PublicUser",
    "RegisterRequest",
    # Exceptions
    "InvalidCredentialsError",
    "NotAuthenticatedError",
]
