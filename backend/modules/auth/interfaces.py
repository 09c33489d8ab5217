"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import CallerIdentity
from modules.storage.models import Session, User
from .models import AuthSession, LoginRequest, RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for registration, login and session resolution.
    """

    async def register(self, request: RegisterRequest) -> AuthSession:
        """
        Create an account and log it in.

        Raises:
            UsernameTakenError: If the username already exists
        """
        ...

    async def login(self, request: LoginRequest) -> AuthSession:
        """
        Verify credentials and open a session.

        Raises:
            InvalidCredentialsError: If the username or password is wrong
        """
        ...

    async def logout(self, caller: CallerIdentity) -> None:
        """End the caller's session, if any."""
        ...

    async def resolve_caller(self, cookie: Optional[str]) -> CallerIdentity:
        """
        Turn a session cookie into a caller identity.

        Missing, forged and expired cookies all give an anonymous caller.
        """
        ...

    async def get_user(self, caller: CallerIdentity) -> User:
        """
        Load the caller's user record.

        Raises:
            NotAuthenticatedError: If the caller is anonymous or the user is gone
        """
        ...

    def cookie_value(self, session: Session) -> str:
        """Signed cookie value for a session."""
        ...
