"""
Session authentication dependencies.

Reads the signed session cookie and resolves it to a CallerIdentity.
Handlers receive the identity as an explicit argument.
"""

from fastapi import Depends, Request

from shared.config import Settings, get_settings
from shared.models import CallerIdentity
from modules.auth.exceptions import NotAuthenticatedError
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service


async def get_caller(
    request: Request,
    settings: Settings = Depends(get_settings),
    auth: IAuthService = Depends(get_auth_service),
) -> CallerIdentity:
    """
    Dependency that resolves the caller, authenticated or not.

    Use this for endpoints that work with or without a session.
    """
    cookie = request.cookies.get(settings.session_cookie_name)
    return await auth.resolve_caller(cookie)


async def require_caller(
    caller: CallerIdentity = Depends(get_caller),
) -> CallerIdentity:
    """
    Dependency that requires a logged-in caller.

    Usage:
        @router.get("/protected")
        async def protected_route(caller: CallerIdentity = RequireCaller):
            return {"user_id": caller.user_id}

    Raises:
        NotAuthenticatedError: If there is no live session
    """
    if not caller.is_authenticated:
        raise NotAuthenticatedError()
    return caller


# Type aliases for cleaner route definitions
RequireCaller = Depends(require_caller)
OptionalCaller = Depends(get_caller)
