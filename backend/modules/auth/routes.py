"""
Authentication API endpoints.

Registration and login both open a session and set the session cookie.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_auth_service
from api.middleware.session import OptionalCaller, RequireCaller
from shared.config import Settings, get_settings
from shared.models import CallerIdentity

from .interfaces import IAuthService
from .models import AuthSession, LoginRequest, LogoutResponse, PublicUser, RegisterRequest

router = APIRouter()


def _set_session_cookie(
    response: Response,
    auth: IAuthService,
    result: AuthSession,
    settings: Settings,
) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=auth.cookie_value(result.session),
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=PublicUser, status_code=201)
async def register(
    request: RegisterRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> PublicUser:
    """
    Create an account and log it in.

    409 if the username is taken.
    """
    result = await auth.register(request)
    _set_session_cookie(response, auth, result, settings)
    return PublicUser.from_user(result.user)


@router.post("/login", response_model=PublicUser)
async def login(
    request: LoginRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> PublicUser:
    """
    Log in with username and password.

    401 on a wrong username or password, without saying which.
    """
    result = await auth.login(request)
    _set_session_cookie(response, auth, result, settings)
    return PublicUser.from_user(result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    caller: CallerIdentity = OptionalCaller,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> LogoutResponse:
    """
    End the current session. Safe to call when not logged in.
    """
    await auth.logout(caller)
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return LogoutResponse()


@router.get("/user", response_model=PublicUser)
async def current_user(
    caller: CallerIdentity = RequireCaller,
    auth: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    """
    Get the logged-in user's profile.
    """
    return PublicUser.from_user(await auth.get_user(caller))
