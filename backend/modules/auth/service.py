"""
Authentication service implementation.

Registers users, checks passwords and maps session cookies to callers.
Sessions live in the storage backend's session store.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shared.config import Settings
from shared.models import ANONYMOUS, CallerIdentity
from modules.storage.exceptions import UsernameTakenError
from modules.storage.interfaces import IStorage
from modules.storage.models import NewUser, Session, User

from .cookies import read_session_id, sign_session_id
from .exceptions import InvalidCredentialsError, NotAuthenticatedError
from .interfaces import IAuthService
from .models import AuthSession, LoginRequest, RegisterRequest
from .passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

# Compared against when the username is unknown, so a failed login
# costs the same whether or not the account exists. Keyed by work factor.
_dummy_hashes: dict[int, str] = {}


async def _get_dummy_hash(rounds: int) -> str:
    if rounds not in _dummy_hashes:
        _dummy_hashes[rounds] = await run_in_threadpool(
            hash_password, "not-a-real-password", rounds
        )
    return _dummy_hashes[rounds]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses bcrypt password hashes and server-side sessions whose IDs are
    carried in a signed cookie.
    """

    def __init__(self, storage: IStorage, settings: Settings):
        self._storage = storage
        self._sessions = storage.session_store
        self._settings = settings

    async def register(self, request: RegisterRequest) -> AuthSession:
        if await self._storage.get_user_by_username(request.username) is not None:
            raise UsernameTakenError(request.username)

        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await run_in_threadpool(
            hash_password, request.password, self._settings.bcrypt_rounds
        )
        new_user = NewUser(
            username=request.username,
            password_hash=password_hash,
            email=request.email,
            phone=request.phone,
            full_name=request.full_name,
            profile_pic=request.profile_pic,
        )
        user = await self._storage.create_user(new_user)
        logger.info("Registered user %s (id=%d)", user.username, user.id)

        session = await self._open_session(user)
        return AuthSession(user=user, session=session)

    async def login(self, request: LoginRequest) -> AuthSession:
        user = await self._storage.get_user_by_username(request.username)

        if user is None:
            dummy_hash = await _get_dummy_hash(self._settings.bcrypt_rounds)
            await run_in_threadpool(verify_password, request.password, dummy_hash)
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        if not await run_in_threadpool(verify_password, request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        session = await self._open_session(user)
        logger.info("User %d logged in", user.id)
        return AuthSession(user=user, session=session)

    async def logout(self, caller: CallerIdentity) -> None:
        if caller.session_id is None:
            return
        await self._sessions.destroy(caller.session_id)
        logger.info("User %s logged out", caller.user_id)

    async def resolve_caller(self, cookie: Optional[str]) -> CallerIdentity:
        sid = read_session_id(cookie, self._settings.session_secret)
        if sid is None:
            return ANONYMOUS

        session = await self._sessions.get(sid)
        if session is None:
            return ANONYMOUS

        return CallerIdentity(user_id=session.user_id, session_id=session.sid)

    async def get_user(self, caller: CallerIdentity) -> User:
        if caller.user_id is None:
            raise NotAuthenticatedError()

        user = await self._storage.get_user(caller.user_id)
        if user is None:
            raise NotAuthenticatedError()
        return user

    def cookie_value(self, session: Session) -> str:
        return sign_session_id(session.sid, self._settings.session_secret, session.expires_at)

    async def _open_session(self, user: User) -> Session:
        return await self._sessions.create(user.id, self._settings.session_ttl_seconds)
