"""Tests for the authentication service."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from modules.auth.exceptions import InvalidCredentialsError, NotAuthenticatedError
from modules.auth.models import LoginRequest, RegisterRequest
from modules.auth.service import AuthService
from modules.storage.exceptions import UsernameTakenError
from modules.storage.memory import MemoryStorage
from shared.config import Settings
from shared.models import ANONYMOUS, CallerIdentity

from tests.conftest import TEST_SESSION_SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings(bcrypt_rounds=4, session_secret=TEST_SESSION_SECRET, session_ttl_seconds=3600)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def service(storage, settings) -> AuthService:
    return AuthService(storage, settings)


async def register_alice(service: AuthService, **profile):
    return await service.register(RegisterRequest(username="alice", password="pw1", **profile))


class TestRegister:
    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(self, service, storage):
        result = await register_alice(service, email="alice@example.com")

        stored = await storage.get_user_by_username("alice")
        assert stored.id == result.user.id
        assert stored.email == "alice@example.com"
        assert stored.password_hash != "pw1"
        assert stored.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_opens_session(self, service, storage):
        result = await register_alice(service)

        session = await storage.session_store.get(result.session.sid)
        assert session is not None
        assert session.user_id == result.user.id

    @pytest.mark.asyncio
    async def test_session_lasts_configured_ttl(self, service):
        before = datetime.now(timezone.utc)
        result = await register_alice(service)

        assert result.session.expires_at >= before + timedelta(seconds=3600)

    @pytest.mark.asyncio
    async def test_duplicate_username(self, service, storage):
        await register_alice(service)

        with pytest.raises(UsernameTakenError):
            await register_alice(service)

        assert len(storage._users) == 1


class TestLogin:
    @pytest.mark.asyncio
    async def test_success(self, service):
        registered = await register_alice(service)

        result = await service.login(LoginRequest(username="alice", password="pw1"))

        assert result.user.id == registered.user.id
        assert result.session.sid != registered.session.sid

    @pytest.mark.asyncio
    async def test_wrong_password(self, service):
        await register_alice(service)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await service.login(LoginRequest(username="alice", password="nope"))

        assert "alice" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unknown_username_same_error(self, service):
        await register_alice(service)

        with pytest.raises(InvalidCredentialsError) as unknown:
            await service.login(LoginRequest(username="mallory", password="pw1"))
        with pytest.raises(InvalidCredentialsError) as wrong:
            await service.login(LoginRequest(username="alice", password="nope"))

        assert unknown.value.to_dict() == wrong.value.to_dict()

    @pytest.mark.asyncio
    async def test_unknown_username_still_checks_a_hash(self, service):
        with patch("modules.auth.service.verify_password", return_value=False) as mock_verify:
            with pytest.raises(InvalidCredentialsError):
                await service.login(LoginRequest(username="mallory", password="pw1"))

        mock_verify.assert_called_once()

    @pytest.mark.asyncio
    async def test_failed_login_does_not_open_session(self, service, storage):
        await register_alice(service)
        sessions_before = len(storage.session_store)

        with pytest.raises(InvalidCredentialsError):
            await service.login(LoginRequest(username="alice", password="nope"))

        assert len(storage.session_store) == sessions_before


class TestSessions:
    @pytest.mark.asyncio
    async def test_resolve_caller(self, service):
        result = await register_alice(service)
        cookie = service.cookie_value(result.session)

        caller = await service.resolve_caller(cookie)

        assert caller == CallerIdentity(user_id=result.user.id, session_id=result.session.sid)
        assert caller.is_authenticated

    @pytest.mark.asyncio
    async def test_resolve_missing_cookie(self, service):
        assert await service.resolve_caller(None) == ANONYMOUS

    @pytest.mark.asyncio
    async def test_resolve_forged_cookie(self, service):
        result = await register_alice(service)
        forged = AuthService(service._storage, Settings(session_secret="wrong")).cookie_value(
            result.session
        )

        assert await service.resolve_caller(forged) == ANONYMOUS

    @pytest.mark.asyncio
    async def test_resolve_unsigned_session_id(self, service):
        result = await register_alice(service)

        assert await service.resolve_caller(result.session.sid) == ANONYMOUS

    @pytest.mark.asyncio
    async def test_logout_destroys_session(self, service):
        result = await register_alice(service)
        cookie = service.cookie_value(result.session)
        caller = await service.resolve_caller(cookie)

        await service.logout(caller)

        assert await service.resolve_caller(cookie) == ANONYMOUS

    @pytest.mark.asyncio
    async def test_logout_anonymous_is_noop(self, service):
        await service.logout(ANONYMOUS)

    @pytest.mark.asyncio
    async def test_logout_leaves_other_sessions(self, service):
        first = await register_alice(service)
        second = await service.login(LoginRequest(username="alice", password="pw1"))

        await service.logout(await service.resolve_caller(service.cookie_value(first.session)))

        caller = await service.resolve_caller(service.cookie_value(second.session))
        assert caller.user_id == second.user.id


class TestGetUser:
    @pytest.mark.asyncio
    async def test_returns_user(self, service):
        result = await register_alice(service, full_name="Alice A")
        caller = CallerIdentity(user_id=result.user.id, session_id=result.session.sid)

        user = await service.get_user(caller)

        assert user.username == "alice"
        assert user.full_name == "Alice A"

    @pytest.mark.asyncio
    async def test_anonymous(self, service):
        with pytest.raises(NotAuthenticatedError):
            await service.get_user(ANONYMOUS)

    @pytest.mark.asyncio
    async def test_vanished_user(self, service):
        with pytest.raises(NotAuthenticatedError):
            await service.get_user(CallerIdentity(user_id=99, session_id="gone"))
