"""
In-memory storage backend.

Everything lives in dicts owned by a MemoryStorage instance and is lost
when the process exits. IDs are per-table counters starting at 1.
Build a fresh instance per test for isolation.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from .exceptions import UsernameTakenError
from .interfaces import ISessionStore, IStorage
from .models import (
    NewRideHistory,
    NewSavedPlace,
    NewUser,
    RideHistoryEntry,
    SavedPlace,
    Session,
    User,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemorySessionStore(ISessionStore):
    """Session store backed by a dict of sid -> Session."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    async def create(self, user_id: int, ttl_seconds: int) -> Session:
        session = Session(
            sid=secrets.token_urlsafe(32),
            user_id=user_id,
            expires_at=_utcnow() + timedelta(seconds=ttl_seconds),
        )
        self._sessions[session.sid] = session
        return session

    async def get(self, sid: str) -> Optional[Session]:
        session = self._sessions.get(sid)
        if session is None:
            return None
        if session.is_expired(_utcnow()):
            del self._sessions[sid]
            return None
        return session

    async def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    async def prune_expired(self) -> int:
        now = _utcnow()
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


class MemoryStorage(IStorage):
    """
    Process-lifetime implementation of IStorage.

    Not safe for concurrent mutation from several threads; request
    handling runs on a single event loop so that never happens.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._saved_places: dict[int, SavedPlace] = {}
        self._rides: dict[int, RideHistoryEntry] = {}

        self._next_user_id = 1
        self._next_place_id = 1
        self._next_ride_id = 1

        self.session_store = MemorySessionStore()

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def create_user(self, data: NewUser) -> User:
        if await self.get_user_by_username(data.username) is not None:
            raise UsernameTakenError(data.username)

        user = User(id=self._next_user_id, **data.model_dump())
        self._next_user_id += 1
        self._users[user.id] = user
        return user

    # -------------------------------------------------------------------------
    # Saved places
    # -------------------------------------------------------------------------

    async def get_saved_places(self, user_id: int) -> list[SavedPlace]:
        return [place for place in self._saved_places.values() if place.user_id == user_id]

    async def get_saved_place(self, place_id: int) -> Optional[SavedPlace]:
        return self._saved_places.get(place_id)

    async def create_saved_place(self, data: NewSavedPlace) -> SavedPlace:
        place = SavedPlace(id=self._next_place_id, **data.model_dump())
        self._next_place_id += 1
        self._saved_places[place.id] = place
        return place

    async def delete_saved_place(self, place_id: int) -> None:
        self._saved_places.pop(place_id, None)

    # -------------------------------------------------------------------------
    # Ride history
    # -------------------------------------------------------------------------

    async def get_ride_history(self, user_id: int) -> list[RideHistoryEntry]:
        rides = [ride for ride in self._rides.values() if ride.user_id == user_id]
        return sorted(rides, key=lambda r: (r.timestamp, r.id), reverse=True)

    async def get_ride(self, ride_id: int) -> Optional[RideHistoryEntry]:
        return self._rides.get(ride_id)

    async def create_ride_history(self, data: NewRideHistory) -> RideHistoryEntry:
        ride = RideHistoryEntry(
            id=self._next_ride_id,
            timestamp=_utcnow(),
            **data.model_dump(),
        )
        self._next_ride_id += 1
        self._rides[ride.id] = ride
        return ride
