"""
Supabase storage backend.

Encapsulates all Supabase queries and data mapping for the tables
behind IStorage:
- users
- saved_places
- ride_history
- sessions

IDs come from serial columns and ride_history.timestamp defaults to
now() in the database, so neither is ever sent on insert.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository
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

# PostgreSQL error code for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseSessionStore(BaseRepository[Session], ISessionStore):
    """Session store persisted in the sessions table."""

    async def create(self, user_id: int, ttl_seconds: int) -> Session:
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=ttl_seconds)
        data = {
            "sid": secrets.token_urlsafe(32),
            "user_id": user_id,
            "expires_at": expires_at.isoformat(),
        }
        result = self._db.table("sessions").insert(data).execute()
        return Session.model_validate(result.data[0])

    async def get(self, sid: str) -> Optional[Session]:
        result = self._db.table("sessions").select("*").eq("sid", sid).execute()
        session = self._first(result.data, Session)
        if session is None:
            return None
        if session.is_expired(datetime.now(timezone.utc)):
            await self.destroy(sid)
            return None
        return session

    async def destroy(self, sid: str) -> None:
        self._db.table("sessions").delete().eq("sid", sid).execute()

    async def prune_expired(self) -> int:
        now = datetime.now(timezone.utc).isoformat()
        result = self._db.table("sessions").delete().lte("expires_at", now).execute()
        return len(result.data or [])


class SupabaseStorage(BaseRepository[User], IStorage):
    """
    Durable implementation of IStorage.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def __init__(self, db: Client) -> None:
        super().__init__(db)
        self.session_store = SupabaseSessionStore(db)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: int) -> Optional[User]:
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        return self._first(result.data, User)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        result = self._db.table("users").select("*").eq("username", username).execute()
        return self._first(result.data, User)

    async def create_user(self, data: NewUser) -> User:
        try:
            result = self._db.table("users").insert(data.model_dump()).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UsernameTakenError(data.username) from e
            raise
        return User.model_validate(result.data[0])

    # -------------------------------------------------------------------------
    # Saved places
    # -------------------------------------------------------------------------

    async def get_saved_places(self, user_id: int) -> list[SavedPlace]:
        result = (
            self._db.table("saved_places")
            .select("*")
            .eq("user_id", user_id)
            .order("id")
            .execute()
        )
        return self._all(result.data, SavedPlace)

    async def get_saved_place(self, place_id: int) -> Optional[SavedPlace]:
        result = self._db.table("saved_places").select("*").eq("id", place_id).execute()
        return self._first(result.data, SavedPlace)

    async def create_saved_place(self, data: NewSavedPlace) -> SavedPlace:
        result = self._db.table("saved_places").insert(data.model_dump()).execute()
        return SavedPlace.model_validate(result.data[0])

    async def delete_saved_place(self, place_id: int) -> None:
        self._db.table("saved_places").delete().eq("id", place_id).execute()

    # -------------------------------------------------------------------------
    # Ride history
    # -------------------------------------------------------------------------

    async def get_ride_history(self, user_id: int) -> list[RideHistoryEntry]:
        result = (
            self._db.table("ride_history")
            .select("*")
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .order("id", desc=True)
            .execute()
        )
        return self._all(result.data, RideHistoryEntry)

    async def get_ride(self, ride_id: int) -> Optional[RideHistoryEntry]:
        result = self._db.table("ride_history").select("*").eq("id", ride_id).execute()
        return self._first(result.data, RideHistoryEntry)

    async def create_ride_history(self, data: NewRideHistory) -> RideHistoryEntry:
        result = self._db.table("ride_history").insert(data.model_dump()).execute()
        return RideHistoryEntry.model_validate(result.data[0])
