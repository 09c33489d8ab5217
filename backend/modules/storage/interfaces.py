"""
Storage module interfaces.

Route handlers and services depend on IStorage only. The in-memory and
Supabase backends both implement it and must behave identically from
the outside: same filtering, same ordering, same idempotency.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    NewRideHistory,
    NewSavedPlace,
    NewUser,
    RideHistoryEntry,
    SavedPlace,
    Session,
    User,
)


@runtime_checkable
class ISessionStore(Protocol):
    """
    Interface for persisting login sessions.

    Sessions are keyed by an opaque random ID. The cookie only carries
    that ID; the user binding lives here.
    """

    async def create(self, user_id: int, ttl_seconds: int) -> Session:
        """
        Open a new session for a user.

        Args:
            user_id: The user the session authenticates
            ttl_seconds: Lifetime of the session from now

        Returns:
            The stored session with a freshly generated ID
        """
        ...

    async def get(self, sid: str) -> Optional[Session]:
        """
        Look up a live session.

        Expired sessions are treated as absent and removed.
        """
        ...

    async def destroy(self, sid: str) -> None:
        """Remove a session. Unknown IDs are ignored."""
        ...

    async def prune_expired(self) -> int:
        """
        Remove every expired session.

        Returns:
            Number of sessions removed
        """
        ...


@runtime_checkable
class IStorage(Protocol):
    """
    Interface for users, saved places and ride history.

    Lookups by ID return None on a miss; callers decide what a miss
    means. No method checks ownership, that belongs to the services.
    """

    session_store: ISessionStore

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        ...

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by their unique username."""
        ...

    async def create_user(self, data: NewUser) -> User:
        """
        Create a user.

        Raises:
            UsernameTakenError: If the username already exists
        """
        ...

    async def get_saved_places(self, user_id: int) -> list[SavedPlace]:
        """Get all places owned by a user."""
        ...

    async def get_saved_place(self, place_id: int) -> Optional[SavedPlace]:
        """Get a place by ID regardless of owner."""
        ...

    async def create_saved_place(self, data: NewSavedPlace) -> SavedPlace:
        """Create a saved place."""
        ...

    async def delete_saved_place(self, place_id: int) -> None:
        """Delete a place. Deleting a missing ID is not an error."""
        ...

    async def get_ride_history(self, user_id: int) -> list[RideHistoryEntry]:
        """
        Get all rides owned by a user.

        Returns:
            Rides ordered newest first by timestamp, ties by descending ID
        """
        ...

    async def get_ride(self, ride_id: int) -> Optional[RideHistoryEntry]:
        """Get a ride by ID regardless of owner."""
        ...

    async def create_ride_history(self, data: NewRideHistory) -> RideHistoryEntry:
        """Record a ride. The timestamp is assigned by the store."""
        ...
