"""
Storage module.

Persists users, saved places, ride history and login sessions.

Public API:
- IStorage / ISessionStore: Interfaces every backend implements
- MemoryStorage: Process-lifetime backend
- SupabaseStorage: Durable backend
- create_storage: Picks a backend from settings
"""

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
from .exceptions import UsernameTakenError
from .memory import MemorySessionStore, MemoryStorage
from .factory import create_storage

__all__ = [
    # Interfaces
    "IStorage",
    "ISessionStore",
    # Models
    "NewUser",
    "User",
    "NewSavedPlace",
    "SavedPlace",
    "NewRideHistory",
    "RideHistoryEntry",
    "Session",
    # Exceptions
    "UsernameTakenError",
    # Implementations
    "MemoryStorage",
    "MemorySessionStore",
    "create_storage",
]
