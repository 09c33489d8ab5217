"""
Dependency injection setup for FastAPI.

This module provides the "container" that owns the storage backend and
the FastAPI dependency functions that build services on top of it.
Services are cheap wrappers around storage, so they are created per
request; only the storage backend is a singleton.

Tests swap the backend with app.dependency_overrides[get_storage].
"""

from fastapi import Depends

from shared.config import Settings, get_settings
from modules.auth.interfaces import IAuthService
from modules.estimates.interfaces import IEstimatesService
from modules.places.interfaces import IPlacesService
from modules.rides.interfaces import IRidesService
from modules.storage.interfaces import IStorage


class ServiceContainer:
    """
    Container for long-lived instances.

    The storage backend is created lazily on first access from the
    settings. Use reset() to drop it for testing.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._storage: IStorage | None = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def storage(self) -> IStorage:
        """Get the storage backend instance."""
        if self._storage is None:
            from modules.storage.factory import create_storage
            self._storage = create_storage(self.settings)
        return self._storage

    def reset(self) -> None:
        """Drop the cached storage backend."""
        self._storage = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with a
    fresh storage backend. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_storage() -> IStorage:
    """FastAPI dependency for the storage backend."""
    return get_container().storage


def get_auth_service(
    storage: IStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> IAuthService:
    """FastAPI dependency for auth service."""
    from modules.auth.service import AuthService
    return AuthService(storage, settings)


def get_places_service(storage: IStorage = Depends(get_storage)) -> IPlacesService:
    """FastAPI dependency for saved places service."""
    from modules.places.service import PlacesService
    return PlacesService(storage)


def get_rides_service(storage: IStorage = Depends(get_storage)) -> IRidesService:
    """FastAPI dependency for ride history service."""
    from modules.rides.service import RidesService
    return RidesService(storage)


def get_estimates_service() -> IEstimatesService:
    """FastAPI dependency for ride estimates service."""
    from modules.estimates.service import EstimatesService
    return EstimatesService()
