"""
Saved places module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import CallerIdentity
from modules.storage.models import SavedPlace
from .models import CreatePlaceRequest


@runtime_checkable
class IPlacesService(Protocol):
    """
    Interface for saved place operations.

    Every method acts on behalf of an authenticated caller.
    """

    async def list_places(self, caller: CallerIdentity) -> list[SavedPlace]:
        """Get the caller's saved places."""
        ...

    async def create_place(
        self,
        caller: CallerIdentity,
        request: CreatePlaceRequest,
    ) -> SavedPlace:
        """
        Save a place owned by the caller.

        Returns:
            The stored place with its assigned ID
        """
        ...

    async def delete_place(self, caller: CallerIdentity, place_id: int) -> None:
        """
        Delete one of the caller's places.

        Raises:
            PlaceNotFoundError: If the place doesn't exist
            PlaceAccessDeniedError: If the caller doesn't own the place
        """
        ...
