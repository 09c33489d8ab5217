"""
Saved places service implementation.
"""

import logging

from shared.models import CallerIdentity
from modules.storage.interfaces import IStorage
from modules.storage.models import NewSavedPlace, SavedPlace

from .exceptions import PlaceAccessDeniedError, PlaceNotFoundError
from .interfaces import IPlacesService
from .models import CreatePlaceRequest

logger = logging.getLogger(__name__)


class PlacesService(IPlacesService):
    """Saved places on top of any IStorage backend."""

    def __init__(self, storage: IStorage):
        self._storage = storage

    async def list_places(self, caller: CallerIdentity) -> list[SavedPlace]:
        return await self._storage.get_saved_places(caller.user_id)

    async def create_place(
        self,
        caller: CallerIdentity,
        request: CreatePlaceRequest,
    ) -> SavedPlace:
        data = NewSavedPlace(user_id=caller.user_id, **request.model_dump())
        place = await self._storage.create_saved_place(data)
        logger.debug("User %d saved place %d", caller.user_id, place.id)
        return place

    async def delete_place(self, caller: CallerIdentity, place_id: int) -> None:
        place = await self._storage.get_saved_place(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        if place.user_id != caller.user_id:
            raise PlaceAccessDeniedError(place_id)

        await self._storage.delete_saved_place(place_id)
        logger.debug("User %d deleted place %d", caller.user_id, place_id)
