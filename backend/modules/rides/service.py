"""
Ride history service implementation.
"""

import logging

from shared.models import CallerIdentity
from modules.storage.interfaces import IStorage
from modules.storage.models import NewRideHistory, RideHistoryEntry

from .exceptions import RideAccessDeniedError, RideNotFoundError
from .interfaces import IRidesService
from .models import CreateRideRequest

logger = logging.getLogger(__name__)


class RidesService(IRidesService):
    """Ride history on top of any IStorage backend."""

    def __init__(self, storage: IStorage):
        self._storage = storage

    async def list_rides(self, caller: CallerIdentity) -> list[RideHistoryEntry]:
        return await self._storage.get_ride_history(caller.user_id)

    async def record_ride(
        self,
        caller: CallerIdentity,
        request: CreateRideRequest,
    ) -> RideHistoryEntry:
        data = NewRideHistory(user_id=caller.user_id, **request.model_dump())
        ride = await self._storage.create_ride_history(data)
        logger.info(
            "User %d booked %s %s (ride %d)",
            caller.user_id,
            ride.service,
            ride.ride_type,
            ride.id,
        )
        return ride

    async def get_ride(self, caller: CallerIdentity, ride_id: int) -> RideHistoryEntry:
        ride = await self._storage.get_ride(ride_id)
        if ride is None:
            raise RideNotFoundError(ride_id)
        if ride.user_id != caller.user_id:
            raise RideAccessDeniedError(ride_id)
        return ride
