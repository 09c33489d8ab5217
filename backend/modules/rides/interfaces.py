"""
Ride history module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import CallerIdentity
from modules.storage.models import RideHistoryEntry
from .models import CreateRideRequest


@runtime_checkable
class IRidesService(Protocol):
    """
    Interface for ride history operations.

    Every method acts on behalf of an authenticated caller.
    """

    async def list_rides(self, caller: CallerIdentity) -> list[RideHistoryEntry]:
        """
        Get the caller's ride history.

        Returns:
            Rides ordered newest first
        """
        ...

    async def record_ride(
        self,
        caller: CallerIdentity,
        request: CreateRideRequest,
    ) -> RideHistoryEntry:
        """
        Record a ride owned by the caller, timestamped now.
        """
        ...

    async def get_ride(self, caller: CallerIdentity, ride_id: int) -> RideHistoryEntry:
        """
        Get one of the caller's rides.

        Raises:
            RideNotFoundError: If the ride doesn't exist
            RideAccessDeniedError: If the caller doesn't own the ride
        """
        ...
