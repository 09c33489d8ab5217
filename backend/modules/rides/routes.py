"""
Ride history API endpoints.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_rides_service
from api.middleware.session import RequireCaller
from shared.models import CallerIdentity
from modules.storage.models import MAX_ROW_ID, RideHistoryEntry

from .interfaces import IRidesService
from .models import CreateRideRequest

router = APIRouter()


@router.get("", response_model=list[RideHistoryEntry])
async def list_rides(
    caller: CallerIdentity = RequireCaller,
    service: IRidesService = Depends(get_rides_service),
) -> list[RideHistoryEntry]:
    """
    List the current user's rides, newest first.
    """
    return await service.list_rides(caller)


@router.post("", response_model=RideHistoryEntry, status_code=201)
async def record_ride(
    request: CreateRideRequest,
    caller: CallerIdentity = RequireCaller,
    service: IRidesService = Depends(get_rides_service),
) -> RideHistoryEntry:
    """
    Record a booked ride for the current user.
    """
    return await service.record_ride(caller, request)


@router.get("/{ride_id}", response_model=RideHistoryEntry)
async def get_ride(
    ride_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    caller: CallerIdentity = RequireCaller,
    service: IRidesService = Depends(get_rides_service),
) -> RideHistoryEntry:
    """
    Get a single ride. 404 if missing, 403 if owned by someone else.
    """
    return await service.get_ride(caller, ride_id)
