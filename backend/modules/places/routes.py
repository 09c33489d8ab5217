"""
Saved places API endpoints.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_places_service
from api.middleware.session import RequireCaller
from shared.models import CallerIdentity
from modules.storage.models import MAX_ROW_ID, SavedPlace

from .interfaces import IPlacesService
from .models import CreatePlaceRequest, DeleteResponse

router = APIRouter()


@router.get("", response_model=list[SavedPlace])
async def list_places(
    caller: CallerIdentity = RequireCaller,
    service: IPlacesService = Depends(get_places_service),
) -> list[SavedPlace]:
    """List the current user's saved places."""
    return await service.list_places(caller)


@router.post("", response_model=SavedPlace, status_code=201)
async def create_place(
    request: CreatePlaceRequest,
    caller: CallerIdentity = RequireCaller,
    service: IPlacesService = Depends(get_places_service),
) -> SavedPlace:
    """Save a place for the current user."""
    return await service.create_place(caller, request)


@router.delete("/{place_id}", response_model=DeleteResponse)
async def delete_place(
    place_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    caller: CallerIdentity = RequireCaller,
    service: IPlacesService = Depends(get_places_service),
) -> DeleteResponse:
    """
    Delete one of the current user's places.

    404 if it doesn't exist, 403 if it belongs to someone else.
    """
    await service.delete_place(caller, place_id)
    return DeleteResponse()
