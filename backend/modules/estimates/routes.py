"""
Ride estimate API endpoints.

No session required.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_estimates_service

from .interfaces import IEstimatesService
from .models import EstimateRequest, ProviderEstimates

router = APIRouter()


@router.post("", response_model=list[ProviderEstimates])
async def get_ride_estimates(
    request: EstimateRequest,
    service: IEstimatesService = Depends(get_estimates_service),
) -> list[ProviderEstimates]:
    """
    Get fare and ETA estimates from every provider for a trip.
    """
    return await service.get_estimates(request)
