"""
Ride estimates service implementation.
"""

import logging

from .catalog import MOCK_CATALOGUE
from .interfaces import IEstimatesService
from .models import EstimateRequest, ProviderEstimates

logger = logging.getLogger(__name__)


class EstimatesService(IEstimatesService):
    """Serves the mock catalogue regardless of the coordinates."""

    async def get_estimates(self, request: EstimateRequest) -> list[ProviderEstimates]:
        logger.debug(
            "Estimating trip (%s, %s) -> (%s, %s)",
            request.pickup_latitude,
            request.pickup_longitude,
            request.dropoff_latitude,
            request.dropoff_longitude,
        )
        return [provider.model_copy(deep=True) for provider in MOCK_CATALOGUE]
