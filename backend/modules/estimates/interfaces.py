"""
Ride estimates module interface.
"""

from typing import Protocol, runtime_checkable

from .models import EstimateRequest, ProviderEstimates


@runtime_checkable
class IEstimatesService(Protocol):
    """Interface for fare and ETA quotes."""

    async def get_estimates(self, request: EstimateRequest) -> list[ProviderEstimates]:
        """
        Quote a trip with every supported provider.

        Returns:
            One entry per provider, each with at least one offer
        """
        ...
