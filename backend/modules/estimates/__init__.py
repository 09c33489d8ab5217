"""
Ride estimates module.

Quotes fares and ETAs from ride-hailing providers. The providers are
mocked: every request gets the same fixed catalogue.

Public API:
- IEstimatesService: Interface for estimate lookups
- EstimateRequest / ProviderEstimates / RideOffer: API models
"""

from .interfaces import IEstimatesService
from .models import EstimateRequest, ProviderEstimates, RideOffer

__all__ = [
    "IEstimatesService",
    "EstimateRequest",
    "ProviderEstimates",
    "RideOffer",
]
