"""
Ride estimate models.
"""

from pydantic import Field

from shared.models import CamelModel


class EstimateRequest(CamelModel):
    """Pickup and dropoff coordinates to quote for."""

    pickup_latitude: str = Field(..., min_length=1)
    pickup_longitude: str = Field(..., min_length=1)
    dropoff_latitude: str = Field(..., min_length=1)
    dropoff_longitude: str = Field(..., min_length=1)


class RideOffer(CamelModel):
    """One ride type offered by a provider."""

    ride_type: str
    capacity: int = Field(..., ge=0, description="Seats")
    fare: str
    currency: str
    estimated_pickup_time: int = Field(..., ge=0, description="Minutes until pickup")
    estimated_duration: int = Field(..., ge=0, description="Trip length in minutes")
    distance: str = Field(..., description="Kilometres")
    deep_link: str


class ProviderEstimates(CamelModel):
    """Everything one provider offers for a trip."""

    service: str
    estimates: list[RideOffer]
