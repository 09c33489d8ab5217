"""
Ride history API models.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import Field

from shared.models import CamelModel


class RideStatus(str, Enum):
    """
    Conventional ride status values.

    The stored status is a free-form string; these are the values the
    client uses. Nothing transitions a ride between them.
    """
    BOOKED = "booked"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CreateRideRequest(CamelModel):
    """
    Request to record a booked ride.

    The owner and the timestamp are set by the server; userId and
    timestamp in the body are ignored.
    """

    pickup_location: str = Field(..., min_length=1)
    dropoff_location: str = Field(..., min_length=1)
    pickup_latitude: str = Field(..., min_length=1)
    pickup_longitude: str = Field(..., min_length=1)
    dropoff_latitude: str = Field(..., min_length=1)
    dropoff_longitude: str = Field(..., min_length=1)
    service: str = Field(..., min_length=1, description="Provider, e.g. uber, ola, rapido")
    ride_type: str = Field(..., min_length=1)
    fare: str = Field(..., min_length=1)
    distance: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1)
    status: str = Field(default=RideStatus.BOOKED.value, min_length=1)
    payment_method: Optional[str] = None
    driver_details: Optional[Any] = None
