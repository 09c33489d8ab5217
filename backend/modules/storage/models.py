"""
Storage module data models.

These are the records held by every storage backend. API request and
response models live in the feature modules and are built from these.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import Field

from shared.models import CamelModel

# Row ids are SERIAL (int4) columns
MAX_ROW_ID = 2**31 - 1


class NewUser(CamelModel):
    """Fields needed to create a user. The password is already hashed."""

    username: str
    password_hash: str
    email: Optional[str] = None
    phone: Optional[str] = None
    full_name: Optional[str] = None
    profile_pic: Optional[str] = None


class User(NewUser):
    """A stored user. The password hash never leaves the process."""

    id: int
    password_hash: str = Field(..., exclude=True, repr=False)


class NewSavedPlace(CamelModel):
    """Fields needed to create a saved place."""

    user_id: int
    name: str
    address: str
    latitude: str
    longitude: str


class SavedPlace(NewSavedPlace):
    """A user-named location shortcut."""

    id: int


class NewRideHistory(CamelModel):
    """
    Fields needed to record a ride.

    There is no timestamp here: the store assigns it at insertion.
    """

    user_id: int
    pickup_location: str
    dropoff_location: str
    pickup_latitude: str
    pickup_longitude: str
    dropoff_latitude: str
    dropoff_longitude: str
    service: str
    ride_type: str
    fare: str
    distance: str
    duration: str
    status: str
    payment_method: Optional[str] = None
    driver_details: Optional[Any] = None


class RideHistoryEntry(NewRideHistory):
    """An immutable record of a booked ride."""

    id: int
    timestamp: datetime


class Session(CamelModel):
    """A server-side login session."""

    sid: str
    user_id: int
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
