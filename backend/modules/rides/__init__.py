"""
Ride history module.

Records booked rides and lets their owner read them back.
Entries are immutable once created.

Public API:
- IRidesService: Interface for ride history operations
- CreateRideRequest / RideStatus: API models
- RideNotFoundError / RideAccessDeniedError
"""

from .interfaces import IRidesService
from .models import CreateRideRequest, RideStatus
from .exceptions import RideAccessDeniedError, RideNotFoundError

__all__ = [
    "IRidesService",
    "CreateRideRequest",
    "RideStatus",
    "RideAccessDeniedError",
    "RideNotFoundError",
]
