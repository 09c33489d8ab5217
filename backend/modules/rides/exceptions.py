"""
Ride history module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class RideNotFoundError(NotFoundError):
    """Raised when a ride is not found."""

    def __init__(self, ride_id: int):
        super().__init__(
            "Ride not found",
            code="RIDE_NOT_FOUND",
            details={"ride_id": ride_id},
        )


class RideAccessDeniedError(AuthorizationError):
    """Raised when a user asks for a ride they don't own."""

    def __init__(self, ride_id: int):
        super().__init__(
            "Forbidden",
            code="RIDE_ACCESS_DENIED",
            details={"ride_id": ride_id},
        )
