"""
Saved places module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class PlaceNotFoundError(NotFoundError):
    """Raised when a saved place is not found."""

    def __init__(self, place_id: int):
        super().__init__(
            "Place not found",
            code="PLACE_NOT_FOUND",
            details={"place_id": place_id},
        )


class PlaceAccessDeniedError(AuthorizationError):
    """Raised when a user touches a place they don't own."""

    def __init__(self, place_id: int):
        super().__init__(
            "Forbidden",
            code="PLACE_ACCESS_DENIED",
            details={"place_id": place_id},
        )
