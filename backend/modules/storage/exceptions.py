"""
Storage module exceptions.
"""

from shared.exceptions import ConflictError


class UsernameTakenError(ConflictError):
    """Raised when creating a user whose username already exists."""

    def __init__(self, username: str):
        super().__init__(
            "Username already exists",
            code="USERNAME_TAKEN",
            details={"username": username},
        )
