"""
Saved places API models.
"""

from pydantic import BaseModel, Field

from shared.models import CamelModel


class CreatePlaceRequest(CamelModel):
    """
    Request to save a place.

    The owner is always the caller; any userId in the body is ignored.
    """

    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: str = Field(..., min_length=1, description="Decimal degrees as a string")
    longitude: str = Field(..., min_length=1, description="Decimal degrees as a string")


class DeleteResponse(BaseModel):
    """Confirmation of a delete."""

    message: str = "Place deleted successfully"
