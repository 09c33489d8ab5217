"""
Saved places module.

Lets a logged-in user keep named location shortcuts.

Public API:
- IPlacesService: Interface for saved place operations
- CreatePlaceRequest / DeleteResponse: API models
- PlaceNotFoundError / PlaceAccessDeniedError
"""

from .interfaces import IPlacesService
from .models import CreatePlaceRequest, DeleteResponse
from .exceptions import PlaceAccessDeniedError, PlaceNotFoundError

__all__ = [
    "IPlacesService",
    "CreatePlaceRequest",
    "DeleteResponse",
    "PlaceAccessDeniedError",
    "PlaceNotFoundError",
]
