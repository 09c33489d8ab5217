"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the row-to-model mapping helpers they share.
"""

from typing import Any, Optional, TypeVar, Generic

from pydantic import BaseModel
from supabase import Client


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Row mapping helpers for the common single-row and many-row cases

    Example:
        class PlaceRepository(BaseRepository[SavedPlace]):
            def get(self, place_id: int) -> Optional[SavedPlace]:
                result = self._db.table("saved_places").select("*").eq("id", place_id).execute()
                return self._first(result.data, SavedPlace)
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _first(rows: list[dict[str, Any]], model: type[T]) -> Optional[T]:
        """Map the first row of a result to a model, or None if empty."""
        if not rows:
            return None
        return model.model_validate(rows[0])

    @staticmethod
    def _all(rows: list[dict[str, Any]], model: type[T]) -> list[T]:
        """Map every row of a result to a model."""
        return [model.model_validate(row) for row in rows]
