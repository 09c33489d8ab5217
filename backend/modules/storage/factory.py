"""
Storage backend selection.
"""

import logging

from shared.config import Settings
from .interfaces import IStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> IStorage:
    """
    Build the storage backend named by settings.storage_backend.

    Args:
        settings: Application settings

    Returns:
        A MemoryStorage or SupabaseStorage instance

    Raises:
        ValueError: If the backend name is unknown
        RuntimeError: If the Supabase backend is selected but not configured
    """
    backend = settings.storage_backend

    if backend == "memory":
        from .memory import MemoryStorage
        logger.info("Using in-memory storage; data will not survive a restart")
        return MemoryStorage()

    if backend == "supabase":
        from shared.database import get_supabase_client
        from .repository import SupabaseStorage
        logger.info("Using Supabase storage at %s", settings.supabase_url)
        return SupabaseStorage(get_supabase_client())

    raise ValueError(f"Unknown storage backend: {backend}")
