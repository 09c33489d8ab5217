"""
Supabase client for the durable storage backend.

One service-role client is shared by the whole process. Row level
security is bypassed, so every ownership check happens in the services.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client

    if _client is not None:
        return _client

    settings = get_settings()
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(
            f"Supabase configuration missing: set {', '.join(missing)} "
            "or use STORAGE_BACKEND=memory."
        )

    logger.debug("Creating Supabase client for %s", settings.supabase_url)
    _client = create_client(settings.supabase_url, settings.supabase_service_role_key)
    return _client


def reset_client_cache() -> None:
    """Forget the cached client so the next call rebuilds it from settings."""
    global _client
    _client = None
