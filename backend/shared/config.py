"""
Centralized configuration for the RideCompare backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SESSION_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RideCompare API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Storage backend: "memory" is process-lifetime only, "supabase" is durable
    storage_backend: Literal["memory", "supabase"] = "memory"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct PostgreSQL URI, used by run_migrations.py

    # Sessions
    session_secret: str = "dev-session-secret-change-me"
    session_cookie_name: str = "ridecompare.sid"
    session_ttl_seconds: int = 7 * 24 * 60 * 60
    session_cookie_secure: bool = False
    session_prune_interval_seconds: int = 24 * 60 * 60

    # Passwords
    bcrypt_rounds: int = 12


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
