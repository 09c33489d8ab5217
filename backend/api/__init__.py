"""
RideCompare API package.

Provides the FastAPI application for the ride comparison service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
