#!/usr/bin/env python
"""
Run the RideCompare API server.

Usage:
    uv run python run_api.py
    uv run python run_api.py --reload            # Development mode
    uv run python run_api.py --storage supabase  # Durable storage
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Run RideCompare API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--storage",
        choices=["memory", "supabase"],
        help="Storage backend (overrides STORAGE_BACKEND)",
    )
    parser.add_argument("--log-level", type=str, help="Log level (overrides LOG_LEVEL)")
    args = parser.parse_args()

    # Set before settings are first read; reload workers inherit the environment
    if args.storage:
        os.environ["STORAGE_BACKEND"] = args.storage
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    from shared.config import get_settings
    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
