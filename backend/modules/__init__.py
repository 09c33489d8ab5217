"""
Feature modules for the RideCompare backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

The storage module holds the records and backends the others build on.
Modules communicate through interfaces, not concrete implementations.
"""
