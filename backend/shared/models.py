"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for models that travel over the API.

    Fields are snake_case in Python and in the database, camelCase on
    the wire. Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CallerIdentity(BaseModel):
    """
    Who is making the current request.

    Resolved from the session cookie once per request and passed
    explicitly to route handlers and services.
    """

    user_id: Optional[int] = Field(None, description="Authenticated user ID")
    session_id: Optional[str] = Field(None, description="Opaque session ID")

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = CallerIdentity()
