"""
Authentication module data models.

These models define the request and response bodies of the auth
endpoints and what the service hands back to them.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel
from modules.storage.models import Session, User
from .passwords import MAX_PASSWORD_BYTES


class RegisterRequest(CamelModel):
    """Request to create an account."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    full_name: Optional[str] = None
    profile_pic: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(CamelModel):
    """Request to log in."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PublicUser(CamelModel):
    """A user as shown to clients. Never carries the password."""

    id: int
    username: str
    email: Optional[str] = None
    phone: Optional[str] = None
    full_name: Optional[str] = None
    profile_pic: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls.model_validate(user.model_dump())


class LogoutResponse(BaseModel):
    """Response from logout."""

    message: str = "Logged out"


class AuthSession(BaseModel):
    """A user together with the session just opened for them."""

    user: User
    session: Session
