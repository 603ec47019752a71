"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from portfolio_api.core.security import NAME_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from portfolio_api.schemas.common import CamelModel, RequestModel, Trimmed


def _lower_email(value: str) -> str:
    return value.strip().lower()


class RegisterRequest(RequestModel):
    """New account details."""

    name: Trimmed = Field(..., min_length=1, max_length=NAME_MAX_LEN, description="Display name")
    email: EmailStr = Field(..., description="Login email (stored lower-cased)")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class LoginRequest(RequestModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class ProfileUpdateRequest(RequestModel):
    """Self-service profile update; only supplied fields change."""

    name: Trimmed | None = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    email: EmailStr | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return _lower_email(v) if v is not None else None


class CurrentUser(CamelModel):
    """Authenticated user for dependency injection. Never carries the password hash."""

    id: str
    name: str
    email: str
    role: str


class UserOut(CamelModel):
    """User as returned by the API."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime | None = None


class AuthPayload(CamelModel):
    """Returned by register and login."""

    user: UserOut
    token: str
