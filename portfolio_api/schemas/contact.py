"""Schemas for contact messages."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from portfolio_api.schemas.common import CamelModel, RequestModel, Trimmed


class ContactMessageCreate(RequestModel):
    """Public contact form submission."""

    name: Trimmed = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: Trimmed | None = Field(default=None, max_length=200)
    message: Trimmed = Field(..., min_length=1, max_length=2000)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class ContactReceipt(CamelModel):
    """What an anonymous sender gets back."""

    id: str
    created_at: datetime


class ContactMessageOut(CamelModel):
    id: str
    name: str
    email: str
    subject: str | None = None
    message: str
    read: bool
    replied: bool
    ip_address: str | None = None
    created_at: datetime
    updated_at: datetime
