"""Schemas for portfolio projects."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator

from portfolio_api.schemas.common import CamelModel, RequestModel, Trimmed, reject_nulls, validate_http_url

ProjectStatus = Literal["draft", "published", "archived"]

TITLE_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 2000


def _clean_strings(values: list[str]) -> list[str]:
    return [v.strip() for v in values if v and v.strip()]


class ProjectCreate(RequestModel):
    """Body for POST /projects."""

    title: Trimmed = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    description: Trimmed = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LEN)
    tech: list[str] = Field(default_factory=list, description="Technology tags, in display order")
    live_url: str | None = None
    repo_url: str | None = None
    images: list[str] = Field(default_factory=list, description="Image URLs")
    featured: bool = False
    order: int = 0
    status: ProjectStatus = "published"

    @field_validator("live_url", "repo_url")
    @classmethod
    def validate_urls(cls, v: str | None) -> str | None:
        return validate_http_url(v)

    @field_validator("tech", "images")
    @classmethod
    def drop_blank_entries(cls, v: list[str]) -> list[str]:
        return _clean_strings(v)


class ProjectUpdate(RequestModel):
    """Body for PUT /projects/{id}. Omitted fields keep their stored value."""

    title: Trimmed | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LEN)
    description: Trimmed | None = Field(default=None, min_length=1, max_length=DESCRIPTION_MAX_LEN)
    tech: list[str] | None = None
    live_url: str | None = None
    repo_url: str | None = None
    images: list[str] | None = None
    featured: bool | None = None
    order: int | None = None
    status: ProjectStatus | None = None

    @model_validator(mode="before")
    @classmethod
    def required_fields_not_null(cls, data: Any) -> Any:
        return reject_nulls(
            data, ("title", "description", "tech", "images", "featured", "order", "status")
        )

    @field_validator("live_url", "repo_url")
    @classmethod
    def validate_urls(cls, v: str | None) -> str | None:
        return validate_http_url(v)

    @field_validator("tech", "images")
    @classmethod
    def drop_blank_entries(cls, v: list[str] | None) -> list[str] | None:
        return _clean_strings(v) if v is not None else None


class ProjectOut(CamelModel):
    id: str
    title: str
    description: str
    tech: list[str]
    live_url: str | None = None
    repo_url: str | None = None
    images: list[str]
    featured: bool
    order: int
    status: str
    created_at: datetime
    updated_at: datetime
