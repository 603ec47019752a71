"""Schemas for skills."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, model_validator

from portfolio_api.schemas.common import CamelModel, RequestModel, Trimmed, reject_nulls

SkillCategory = Literal["Frontend", "Backend", "Database", "DevOps", "Tools", "Other"]

SKILL_CATEGORIES: tuple[str, ...] = ("Frontend", "Backend", "Database", "DevOps", "Tools", "Other")

NAME_MAX_LEN = 50


class SkillCreate(RequestModel):
    """Body for POST /skills."""

    name: Trimmed = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    category: SkillCategory = "Other"
    proficiency: int = Field(default=50, ge=0, le=100)
    icon: Trimmed | None = Field(default=None, max_length=255)
    order: int = 0


class SkillUpdate(RequestModel):
    """Body for PUT /skills/{id}. Same rules as create; omitted fields are unchanged."""

    name: Trimmed | None = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    category: SkillCategory | None = None
    proficiency: int | None = Field(default=None, ge=0, le=100)
    icon: Trimmed | None = Field(default=None, max_length=255)
    order: int | None = None

    @model_validator(mode="before")
    @classmethod
    def required_fields_not_null(cls, data: Any) -> Any:
        return reject_nulls(data, ("name", "category", "proficiency", "order"))


class SkillOut(CamelModel):
    id: str
    name: str
    category: str
    proficiency: int
    icon: str | None = None
    order: int
    created_at: datetime
    updated_at: datetime
