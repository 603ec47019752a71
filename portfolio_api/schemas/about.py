"""Schemas for the About document and its experience/education entries."""

import uuid
from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from portfolio_api.schemas.common import CamelModel, RequestModel, Trimmed, reject_nulls


def _entry_id() -> str:
    return uuid.uuid4().hex


class ExperienceEntry(RequestModel):
    """One job in the experience list."""

    id: str = Field(default_factory=_entry_id)
    company: Trimmed = Field(..., min_length=1, max_length=200)
    position: Trimmed = Field(..., min_length=1, max_length=200)
    start_date: datetime
    end_date: datetime | None = None
    current: bool = False
    description: str | None = None
    order: int = 0


class EducationEntry(RequestModel):
    """One school/degree in the education list."""

    id: str = Field(default_factory=_entry_id)
    institution: Trimmed = Field(..., min_length=1, max_length=200)
    degree: Trimmed = Field(..., min_length=1, max_length=200)
    field: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    description: str | None = None
    order: int = 0


class SocialLinks(RequestModel):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    email: str | None = None
    website: str | None = None


class ContactInfo(RequestModel):
    email: str | None = None
    phone: str | None = None
    location: str | None = None


class ExperienceStats(RequestModel):
    projects_completed: str | None = None
    clients_satisfied: str | None = None
    years_experience: str | None = None


class ResumeFile(RequestModel):
    file_name: str | None = None
    file_data: str | None = Field(default=None, description="Base64-encoded document")


class AboutUpdate(RequestModel):
    """
    Body for PUT /about. Only supplied fields change.

    techStack, badges, experience and education replace the stored lists
    wholesale. They are accepted loosely here and sanitized on save: a
    non-list becomes [], and entries of the wrong shape are dropped.
    """

    title: Trimmed | None = Field(default=None, min_length=1, max_length=255)
    show_project_intro: bool | None = None
    bio: Trimmed | None = Field(default=None, max_length=5000)
    short_bio: Trimmed | None = Field(default=None, max_length=500)
    profile_image: str | None = None
    logo: str | None = None
    resume_url: str | None = None
    resume: ResumeFile | None = None
    about_home1: str | None = Field(default=None, max_length=1000)
    about_home2: str | None = Field(default=None, max_length=1000)
    about_home3: str | None = Field(default=None, max_length=1000)
    tech_stack: Any = None
    badges: Any = None
    experience: Any = None
    education: Any = None
    social_links: SocialLinks | None = None
    contact: ContactInfo | None = None
    experience_stats: ExperienceStats | None = None

    @model_validator(mode="before")
    @classmethod
    def required_fields_not_null(cls, data: Any) -> Any:
        return reject_nulls(data, ("title", "bio", "show_project_intro"))


class AboutOut(CamelModel):
    id: str
    title: str
    show_project_intro: bool
    bio: str
    short_bio: str | None = None
    profile_image: str | None = None
    logo: str | None = None
    resume_url: str | None = None
    resume: ResumeFile | None = None
    about_home1: str | None = None
    about_home2: str | None = None
    about_home3: str | None = None
    tech_stack: list[str]
    badges: list[str]
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    social_links: SocialLinks
    contact: ContactInfo
    experience_stats: ExperienceStats
    created_at: datetime
    updated_at: datetime
