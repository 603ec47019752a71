"""Pydantic request/response schemas."""

from portfolio_api.schemas.about import AboutOut, AboutUpdate, EducationEntry, ExperienceEntry
from portfolio_api.schemas.auth import AuthPayload, CurrentUser, LoginRequest, RegisterRequest, UserOut
from portfolio_api.schemas.common import PageMeta
from portfolio_api.schemas.contact import ContactMessageCreate, ContactMessageOut, ContactReceipt
from portfolio_api.schemas.health import HealthResponse
from portfolio_api.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from portfolio_api.schemas.skill import SkillCreate, SkillOut, SkillUpdate
from portfolio_api.schemas.upload import InlineImage, UploadedImage

__all__ = [
    "AboutOut",
    "AboutUpdate",
    "AuthPayload",
    "ContactMessageCreate",
    "ContactMessageOut",
    "ContactReceipt",
    "CurrentUser",
    "EducationEntry",
    "ExperienceEntry",
    "HealthResponse",
    "InlineImage",
    "LoginRequest",
    "PageMeta",
    "ProjectCreate",
    "ProjectOut",
    "ProjectUpdate",
    "RegisterRequest",
    "SkillCreate",
    "SkillOut",
    "SkillUpdate",
    "UploadedImage",
    "UserOut",
]
