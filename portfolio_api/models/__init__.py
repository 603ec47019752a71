"""SQLAlchemy ORM models."""

from portfolio_api.models.about import ABOUT_KEY, About
from portfolio_api.models.base import Base
from portfolio_api.models.contact import ContactMessage
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill
from portfolio_api.models.user import User

__all__ = ["ABOUT_KEY", "About", "Base", "ContactMessage", "Project", "Skill", "User"]
