"""ORM model for portfolio projects."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from portfolio_api.models.base import Base, JSONDocument, TimestampMixin, new_id


class Project(Base, TimestampMixin):
    """A showcased project. Public listings only return status='published'."""

    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    tech = Column(JSONDocument, nullable=False, default=list)
    live_url = Column(String(2048), nullable=True)
    repo_url = Column(String(2048), nullable=True)
    images = Column(JSONDocument, nullable=False, default=list)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    order = Column(Integer, nullable=False, default=0)
    status = Column(String(16), nullable=False, default="published", index=True)
