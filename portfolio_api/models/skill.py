"""ORM model for skills."""

from sqlalchemy import Column, Index, Integer, String

from portfolio_api.models.base import Base, TimestampMixin, new_id


class Skill(Base, TimestampMixin):
    """A named skill with a category and a 0-100 proficiency. Names are globally unique."""

    __tablename__ = "skills"
    __table_args__ = (Index("ix_skills_category_order", "category", "order"),)

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(50), nullable=False, unique=True)
    category = Column(String(32), nullable=False, default="Other")
    proficiency = Column(Integer, nullable=False, default=50)
    icon = Column(String(255), nullable=True)
    order = Column(Integer, nullable=False, default=0)
