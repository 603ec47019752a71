"""ORM model for application users (admin accounts)."""

from sqlalchemy import Column, String

from portfolio_api.models.base import Base, TimestampMixin, new_id


class User(Base, TimestampMixin):
    """
    Account that can sign in and manage portfolio content.

    email is stored lower-cased and is unique. role is informational; any
    authenticated user may call protected endpoints.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="admin")
