"""ORM model for contact form submissions."""

from sqlalchemy import Boolean, Column, String, Text

from portfolio_api.models.base import Base, TimestampMixin, new_id


class ContactMessage(Base, TimestampMixin):
    """Message submitted through the public contact form."""

    __tablename__ = "contact_messages"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(200), nullable=True)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False, index=True)
    replied = Column(Boolean, nullable=False, default=False)
    ip_address = Column(String(64), nullable=True)
