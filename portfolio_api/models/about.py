"""ORM model for the singleton About document."""

from sqlalchemy import Boolean, Column, String, Text

from portfolio_api.models.base import Base, JSONDocument, TimestampMixin

# Primary key of the one About row.
ABOUT_KEY = "about"


class About(Base, TimestampMixin):
    """
    Biography, experience, education and links shown on the About page.

    Exactly one row is expected, stored under ABOUT_KEY. List and mapping
    sub-fields are JSON documents and are replaced wholesale on update.
    """

    __tablename__ = "about"

    id = Column(String(32), primary_key=True, default=ABOUT_KEY)
    title = Column(String(255), nullable=False, default="About Me")
    show_project_intro = Column(Boolean, nullable=False, default=True)
    bio = Column(Text, nullable=False)
    short_bio = Column(String(500), nullable=True)
    profile_image = Column(Text, nullable=True)
    logo = Column(Text, nullable=True)
    resume_url = Column(Text, nullable=True)
    resume = Column(JSONDocument, nullable=True)
    about_home1 = Column(String(1000), nullable=True)
    about_home2 = Column(String(1000), nullable=True)
    about_home3 = Column(String(1000), nullable=True)
    tech_stack = Column(JSONDocument, nullable=False, default=list)
    badges = Column(JSONDocument, nullable=False, default=list)
    experience = Column(JSONDocument, nullable=False, default=list)
    education = Column(JSONDocument, nullable=False, default=list)
    social_links = Column(JSONDocument, nullable=False, default=dict)
    contact = Column(JSONDocument, nullable=False, default=dict)
    experience_stats = Column(JSONDocument, nullable=False, default=dict)
