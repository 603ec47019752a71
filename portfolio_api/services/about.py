"""The singleton About document: get-or-create, partial update and list appends."""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_api.core.errors import NotFound
from portfolio_api.models import ABOUT_KEY, About
from portfolio_api.schemas.about import AboutUpdate, EducationEntry, ExperienceEntry

logger = logging.getLogger(__name__)

DEFAULT_ABOUT: dict[str, Any] = {
    "title": "About Me",
    "bio": "Welcome to my portfolio! Update this section with your information.",
    "short_bio": "Full-stack developer passionate about building great web applications.",
}

# List fields replaced wholesale on update, with the entry shape each must have.
_ENTRY_LISTS: dict[str, type[BaseModel]] = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
}
_STRING_LISTS = ("tech_stack", "badges")


def sanitize_strings(value: Any) -> list[str]:
    """Keep the non-blank strings of a list, trimmed. Anything that is not a list yields []."""
    if not isinstance(value, list):
        return []
    return [v.strip() for v in value if isinstance(v, str) and v.strip()]


def sanitize_entries(value: Any, model: type[BaseModel]) -> list[dict[str, Any]]:
    """Validate each entry against model and drop the ones that fail. A non-list yields []."""
    if not isinstance(value, list):
        return []
    entries: list[dict[str, Any]] = []
    for item in value:
        try:
            entries.append(model.model_validate(item).model_dump(mode="json"))
        except ValidationError:
            logger.debug("Discarding malformed %s entry", model.__name__)
    return entries


def find_about(db: Session) -> About | None:
    return db.get(About, ABOUT_KEY)


def get_or_create_about(db: Session) -> About:
    """Return the About document, creating the default one on first access."""
    about = find_about(db)
    if about is not None:
        return about
    about = About(id=ABOUT_KEY, **DEFAULT_ABOUT)
    db.add(about)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request created it first.
        db.rollback()
        about = find_about(db)
        if about is None:
            raise
        return about
    db.refresh(about)
    logger.info("Created default About document")
    return about


def update_about(db: Session, body: AboutUpdate) -> About:
    """Apply the supplied fields; list fields are replaced, never merged."""
    about = get_or_create_about(db)
    changes = body.model_dump(exclude_unset=True)
    for key, value in changes.items():
        if key in _ENTRY_LISTS:
            value = sanitize_entries(value, _ENTRY_LISTS[key])
        elif key in _STRING_LISTS:
            value = sanitize_strings(value)
        elif value is None and key in ("social_links", "contact", "experience_stats"):
            value = {}
        setattr(about, key, value)
    db.commit()
    db.refresh(about)
    logger.info(
        "Updated About document: fields=%s experience=%d tech_stack=%d",
        sorted(changes),
        len(about.experience or []),
        len(about.tech_stack or []),
    )
    return about


def _append(db: Session, field: str, entry: BaseModel) -> About:
    about = find_about(db)
    if about is None:
        raise NotFound("About document not found. Please create it first.")
    # Reassign rather than mutate so the JSON column is flagged dirty.
    setattr(about, field, [*(getattr(about, field) or []), entry.model_dump(mode="json")])
    db.commit()
    db.refresh(about)
    return about


def add_experience(db: Session, entry: ExperienceEntry) -> About:
    return _append(db, "experience", entry)


def add_education(db: Session, entry: EducationEntry) -> About:
    return _append(db, "education", entry)
