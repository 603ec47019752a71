"""Helpers shared by the resource services."""

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_api.core.errors import DuplicateKey, InvalidIdentifier

DEFAULT_PAGE = 1
MAX_PAGE_LIMIT = 100


def parse_id(value: str) -> str:
    """Return the canonical form of a resource id. Raises InvalidIdentifier if it is not a UUID."""
    try:
        return str(uuid.UUID(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdentifier(str(value)) from None


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def like_pattern(term: str) -> str:
    """Substring pattern for ILIKE with %, _ and the escape char escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def commit_unique(db: Session, field: str, message: str | None = None) -> None:
    """Commit; a unique-constraint violation rolls back and becomes DuplicateKey(field)."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateKey(field, message) from e
