"""Account registration, login and profile updates."""

import logging
import secrets
from functools import lru_cache

from sqlalchemy.orm import Session

from portfolio_api.core.errors import DuplicateKey, InvalidCredential
from portfolio_api.core.security import hash_password, verify_password
from portfolio_api.models import User
from portfolio_api.services.common import commit_unique

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"
INVALID_LOGIN_MESSAGE = "Invalid credentials"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    """Hash checked when the email is unknown so both failure paths cost one bcrypt check."""
    return hash_password(secrets.token_urlsafe(16))


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)


def register_user(db: Session, name: str, email: str, password: str, role: str = "admin") -> User:
    """Create an account. Raises DuplicateKey if the (lower-cased) email is taken."""
    email = email.strip().lower()
    if find_by_email(db, email) is not None:
        raise DuplicateKey("email", DUPLICATE_EMAIL_MESSAGE)
    user = User(name=name, email=email, password_hash=hash_password(password), role=role)
    db.add(user)
    commit_unique(db, "email", DUPLICATE_EMAIL_MESSAGE)
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Return the user for these credentials.

    Unknown email and wrong password raise the same InvalidCredential so callers
    cannot tell which accounts exist.
    """
    user = find_by_email(db, email)
    if user is None:
        verify_password(password, _dummy_hash())
        raise InvalidCredential(INVALID_LOGIN_MESSAGE)
    if not verify_password(password, user.password_hash):
        raise InvalidCredential(INVALID_LOGIN_MESSAGE)
    return user


def update_profile(db: Session, user: User, name: str | None = None, email: str | None = None) -> User:
    """Change name and/or email; None leaves a field as is."""
    if name:
        user.name = name
    if email:
        email = email.strip().lower()
        if email != user.email:
            existing = find_by_email(db, email)
            if existing is not None and existing.id != user.id:
                raise DuplicateKey("email", DUPLICATE_EMAIL_MESSAGE)
            user.email = email
    commit_unique(db, "email", DUPLICATE_EMAIL_MESSAGE)
    db.refresh(user)
    return user
