"""Contact form submissions and the admin inbox."""

import logging

from sqlalchemy.orm import Session

from portfolio_api.core.errors import NotFound
from portfolio_api.models import ContactMessage
from portfolio_api.schemas.contact import ContactMessageCreate
from portfolio_api.services.common import offset_for, parse_id

logger = logging.getLogger(__name__)


def create_message(db: Session, body: ContactMessageCreate, ip_address: str | None) -> ContactMessage:
    message = ContactMessage(**body.model_dump(), ip_address=ip_address)
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info("Contact message received id=%s", message.id)
    return message


def list_messages(
    db: Session,
    page: int,
    limit: int,
    read: bool | None = None,
) -> tuple[list[ContactMessage], int]:
    """Newest first; read filters on the read flag when given."""
    query = db.query(ContactMessage)
    if read is not None:
        query = query.filter(ContactMessage.read.is_(read))
    total = query.count()
    items = (
        query.order_by(ContactMessage.created_at.desc())
        .offset(offset_for(page, limit))
        .limit(limit)
        .all()
    )
    return items, total


def get_message(db: Session, message_id: str, mark_read: bool = True) -> ContactMessage:
    """Fetch one message; by default flips its read flag the first time it is opened."""
    message = db.get(ContactMessage, parse_id(message_id))
    if message is None:
        raise NotFound("Message not found")
    if mark_read and not message.read:
        message.read = True
        db.commit()
        db.refresh(message)
    return message


def mark_read(db: Session, message_id: str) -> ContactMessage:
    return get_message(db, message_id, mark_read=True)


def delete_message(db: Session, message_id: str) -> str:
    message = get_message(db, message_id, mark_read=False)
    db.delete(message)
    db.commit()
    logger.info("Deleted contact message id=%s", message.id)
    return message.id
