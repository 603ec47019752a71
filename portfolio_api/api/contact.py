"""Contact form (public) and message inbox (authenticated)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request, status

from portfolio_api.api.deps import CurrentUserDep, DbDep, Pagination, client_ip, pagination
from portfolio_api.core.responses import success_response
from portfolio_api.schemas.common import PageMeta
from portfolio_api.schemas.contact import ContactMessageCreate, ContactMessageOut, ContactReceipt
from portfolio_api.services import contact

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def submit_message(body: ContactMessageCreate, request: Request, db: DbDep) -> dict[str, Any]:
    """Anyone may send a message; the sender's address is recorded."""
    message = contact.create_message(db, body, ip_address=client_ip(request))
    return success_response(
        "Message sent successfully! We will get back to you soon.",
        ContactReceipt.model_validate(message),
    )


@router.get("")
def list_messages(
    db: DbDep,
    _user: CurrentUserDep,
    page: Annotated[Pagination, Depends(pagination(20))],
    read: Annotated[bool | None, Query()] = None,
) -> dict[str, Any]:
    items, total = contact.list_messages(db, page.page, page.limit, read=read)
    return success_response(
        "Messages retrieved successfully",
        [ContactMessageOut.model_validate(m) for m in items],
        PageMeta.build(total=total, page=page.page, limit=page.limit),
    )


@router.get("/{message_id}")
def get_message(message_id: str, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    """Return one message and mark it read."""
    message = contact.get_message(db, message_id)
    return success_response("Message retrieved successfully", ContactMessageOut.model_validate(message))


@router.put("/{message_id}/read")
def mark_read(message_id: str, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    message = contact.mark_read(db, message_id)
    return success_response("Message marked as read", ContactMessageOut.model_validate(message))


@router.delete("/{message_id}")
def delete_message(message_id: str, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    deleted_id = contact.delete_message(db, message_id)
    return success_response("Message deleted successfully", {"id": deleted_id})
