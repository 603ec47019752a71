"""Shared request dependencies: auth gate, pagination, body parsing, client address."""

import logging
from typing import Annotated, Any, TypeVar

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from portfolio_api.core.config import Settings
from portfolio_api.core.database import get_db
from portfolio_api.core.errors import (
    BadRequest,
    ExpiredToken,
    InvalidCredential,
    InvalidIdentifier,
    NoCredential,
    ValidationFailed,
    validation_errors,
)
from portfolio_api.core.security import TokenService
from portfolio_api.schemas.auth import CurrentUser
from portfolio_api.services import users
from portfolio_api.services.common import MAX_PAGE_LIMIT, parse_id
from portfolio_api.services.media import MediaHost

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_media_host(request: Request) -> MediaHost:
    return request.app.state.media_host


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the user it names.

    No header raises NoCredential; a bad or expired token raises InvalidCredential
    or ExpiredToken; a token whose user no longer exists is treated as invalid.
    Any authenticated user passes; role is not checked.
    """
    if credentials is None or not credentials.credentials:
        logger.info("Auth rejected: no token")
        raise NoCredential()
    try:
        sub = tokens.verify(credentials.credentials)
    except ExpiredToken:
        logger.info("Auth rejected: token expired")
        raise
    except InvalidCredential:
        logger.info("Auth rejected: invalid token")
        raise
    try:
        user_id = parse_id(sub)
    except InvalidIdentifier:
        logger.info("Auth rejected: malformed subject")
        raise InvalidCredential("Invalid token payload") from None
    user = users.get_user(db, user_id)
    if user is None:
        logger.info("Auth rejected: subject %s no longer exists", user_id)
        raise InvalidCredential("User not found. Token invalid.")
    return CurrentUser(id=user.id, name=user.name, email=user.email, role=user.role)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
DbDep = Annotated[Session, Depends(get_db)]


class Pagination(BaseModel):
    page: int
    limit: int


def pagination(default_limit: int):
    """Build a dependency reading ?page=&limit= with the given default page size."""

    def _pagination(
        page: Annotated[int, Query(ge=1)] = 1,
        limit: Annotated[int, Query(ge=1, le=MAX_PAGE_LIMIT)] = default_limit,
    ) -> Pagination:
        return Pagination(page=page, limit=limit)

    return _pagination


def parse_body(model: type[ModelT], data: Any) -> ModelT:
    """Validate a raw JSON body, reporting every failing field at once."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailed(validation_errors(e.errors())) from e


async def read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise BadRequest("Request body must be valid JSON") from e


def client_ip(request: Request) -> str | None:
    """
    Peer address of the connection.

    Forwarded headers are not read here; behind a proxy, uvicorn rewrites the
    peer from X-Forwarded-For only for hosts in FORWARDED_ALLOW_IPS.
    """
    return request.client.host if request.client else None
