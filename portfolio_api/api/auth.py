"""Registration, login and the current user's profile."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status

from portfolio_api.api.deps import (
    CurrentUserDep,
    DbDep,
    get_settings_dep,
    get_token_service,
    parse_body,
    read_json,
)
from portfolio_api.core.config import Settings
from portfolio_api.core.errors import NotFound, RegistrationDisabled
from portfolio_api.core.responses import success_response
from portfolio_api.core.security import TokenService
from portfolio_api.schemas.auth import (
    AuthPayload,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserOut,
)
from portfolio_api.services import users

router = APIRouter()


async def registration_body(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings_dep)],
) -> Any:
    """Raw register payload; refused with 403 while ALLOW_REGISTER is off, before the body is read."""
    if not settings.ALLOW_REGISTER:
        raise RegistrationDisabled()
    return await read_json(request)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    raw: Annotated[Any, Depends(registration_body)],
    db: DbDep,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> dict[str, Any]:
    """Create an account and return it with a token."""
    body = parse_body(RegisterRequest, raw)
    user = users.register_user(db, name=body.name, email=body.email, password=body.password)
    payload = AuthPayload(user=UserOut.model_validate(user), token=tokens.issue(user.id))
    return success_response("User registered successfully", payload)


@router.post("/login")
def login(
    body: LoginRequest,
    db: DbDep,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> dict[str, Any]:
    """
    Authenticate with email and password; returns the user and a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = users.authenticate(db, body.email, body.password)
    payload = AuthPayload(user=UserOut.model_validate(user), token=tokens.issue(user.id))
    return success_response("Login successful", payload)


@router.get("/me")
def get_me(current_user: CurrentUserDep, db: DbDep) -> dict[str, Any]:
    user = users.get_user(db, current_user.id)
    if user is None:
        raise NotFound("User not found")
    return success_response("User profile retrieved", {"user": UserOut.model_validate(user)})


@router.put("/me")
def update_me(body: ProfileUpdateRequest, current_user: CurrentUserDep, db: DbDep) -> dict[str, Any]:
    """Update name and/or email of the signed-in user."""
    user = users.get_user(db, current_user.id)
    if user is None:
        raise NotFound("User not found")
    user = users.update_profile(db, user, name=body.name, email=body.email)
    return success_response("Profile updated successfully", {"user": UserOut.model_validate(user)})
