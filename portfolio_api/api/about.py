"""The About page document."""

from typing import Any

from fastapi import APIRouter

from portfolio_api.api.deps import CurrentUserDep, DbDep
from portfolio_api.core.responses import success_response
from portfolio_api.schemas.about import AboutOut, AboutUpdate, EducationEntry, ExperienceEntry
from portfolio_api.services import about as about_service

router = APIRouter()


@router.get("")
def get_about(db: DbDep) -> dict[str, Any]:
    """Return the About document. The first call creates a default one."""
    about = about_service.get_or_create_about(db)
    return success_response("About content retrieved successfully", AboutOut.model_validate(about))


@router.put("")
def update_about(body: AboutUpdate, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    about = about_service.update_about(db, body)
    return success_response("About content updated successfully", AboutOut.model_validate(about))


@router.post("/experience")
def add_experience(body: ExperienceEntry, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    about = about_service.add_experience(db, body)
    return success_response("Experience added successfully", AboutOut.model_validate(about))


@router.post("/education")
def add_education(body: EducationEntry, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    about = about_service.add_education(db, body)
    return success_response("Education added successfully", AboutOut.model_validate(about))
