"""Skills: public reads, authenticated writes."""

from typing import Annotated, Any

from fastapi import APIRouter, Query, status

from portfolio_api.api.deps import CurrentUserDep, DbDep
from portfolio_api.core.responses import success_response
from portfolio_api.schemas.skill import SkillCategory, SkillCreate, SkillOut, SkillUpdate
from portfolio_api.services import skills

router = APIRouter()


@router.get("")
def list_skills(
    db: DbDep,
    category: Annotated[SkillCategory | None, Query()] = None,
) -> dict[str, Any]:
    """Skills for one category as a list, or all skills grouped by category."""
    items = skills.list_skills(db, category)
    if category:
        data: Any = [SkillOut.model_validate(s) for s in items]
    else:
        data = {
            name: [SkillOut.model_validate(s) for s in group]
            for name, group in skills.group_by_category(items).items()
        }
    return success_response("Skills retrieved successfully", data)


@router.get("/{skill_id}")
def get_skill(skill_id: str, db: DbDep) -> dict[str, Any]:
    skill = skills.get_skill(db, skill_id)
    return success_response("Skill retrieved successfully", SkillOut.model_validate(skill))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_skill(body: SkillCreate, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    skill = skills.create_skill(db, body)
    return success_response("Skill created successfully", SkillOut.model_validate(skill))


@router.put("/{skill_id}")
def update_skill(skill_id: str, body: SkillUpdate, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    skill = skills.update_skill(db, skill_id, body)
    return success_response("Skill updated successfully", SkillOut.model_validate(skill))


@router.delete("/{skill_id}")
def delete_skill(skill_id: str, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    deleted_id = skills.delete_skill(db, skill_id)
    return success_response("Skill deleted successfully", {"id": deleted_id})
