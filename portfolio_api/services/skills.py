"""Skill CRUD. Names are globally unique."""

import logging

from sqlalchemy.orm import Session

from portfolio_api.core.errors import DuplicateKey, NotFound
from portfolio_api.models import Skill
from portfolio_api.schemas.skill import SkillCreate, SkillUpdate
from portfolio_api.services.common import commit_unique, parse_id

logger = logging.getLogger(__name__)


def _ensure_name_free(db: Session, name: str, exclude_id: str | None = None) -> None:
    query = db.query(Skill).filter(Skill.name == name)
    if exclude_id is not None:
        query = query.filter(Skill.id != exclude_id)
    if query.first() is not None:
        raise DuplicateKey("name")


def list_skills(db: Session, category: str | None = None) -> list[Skill]:
    query = db.query(Skill)
    if category:
        query = query.filter(Skill.category == category)
    return query.order_by(Skill.category.asc(), Skill.order.asc()).all()


def group_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    """Group skills by category, keeping the input order within each group."""
    grouped: dict[str, list[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


def get_skill(db: Session, skill_id: str) -> Skill:
    skill = db.get(Skill, parse_id(skill_id))
    if skill is None:
        raise NotFound("Skill not found")
    return skill


def create_skill(db: Session, body: SkillCreate) -> Skill:
    _ensure_name_free(db, body.name)
    skill = Skill(**body.model_dump())
    db.add(skill)
    commit_unique(db, "name")
    db.refresh(skill)
    logger.info("Created skill id=%s name=%s", skill.id, skill.name)
    return skill


def update_skill(db: Session, skill_id: str, body: SkillUpdate) -> Skill:
    skill = get_skill(db, skill_id)
    changes = body.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] != skill.name:
        _ensure_name_free(db, changes["name"], exclude_id=skill.id)
    for key, value in changes.items():
        setattr(skill, key, value)
    commit_unique(db, "name")
    db.refresh(skill)
    return skill


def delete_skill(db: Session, skill_id: str) -> str:
    skill = get_skill(db, skill_id)
    db.delete(skill)
    db.commit()
    logger.info("Deleted skill id=%s", skill.id)
    return skill.id
