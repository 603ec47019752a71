"""Project listing, lookup and CRUD."""

import logging

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Query, Session

from portfolio_api.core.errors import NotFound
from portfolio_api.models import Project
from portfolio_api.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_api.services.common import like_pattern, offset_for, parse_id

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


def _ordered(query: Query) -> Query:
    # Explicit display order first, newest first among equals.
    return query.order_by(Project.order.asc(), Project.created_at.desc())


def _search(query: Query, q: str) -> Query:
    pattern = like_pattern(q)
    return query.filter(
        or_(
            Project.title.ilike(pattern, escape="\\"),
            Project.description.ilike(pattern, escape="\\"),
            cast(Project.tech, String).ilike(pattern, escape="\\"),
        )
    )


def list_projects(
    db: Session,
    page: int,
    limit: int,
    status: str | None = "published",
    q: str | None = None,
) -> tuple[list[Project], int]:
    """Return one page of projects and the total matching count."""
    query = db.query(Project)
    if status:
        query = query.filter(Project.status == status)
    if q and q.strip():
        query = _search(query, q.strip())
    total = query.count()
    items = _ordered(query).offset(offset_for(page, limit)).limit(limit).all()
    return items, total


def list_featured(db: Session, limit: int = FEATURED_LIMIT) -> list[Project]:
    query = db.query(Project).filter(Project.featured.is_(True), Project.status == "published")
    return _ordered(query).limit(limit).all()


def get_project(db: Session, project_id: str) -> Project:
    project = db.get(Project, parse_id(project_id))
    if project is None:
        raise NotFound("Project not found")
    return project


def create_project(db: Session, body: ProjectCreate) -> Project:
    project = Project(**body.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Created project id=%s", project.id)
    return project


def update_project(db: Session, project_id: str, body: ProjectUpdate) -> Project:
    project = get_project(db, project_id)
    for key, value in body.model_dump(exclude_unset=True).items():
        setattr(project, key, value)
    db.commit()
    db.refresh(project)
    logger.info("Updated project id=%s", project.id)
    return project


def delete_project(db: Session, project_id: str) -> str:
    project = get_project(db, project_id)
    db.delete(project)
    db.commit()
    logger.info("Deleted project id=%s", project.id)
    return project.id
