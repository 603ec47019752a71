"""Public project listings and authenticated project management."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from portfolio_api.api.deps import CurrentUserDep, DbDep, Pagination, pagination
from portfolio_api.core.responses import success_response
from portfolio_api.schemas.common import PageMeta
from portfolio_api.schemas.project import ProjectCreate, ProjectOut, ProjectStatus, ProjectUpdate
from portfolio_api.services import projects

router = APIRouter()


@router.get("")
def list_projects(
    db: DbDep,
    page: Annotated[Pagination, Depends(pagination(10))],
    q: Annotated[str | None, Query(max_length=200, description="Text search")] = None,
    status_: Annotated[ProjectStatus, Query(alias="status")] = "published",
) -> dict[str, Any]:
    """
    List projects, ordered by display order then newest first.

    Defaults to published projects only. `q` searches title, description and tech.
    """
    items, total = projects.list_projects(db, page.page, page.limit, status=status_, q=q)
    return success_response(
        "Projects retrieved successfully",
        [ProjectOut.model_validate(p) for p in items],
        PageMeta.build(total=total, page=page.page, limit=page.limit),
    )


@router.get("/featured")
def list_featured(db: DbDep) -> dict[str, Any]:
    items = projects.list_featured(db)
    return success_response(
        "Featured projects retrieved successfully",
        [ProjectOut.model_validate(p) for p in items],
    )


@router.get("/{project_id}")
def get_project(project_id: str, db: DbDep) -> dict[str, Any]:
    project = projects.get_project(db, project_id)
    return success_response("Project retrieved successfully", ProjectOut.model_validate(project))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(body: ProjectCreate, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    project = projects.create_project(db, body)
    return success_response("Project created successfully", ProjectOut.model_validate(project))


@router.put("/{project_id}")
def update_project(
    project_id: str, body: ProjectUpdate, db: DbDep, _user: CurrentUserDep
) -> dict[str, Any]:
    project = projects.update_project(db, project_id, body)
    return success_response("Project updated successfully", ProjectOut.model_validate(project))


@router.delete("/{project_id}")
def delete_project(project_id: str, db: DbDep, _user: CurrentUserDep) -> dict[str, Any]:
    deleted_id = projects.delete_project(db, project_id)
    return success_response("Project deleted successfully", {"id": deleted_id})
