# File: blemap/api/routes/routes_project.py

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from blemap.api.deps import get_current_user, get_db
from blemap.models.user import User
from blemap.schemas.placement import ProjectLayoutSummary
from blemap.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from blemap.services import project_service
from blemap.services.placement_service import summarize_layout
from blemap.services.project_service import ProjectAccessError, ProjectNotFoundError

router = APIRouter()


def _owned_or_raise(db: Session, user: User, project_id: str):
    try:
        return project_service.get_owned_project(db, user, project_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    except ProjectAccessError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List the caller's projects, newest first",
)
def list_projects(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return project_service.list_projects(db, user)


@router.get("/{project_id}", response_model=ProjectRead, summary="Get one project")
def get_project(
    project_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return _owned_or_raise(db, user, project_id)


@router.get(
    "/{project_id}/summary",
    response_model=ProjectLayoutSummary,
    summary="Device counts and map areas of a project layout",
)
def get_project_summary(
    project_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    project = _owned_or_raise(db, user, project_id)
    try:
        return summarize_layout(project.map_data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
)
def create_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return project_service.create_project(db, user, payload)


@router.put("/{project_id}", response_model=ProjectRead, summary="Update project")
def update_project(
    project_id: str,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _owned_or_raise(db, user, project_id)
    return project_service.update_project(db, user, project_id, payload)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete project",
)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _owned_or_raise(db, user, project_id)
    project_service.delete_project(db, user, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
