# File: blemap/services/project_service.py

"""
Project persistence scoped by owner.

Every single-project operation goes through ``get_owned_project`` so a
missing id and a foreign id are told apart (404 vs 403 at the API).
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from blemap.models.project import Project
from blemap.models.user import User
from blemap.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectNotFoundError(Exception):
    pass


class ProjectAccessError(Exception):
    pass


def list_projects(db: Session, owner: User) -> List[Project]:
    stmt = (
        select(Project)
        .where(Project.user_id == owner.id)
        .order_by(Project.created_at.desc())
    )
    return list(db.scalars(stmt))


def get_owned_project(db: Session, owner: User, project_id: str) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise ProjectNotFoundError(f"Project {project_id} not found.")
    if project.user_id != owner.id:
        raise ProjectAccessError("Forbidden: You do not own this project")
    return project


def create_project(db: Session, owner: User, payload: ProjectCreate) -> Project:
    project = Project(
        user_id=owner.id,
        name=payload.name,
        description=payload.description,
        map_data=payload.map_data,
    )
    db.add(project)
    db.commit()
    db.refresh(project)

    logger.info("User %s created project %s", owner.id, project.id)
    return project


def update_project(
    db: Session,
    owner: User,
    project_id: str,
    payload: ProjectUpdate,
) -> Project:
    project = get_owned_project(db, owner, project_id)

    # Omitted / null fields keep what is stored
    if payload.name is not None:
        project.name = payload.name
    if payload.description is not None:
        project.description = payload.description
    if payload.map_data is not None:
        project.map_data = payload.map_data

    db.commit()
    db.refresh(project)

    logger.info("User %s updated project %s", owner.id, project.id)
    return project


def delete_project(db: Session, owner: User, project_id: str) -> None:
    project = get_owned_project(db, owner, project_id)
    db.delete(project)
    db.commit()

    logger.info("User %s deleted project %s", owner.id, project_id)
