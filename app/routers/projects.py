import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
from app.core.database import get_db
from app.core.errors import FieldError, ResourceNotFoundError, ValidationFailure
from app.models.project import Project
from app.models.task import Task
from app.models.user import User, UserRole
from app.schemas.project import ProjectResponse, validate_project
from app.api.deps import get_authenticated_user, require_role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


# ─── Helpers ──────────────────────────────────────────────────────────────────

def _load_task(db: Session, raw_id: str) -> Task:
    """Resolve the single task reference a project payload may carry."""
    try:
        task_id = UUID(raw_id)
    except ValueError:
        raise ValidationFailure([
            FieldError("tasks", "tasks must be a valid task id", "uuid_parsing")
        ])
    task = db.get(Task, task_id)
    if task is None:
        raise ResourceNotFoundError("Task", raw_id)
    return task


def _load_project(db: Session, project_id: UUID) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise ResourceNotFoundError("Project", str(project_id))
    return project


# ─── Routes ───────────────────────────────────────────────────────────────────

@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.MANAGER, UserRole.ADMIN)),
):
    value, error = validate_project(payload)
    if error:
        raise error
    
    task = _load_task(db, value["tasks"]) if value.get("tasks") else None

    project = Project(
        name=value["name"],
        description=value.get("description"),
        creator=current_user,
    )
    if task is not None:
        project.tasks.append(task)
    
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info(
        "Project created",
        extra={"project_id": str(project.id), "user_id": str(current_user.id)},
    )
    return project


@router.get("", response_model=List[ProjectResponse])
async def list_my_projects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_authenticated_user),
):
    return (
        db.query(Project)
        .filter(Project.creator_id == current_user.id)
        .order_by(Project.created_at)
        .all()
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_authenticated_user),
):
    return _load_project(db, project_id)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_authenticated_user),
):
    project = _load_project(db, project_id)
    if project.creator_id != current_user.id and current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the creator or an admin can delete a project",
        )
    
    # Tasks live on; only the link rows go with the project
    db.delete(project)
    db.commit()
    logger.info("Project deleted", extra={"project_id": str(project_id), "user_id": str(current_user.id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
