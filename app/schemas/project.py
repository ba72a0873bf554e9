from pydantic import Field
from typing import Optional, List
from uuid import UUID
from datetime import datetime

from app.schemas.validation import WireModel, ResponseModel, ValidationResult, validate_with


class ProjectCreate(WireModel):
    """Client payload for a new project.

    The creator is never taken from the payload; routes attach the
    authenticated user. `tasks` is a single task id string, not a list.
    """
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    tasks: Optional[str] = Field(None, min_length=1)


def validate_project(project) -> ValidationResult:
    return validate_with(ProjectCreate, project)


class ProjectResponse(ResponseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    creator_id: UUID
    task_ids: List[UUID] = []
    created_at: datetime
    updated_at: Optional[datetime] = None
