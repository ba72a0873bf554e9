from sqlalchemy import Column, String, Integer, ForeignKey, Uuid
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates
from app.core.database import Base
from app.models.base import BaseModel, check_text
from app.models.task import Task  # noqa: F401


class ProjectTask(Base):
    """Ordered link from a project to a task it tracks."""
    __tablename__ = "project_tasks"

    project_id = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True)
    task_id = Column(Uuid, ForeignKey("tasks.id"), primary_key=True)
    position = Column(Integer, nullable=False)

    task = relationship("Task")


class Project(BaseModel):
    __tablename__ = "projects"
    
    name = Column(String(50), nullable=False)
    description = Column(String(500), nullable=True)
    
    # The manager who created the project
    creator_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    creator = relationship("User", back_populates="projects")
    
    task_links = relationship(
        "ProjectTask",
        order_by=ProjectTask.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    tasks = association_proxy(
        "task_links", "task",
        creator=lambda task: ProjectTask(task=task),
    )

    @validates("name")
    def _validate_name(self, key, value):
        return check_text(key, value, max_length=50)

    @validates("description")
    def _validate_description(self, key, value):
        return check_text(key, value, max_length=500, required=False)

    @property
    def task_ids(self):
        return [link.task_id if link.task_id is not None else link.task.id for link in self.task_links]

    def to_document(self) -> dict:
        return {
            "_id": str(self.id) if self.id is not None else None,
            "name": self.name,
            "description": self.description,
            "creator": str(self.creator_id) if self.creator_id is not None else None,
            "tasks": [str(task_id) for task_id in self.task_ids],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


from app.models.user import User  # noqa: E402,F401
