from sqlalchemy import Column, String
from app.models.base import BaseModel, check_text
from sqlalchemy.orm import validates


class Task(BaseModel):
    """A unit of work. Projects only reference tasks; they never own them."""
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)

    @validates("title")
    def _validate_title(self, key, value):
        return check_text(key, value, max_length=200)

    def to_document(self) -> dict:
        return {
            "_id": str(self.id) if self.id is not None else None,
            "title": self.title,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
