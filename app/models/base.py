import re
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Uuid
from app.core.database import Base
from app.core.errors import SchemaViolation

DIGITS = re.compile(r"^[0-9]+$")


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(Base):
    __abstract__ = True

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


def check_text(field, value, max_length=None, length=None, pattern=None, required=True):
    """Storage-side rule check used by the models' @validates hooks."""
    if value is None:
        if required:
            raise SchemaViolation(field, f"{field} is required")
        return value
    if not isinstance(value, str):
        raise SchemaViolation(field, f"{field} must be a string")
    if required and value == "":
        raise SchemaViolation(field, f"{field} is required")
    if max_length is not None and len(value) > max_length:
        raise SchemaViolation(field, f"{field} must be at most {max_length} characters")
    if length is not None and len(value) != length:
        raise SchemaViolation(field, f"{field} must be exactly {length} characters")
    if pattern is not None and not pattern.fullmatch(value):
        raise SchemaViolation(field, f"{field} has an invalid format")
    return value
