"""Error types surfaced to API callers.

Validation is the only failure this layer produces on its own; it always
carries field-level details. The other two errors come from the checks
routes run against the database before writing.
"""

from dataclasses import dataclass, asdict
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """One violated rule. `field` is the dotted wire path, e.g. address.postalCode."""
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict:
        return asdict(self)


class AppError(Exception):
    """Base class for errors rendered with the standard error envelope."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ValidationFailure(AppError):
    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, details: List[FieldError], message: Optional[str] = None):
        super().__init__(message or _summarize(details))
        self.details = list(details)

    @property
    def fields(self) -> List[str]:
        return [d.field for d in self.details]

    def messages_for(self, field: str) -> List[str]:
        return [d.message for d in self.details if d.field == field]

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = [d.to_dict() for d in self.details]
        return body


class DuplicateRecordError(AppError):
    code = "DUPLICATE_RECORD"
    http_status = 409

    def __init__(self, resource: str, field: str):
        super().__init__(f"{resource} with this {field} already exists")
        self.resource = resource
        self.field = field


class ResourceNotFoundError(AppError):
    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} '{resource_id}' not found")
        self.resource = resource
        self.resource_id = resource_id


def _summarize(details: List[FieldError]) -> str:
    if not details:
        return "Invalid data"
    if len(details) == 1:
        return details[0].message
    return f"{details[0].message} (and {len(details) - 1} more)"


class SchemaViolation(ValueError):
    """A model refused a value at the storage layer (length, pattern, enum)."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_failure(self) -> ValidationFailure:
        return ValidationFailure([FieldError(self.field, self.message, "storage")])
