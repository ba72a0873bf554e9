"""Turn pydantic schemas into validators that return (value, error).

Callers hand in untrusted, loosely-typed data and get back either the
normalized value and None, or the untouched input and a ValidationFailure
listing every violated rule. Nothing is raised.
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple, Type

from pydantic import AliasGenerator, BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from app.core.errors import FieldError, ValidationFailure

# Error types whose single pydantic entry stands for several broken rules.
# Each expander maps the offending input to one message per rule.
MULTI_RULE_EXPANDERS: Dict[str, Callable[[Any], List[str]]] = {}


class ValidationResult(NamedTuple):
    value: Any
    error: Optional[ValidationFailure]


class WireModel(BaseModel):
    """Request schema base: camelCase on the wire, unknown keys rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
    )


class ResponseModel(BaseModel):
    """Response schema base: read from ORM attributes, serialized as camelCase."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(serialization_alias=to_camel),
        from_attributes=True,
    )


def register_multi_rule(error_type: str, expander: Callable[[Any], List[str]]) -> None:
    MULTI_RULE_EXPANDERS[error_type] = expander


def validate_with(
    schema: Type[BaseModel],
    candidate: Any,
    messages: Optional[Dict[Tuple[str, str], str]] = None,
) -> ValidationResult:
    try:
        model = schema.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(candidate, ValidationFailure(to_field_errors(exc, messages)))
    return ValidationResult(model.model_dump(by_alias=True, exclude_unset=True), None)


def to_field_errors(
    exc: ValidationError,
    messages: Optional[Dict[Tuple[str, str], str]] = None,
) -> List[FieldError]:
    messages = messages or {}
    details = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        expander = MULTI_RULE_EXPANDERS.get(err["type"])
        if expander is not None:
            details.extend(
                FieldError(field, message, err["type"])
                for message in expander(err["input"])
            )
            continue
        message = messages.get((field, err["type"]), err["msg"])
        details.append(FieldError(field, message, err["type"]))
    return details
