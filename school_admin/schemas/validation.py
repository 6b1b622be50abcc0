from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from school_admin.core.exceptions import InvalidInputException

SchemaType = TypeVar("SchemaType", bound=BaseModel)


@dataclass
class ValidationOutcome(Generic[SchemaType]):
    """Result of checking raw input against a schema."""
    value: Optional[SchemaType] = None
    problems: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.problems


def validate_schema(schema: Type[SchemaType], data: Mapping[str, Any]) -> ValidationOutcome[SchemaType]:
    """
    Validate `data` against `schema` without raising.

    Problems are keyed by dotted field path, e.g. {"teacher.0": "value is not a valid email address: ..."}.
    """
    try:
        return ValidationOutcome(value=schema.model_validate(data))
    except ValidationError as exc:
        problems = {}
        for error in exc.errors():
            path = ".".join(str(part) for part in error["loc"]) or "__root__"
            problems[path] = error["msg"]
        return ValidationOutcome(problems=problems)


def require_valid(schema: Type[SchemaType], data: Mapping[str, Any]) -> SchemaType:
    """Like validate_schema, but raises InvalidInputException on failure."""
    outcome = validate_schema(schema, data)
    if not outcome.ok:
        raise InvalidInputException(details=outcome.problems)
    return outcome.value
