"""
Payload validation.

Wraps pydantic so routes get either a normalized value or an ordered list of
readable messages, one per failing field. Field names are reported as dotted
paths ("contact.email").
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes FastAPI adds in front of the real field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


@dataclass
class ValidationResult(Generic[ModelT]):
    value: Optional[ModelT] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def field_path(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def format_errors(errors: Iterable[dict]) -> List[str]:
    """Turn pydantic error dicts into messages, keeping the first per field."""
    messages = []
    seen = set()
    for error in errors:
        path = field_path(error.get("loc", ()))
        if path in seen:
            continue
        seen.add(path)
        messages.append(f'"{path}" {error.get("msg", "is invalid")}')
    return messages


def validate_payload(model: Type[ModelT], payload: Any) -> ValidationResult[ModelT]:
    """Validate a raw JSON payload against a resource model."""
    if not isinstance(payload, dict):
        return ValidationResult(errors=['"body" must be a JSON object'])
    try:
        return ValidationResult(value=model.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult(errors=format_errors(exc.errors()))


def require_valid(model: Type[ModelT], payload: Any) -> ModelT:
    """Same as validate_payload but raises the 400 ValidationError."""
    result = validate_payload(model, payload)
    if not result.ok:
        raise ValidationError(result.errors)
    return result.value
