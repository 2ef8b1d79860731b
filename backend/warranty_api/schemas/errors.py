from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

BODY_FIELD = "body"

_MISSING_TYPES = frozenset({"missing", "string_too_short"})
_BOUNDS_TYPES = frozenset({"greater_than_equal", "greater_than", "less_than_equal", "less_than"})


class FieldErrorKind(enum.StrEnum):
    """Why a single field was rejected."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    TYPE_COERCION_FAILURE = "TypeCoercionFailure"
    BOUNDS_VIOLATION = "BoundsViolation"


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    kind: FieldErrorKind
    message: str
    constraint: dict[str, Any] | None = None


def _field_name(loc: Iterable[str | int], aliases: Mapping[str, str]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] == BODY_FIELD:
        parts = parts[1:]
    return ".".join(aliases.get(part, part) for part in parts) or BODY_FIELD


def _classify(error: Mapping[str, Any]) -> FieldErrorKind:
    error_type = error["type"]
    if error_type in _MISSING_TYPES:
        return FieldErrorKind.MISSING_REQUIRED_FIELD
    # null for a required string reads as "not supplied", not a wrong type
    if error_type == "string_type" and error.get("input", ...) is None:
        return FieldErrorKind.MISSING_REQUIRED_FIELD
    if error_type in _BOUNDS_TYPES:
        return FieldErrorKind.BOUNDS_VIOLATION
    return FieldErrorKind.TYPE_COERCION_FAILURE


def field_errors_from_pydantic(
    errors: Iterable[Mapping[str, Any]],
    aliases: Mapping[str, str] | None = None,
) -> list[FieldError]:
    """Translate pydantic error dicts into ordered FieldErrors.

    Accepts the output of ``ValidationError.errors()`` or
    ``RequestValidationError.errors()``. Order is preserved, so errors come
    back in field declaration order. ``aliases`` maps attribute names to wire
    names, so input given under attribute names is still reported by wire name.
    """
    aliases = aliases or {}
    field_errors: list[FieldError] = []
    for error in errors:
        kind = _classify(error)
        # decode errors carry a character offset, not a field, in their location
        field = BODY_FIELD if error["type"] == "json_invalid" else _field_name(error.get("loc", ()), aliases)
        if kind is FieldErrorKind.MISSING_REQUIRED_FIELD:
            message = f"{field} is required and must not be empty"
        else:
            message = error.get("msg", "Invalid value")
        constraint = None
        if kind is FieldErrorKind.BOUNDS_VIOLATION and error.get("ctx"):
            constraint = {key: value for key, value in error["ctx"].items() if key in {"ge", "gt", "le", "lt"}}
        field_errors.append(FieldError(field=field, kind=kind, message=message, constraint=constraint))
    return field_errors
