"""Entry points that check raw payloads against the assignment contracts.

Each ``validate_*`` function is pure: it either returns a frozen, fully typed
request or raises :class:`AssignmentValidationError` carrying every field
error found, in field declaration order. Defaulting absent overrides from the
referenced package is left to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from warranty_api.exceptions import AssignmentValidationError
from warranty_api.schemas.assignment import (
    AssignPackageToDealerRequest,
    UpdateWarrantyAssignmentRequest,
    OverridableRequest,
)
from warranty_api.schemas.errors import field_errors_from_pydantic

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=OverridableRequest)


def _rejected(model: type[OverridableRequest], exc: ValidationError) -> AssignmentValidationError:
    errors = field_errors_from_pydantic(exc.errors(), model.wire_names())
    logger.debug("%s rejected: %s", model.__name__, [error.field for error in errors])
    return AssignmentValidationError(errors)


def _validate(model: type[RequestT], raw: Mapping[str, Any]) -> RequestT:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise _rejected(model, exc) from None


def _validate_json(model: type[RequestT], data: str | bytes) -> RequestT:
    try:
        return model.model_validate_json(data)
    except ValidationError as exc:
        raise _rejected(model, exc) from None


def validate_assignment(raw: Mapping[str, Any]) -> AssignPackageToDealerRequest:
    """Validate an assign-package-to-dealer payload.

    Numeric strings are coerced (``"150"`` becomes ``150.0``). Absent or
    ``null`` overrides stay ``None``.
    """
    return _validate(AssignPackageToDealerRequest, raw)


def validate_assignment_json(data: str | bytes) -> AssignPackageToDealerRequest:
    """Validate an assign-package-to-dealer payload given as a JSON document."""
    return _validate_json(AssignPackageToDealerRequest, data)


def validate_assignment_update(raw: Mapping[str, Any]) -> UpdateWarrantyAssignmentRequest:
    """Validate an update-assignment payload. Prices must already be numbers."""
    return _validate(UpdateWarrantyAssignmentRequest, raw)
