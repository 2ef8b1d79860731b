from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from warranty_api.schemas.assignment import WIRE_NAMES
from warranty_api.schemas.errors import FieldError, field_errors_from_pydantic

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int
    errors: list[FieldError] | None = None


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class AssignmentValidationError(AppError):
    """A request body failed its contract. Carries every field error, in order."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        if not errors:
            msg = "AssignmentValidationError requires at least one field error"
            raise ValueError(msg)
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(
            f"Invalid request body: {fields}",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )


def _validation_response(detail: str, errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="ValidationError",
            detail=detail,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            errors=errors,
        ).model_dump(mode="json"),
    )


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, AssignmentValidationError):
        return _validation_response(exc.message, exc.errors)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
        ).model_dump(mode="json", exclude_none=True),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors_from_pydantic(exc.errors(), WIRE_NAMES)
    logger.info("Rejected %s %s: %d field error(s)", request.method, request.url.path, len(errors))
    return _validation_response("Invalid request body", errors)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
