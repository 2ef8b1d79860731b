from __future__ import annotations

import logging

from fastapi import APIRouter

from warranty_api.schemas.assignment import (
    AssignPackageToDealerRequest,
    UpdateWarrantyAssignmentRequest,
    ValidatedAssignmentResponse,
)

logger = logging.getLogger(__name__)

assignments_router = APIRouter(
    prefix="/warranty-packages",
    tags=["assignments"],
)


def _build_validated_response(
    payload: AssignPackageToDealerRequest | UpdateWarrantyAssignmentRequest,
) -> ValidatedAssignmentResponse:
    """Build a ValidatedAssignmentResponse from an accepted request body."""
    return ValidatedAssignmentResponse(
        data=payload.to_payload(),
        overrides=list(payload.overrides()),
    )


@assignments_router.post("/assign-to-dealer/validate", response_model=ValidatedAssignmentResponse)
async def validate_assign_to_dealer(payload: AssignPackageToDealerRequest) -> ValidatedAssignmentResponse:
    """Check an assign-package-to-dealer body without performing the assignment."""
    logger.debug(
        "Accepted assignment of package %s to dealer %s", payload.warranty_package_id, payload.dealer_id
    )
    return _build_validated_response(payload)


@assignments_router.post("/assignments/validate", response_model=ValidatedAssignmentResponse)
async def validate_assignment_update(payload: UpdateWarrantyAssignmentRequest) -> ValidatedAssignmentResponse:
    """Check an update-assignment body without applying it."""
    return _build_validated_response(payload)
