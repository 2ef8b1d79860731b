"""Unit tests for the assignment request schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from warranty_api.schemas.assignment import AssignPackageToDealerRequest, UpdateWarrantyAssignmentRequest

# ---------------------------------------------------------------------------
# AssignPackageToDealerRequest
# ---------------------------------------------------------------------------


def test_assign_request_minimal() -> None:
    req = AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1"})
    assert req.dealer_id == "D1"
    assert req.warranty_package_id == "W1"
    assert req.duration is None
    assert req.excess is None
    assert req.labour_rate_per_hour is None
    assert req.fixed_claim_limit is None
    assert req.dealer_price_12_months is None
    assert req.dealer_price_24_months is None
    assert req.dealer_price_36_months is None


def test_assign_request_accepts_python_names() -> None:
    req = AssignPackageToDealerRequest(dealer_id="D1", warranty_package_id="W1", labour_rate_per_hour=85)
    assert req.labour_rate_per_hour == 85


def test_assign_request_full_overrides() -> None:
    req = AssignPackageToDealerRequest.model_validate(
        {
            "dealerId": "D1",
            "warrantyPackageId": "W1",
            "duration": 24,
            "excess": 100,
            "labourRatePerHour": 75.5,
            "fixedClaimLimit": 2500,
            "dealerPrice12Months": 150,
            "dealerPrice24Months": 280,
            "dealerPrice36Months": 390,
        }
    )
    assert req.duration == 24
    assert req.excess == 100
    assert req.labour_rate_per_hour == 75.5
    assert req.fixed_claim_limit == 2500
    assert req.dealer_price_36_months == 390


def test_assign_request_coerces_numeric_strings() -> None:
    req = AssignPackageToDealerRequest.model_validate(
        {"dealerId": "D1", "warrantyPackageId": "W1", "duration": "36", "excess": "99.5"}
    )
    assert req.duration == 36
    assert isinstance(req.duration, int)
    assert req.excess == 99.5


def test_assign_request_accepts_integral_float_duration() -> None:
    req = AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "duration": 12.0})
    assert req.duration == 12


def test_assign_request_rejects_fractional_duration() -> None:
    with pytest.raises(ValidationError, match="duration"):
        AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "duration": 1.5})


def test_assign_request_zero_values_allowed_for_money() -> None:
    req = AssignPackageToDealerRequest.model_validate(
        {"dealerId": "D1", "warrantyPackageId": "W1", "excess": 0, "fixedClaimLimit": "0"}
    )
    assert req.excess == 0
    assert req.fixed_claim_limit == 0


def test_assign_request_rejects_negative_money() -> None:
    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "excess": -1})


def test_assign_request_rejects_nan() -> None:
    with pytest.raises(ValidationError, match="excess"):
        AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "excess": "NaN"})


def test_assign_request_null_override_is_absent() -> None:
    req = AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "excess": None})
    assert req.excess is None
    assert req.overrides() == {}


def test_assign_request_ignores_unknown_fields() -> None:
    req = AssignPackageToDealerRequest.model_validate(
        {"dealerId": "D1", "warrantyPackageId": "W1", "discount": 50}
    )
    assert "discount" not in req.to_payload()


def test_assign_request_is_frozen() -> None:
    req = AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1"})
    with pytest.raises(ValidationError):
        req.dealer_id = "D2"  # type: ignore[misc]


def test_assign_request_overrides_uses_wire_names() -> None:
    req = AssignPackageToDealerRequest.model_validate(
        {"dealerId": "D1", "warrantyPackageId": "W1", "duration": 12, "dealerPrice24Months": "280"}
    )
    assert req.overrides() == {"duration": 12, "dealerPrice24Months": 280.0}


def test_assign_request_to_payload_omits_absent_fields() -> None:
    req = AssignPackageToDealerRequest.model_validate({"dealerId": "D1", "warrantyPackageId": "W1", "excess": 10})
    assert req.to_payload() == {"dealerId": "D1", "warrantyPackageId": "W1", "excess": 10.0}


# ---------------------------------------------------------------------------
# UpdateWarrantyAssignmentRequest
# ---------------------------------------------------------------------------


def test_update_request_empty_is_valid() -> None:
    req = UpdateWarrantyAssignmentRequest.model_validate({})
    assert req.overrides() == {}


def test_update_request_accepts_int_and_float() -> None:
    req = UpdateWarrantyAssignmentRequest.model_validate({"dealerPrice12Months": 150, "price": 420.75})
    assert req.dealer_price_12_months == 150
    assert req.price == 420.75


def test_update_request_rejects_numeric_string() -> None:
    with pytest.raises(ValidationError, match="dealerPrice12Months"):
        UpdateWarrantyAssignmentRequest.model_validate({"dealerPrice12Months": "150"})


def test_update_request_rejects_negative_price() -> None:
    with pytest.raises(ValidationError, match="price"):
        UpdateWarrantyAssignmentRequest.model_validate({"price": -0.01})
