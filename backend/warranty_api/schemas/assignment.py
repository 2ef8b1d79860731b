from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

Identifier = Annotated[str, Field(min_length=1)]
DurationMonths = Annotated[int, Field(ge=1)]
Money = Annotated[float, Field(ge=0, allow_inf_nan=False)]
# Numbers only; numeric strings are not converted
StrictMoney = Annotated[float, Field(ge=0, allow_inf_nan=False, strict=True)]


class OverridableRequest(BaseModel):
    """Base for request bodies whose optional fields override stored values."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    override_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def wire_names(cls) -> dict[str, str]:
        """Map attribute names to wire names for fields that have an alias."""
        return {name: info.alias for name, info in cls.model_fields.items() if info.alias}

    def overrides(self) -> dict[str, Any]:
        """Return the override fields that were actually supplied, keyed by wire name."""
        supplied: dict[str, Any] = {}
        for name in self.override_fields:
            value = getattr(self, name)
            if value is not None:
                supplied[type(self).model_fields[name].alias or name] = value
        return supplied

    def to_payload(self) -> dict[str, Any]:
        """Dump the normalized payload with wire names, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AssignPackageToDealerRequest(OverridableRequest):
    """Request body for assigning a warranty package to a dealer.

    Optional fields left unset mean "use the package default"; they are
    never filled in here.
    """

    dealer_id: Identifier = Field(alias="dealerId", description="Dealer ID")
    warranty_package_id: Identifier = Field(alias="warrantyPackageId", description="Warranty Package ID")
    duration: DurationMonths | None = Field(default=None, description="Coverage duration in months")
    excess: Money | None = Field(default=None, description="Excess amount override")
    labour_rate_per_hour: Money | None = Field(
        default=None, alias="labourRatePerHour", description="Labour rate per hour override"
    )
    fixed_claim_limit: Money | None = Field(
        default=None, alias="fixedClaimLimit", description="Fixed claim limit override"
    )
    dealer_price_12_months: Money | None = Field(
        default=None, alias="dealerPrice12Months", description="Dealer cost for 12 months"
    )
    dealer_price_24_months: Money | None = Field(
        default=None, alias="dealerPrice24Months", description="Dealer cost for 24 months"
    )
    dealer_price_36_months: Money | None = Field(
        default=None, alias="dealerPrice36Months", description="Dealer cost for 36 months"
    )

    override_fields: ClassVar[tuple[str, ...]] = (
        "duration",
        "excess",
        "labour_rate_per_hour",
        "fixed_claim_limit",
        "dealer_price_12_months",
        "dealer_price_24_months",
        "dealer_price_36_months",
    )


class UpdateWarrantyAssignmentRequest(OverridableRequest):
    """Request body for adjusting the dealer pricing of an existing assignment."""

    dealer_price_12_months: StrictMoney | None = Field(
        default=None, alias="dealerPrice12Months", description="Dealer cost for 12 months"
    )
    dealer_price_24_months: StrictMoney | None = Field(
        default=None, alias="dealerPrice24Months", description="Dealer cost for 24 months"
    )
    dealer_price_36_months: StrictMoney | None = Field(
        default=None, alias="dealerPrice36Months", description="Dealer cost for 36 months"
    )
    price: StrictMoney | None = Field(default=None, description="Total assignment price override")

    override_fields: ClassVar[tuple[str, ...]] = (
        "dealer_price_12_months",
        "dealer_price_24_months",
        "dealer_price_36_months",
        "price",
    )


class ValidatedAssignmentResponse(BaseModel):
    """Normalized payload of a request that passed validation."""

    data: dict[str, Any]
    overrides: list[str]


# Attribute-to-wire names across every request body served over HTTP
WIRE_NAMES: dict[str, str] = {
    **AssignPackageToDealerRequest.wire_names(),
    **UpdateWarrantyAssignmentRequest.wire_names(),
}
