"""Pydantic schemas for profile endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from rebalance_advisor.domain.models import AssetCategory, Currency, RiskLevel


class AssetAllocationSchema(BaseModel):
    """Target weight for one asset."""

    symbol: str = Field(..., min_length=1, max_length=40, description="Asset symbol")
    name: str = Field(default="", max_length=200, description="Display name")
    category: AssetCategory = Field(..., description="Asset category")
    target_percentage: Decimal = Field(
        ...,
        ge=0,
        le=100,
        description="Share of the whole portfolio (%)",
    )
    category_percentage: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Share within the category (%); derived when 0",
    )

    @field_validator("symbol")
    @classmethod
    def strip_symbol(cls, v: str) -> str:
        return v.strip()


class ProfileResponse(BaseModel):
    """Response schema for an investment profile."""

    profile_id: str
    name: str
    description: str
    currency: Currency
    risk_level: RiskLevel
    target_allocations: dict[AssetCategory, Decimal]
    asset_allocations: list[AssetAllocationSchema]
    total_allocation: Decimal


class ProfileListResponse(BaseModel):
    """Response schema for profile listing."""

    profiles: list[ProfileResponse]
    total: int


class CategoryTargetsRequest(BaseModel):
    """Request schema for replacing category targets."""

    targets: dict[AssetCategory, Decimal] = Field(
        ...,
        description="Target % per category; omitted categories are set to 0",
    )


class AssetTargetRequest(BaseModel):
    """Request schema for setting one asset's target."""

    target_percentage: Decimal = Field(..., ge=0, le=100)
