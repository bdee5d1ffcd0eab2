"""Pydantic schemas for tolerance band endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field

from rebalance_advisor.domain.models import AssetCategory


class ToleranceBandSchema(BaseModel):
    """Allowed deviation for one category, in percentage points."""

    category: AssetCategory
    tolerance: Decimal = Field(..., ge=0)


class ToleranceBandsResponse(BaseModel):
    """Response schema for the current bands."""

    bands: list[ToleranceBandSchema]


class ToleranceBandsUpdateRequest(BaseModel):
    """Request schema for updating bands; categories left out keep their value."""

    bands: list[ToleranceBandSchema]
