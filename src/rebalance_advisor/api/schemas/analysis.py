"""Pydantic schemas for analysis endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from rebalance_advisor.api.schemas.tolerance import ToleranceBandSchema
from rebalance_advisor.domain.models import (
    AssetCategory,
    AssetStatus,
    CategoryStatus,
    Currency,
    TradeAction,
)


class AssetAnalysisResponse(BaseModel):
    """Response schema for one target asset's gap."""

    symbol: str
    name: str
    current_value: Decimal
    current_percentage: Decimal
    target_percentage: Decimal
    gap: Decimal
    gap_amount: Decimal
    status: AssetStatus


class CategoryAnalysisResponse(BaseModel):
    """Response schema for one category's gap."""

    category: AssetCategory
    current_value: Decimal
    current_percentage: Decimal
    target_percentage: Decimal
    gap: Decimal
    gap_amount: Decimal
    status: CategoryStatus
    asset_breakdown: list[AssetAnalysisResponse]


class AssetTradeResponse(BaseModel):
    """Response schema for a recommended asset trade."""

    symbol: str
    name: str
    action: TradeAction
    recommended_amount: Decimal
    current_value: Decimal
    target_value: Decimal


class RecommendationResponse(BaseModel):
    """Response schema for a category recommendation."""

    category: AssetCategory
    action: TradeAction
    amount: Decimal
    assets: list[AssetTradeResponse]


class AnalysisRequest(BaseModel):
    """Request schema for an ad-hoc analysis."""

    profile_id: Optional[str] = None
    tolerance_bands: Optional[list[ToleranceBandSchema]] = None


class AnalysisResponse(BaseModel):
    """Response schema for a full gap analysis."""

    portfolio_id: str
    client_name: str
    profile_id: str
    profile_name: str
    currency: Currency
    total_value: Decimal
    generated_at: Optional[datetime] = None
    tolerance_bands: list[ToleranceBandSchema]
    categories: list[CategoryAnalysisResponse]
    recommendations: list[RecommendationResponse]
