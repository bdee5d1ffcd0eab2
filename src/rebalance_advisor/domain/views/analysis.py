"""View models for gap analysis and rebalancing outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from rebalance_advisor.domain.models import (
    AssetCategory,
    AssetStatus,
    CategoryStatus,
    InvestmentProfile,
    Portfolio,
    ToleranceBand,
    TradeAction,
)


@dataclass(frozen=True)
class CategoryAllocation:
    """Current value and share of one category."""

    category: AssetCategory
    value: Decimal
    percentage: Decimal


@dataclass
class AssetAnalysis:
    """Gap of one target asset against its holding."""

    symbol: str
    name: str
    current_value: Decimal
    current_percentage: Decimal
    target_percentage: Decimal
    gap: Decimal
    gap_amount: Decimal
    status: AssetStatus


@dataclass
class CategoryAnalysis:
    """Gap of one category against its target, with asset breakdown."""

    category: AssetCategory
    current_value: Decimal
    current_percentage: Decimal
    target_percentage: Decimal
    gap: Decimal
    gap_amount: Decimal
    status: CategoryStatus
    asset_breakdown: list[AssetAnalysis] = field(default_factory=list)


@dataclass
class AssetTrade:
    """Recommended trade for one asset."""

    symbol: str
    name: str
    recommended_amount: Decimal
    current_value: Decimal
    target_value: Decimal
    action: TradeAction


@dataclass
class RebalanceRecommendation:
    """Recommended category-level move and the asset trades that make it up."""

    category: AssetCategory
    action: TradeAction
    amount: Decimal
    assets: list[AssetTrade] = field(default_factory=list)


@dataclass
class AnalysisReport:
    """Complete analysis result for one portfolio against one profile."""

    portfolio: Portfolio
    profile: InvestmentProfile
    tolerance_bands: list[ToleranceBand]
    categories: list[CategoryAnalysis] = field(default_factory=list)
    recommendations: list[RebalanceRecommendation] = field(default_factory=list)
    generated_at: Optional[datetime] = None
