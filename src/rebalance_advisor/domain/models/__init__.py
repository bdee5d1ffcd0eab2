"""Domain models package."""

from rebalance_advisor.domain.models.enums import (
    AssetCategory,
    CATEGORY_ORDER,
    CategoryStatus,
    AssetStatus,
    TradeAction,
    RiskLevel,
    Currency,
    SymbolMatching,
)
from rebalance_advisor.domain.models.asset import Asset
from rebalance_advisor.domain.models.portfolio import Portfolio
from rebalance_advisor.domain.models.profile import AssetAllocation, InvestmentProfile
from rebalance_advisor.domain.models.tolerance import ToleranceBand, tolerance_for

__all__ = [
    "AssetCategory",
    "CATEGORY_ORDER",
    "CategoryStatus",
    "AssetStatus",
    "TradeAction",
    "RiskLevel",
    "Currency",
    "SymbolMatching",
    "Asset",
    "Portfolio",
    "AssetAllocation",
    "InvestmentProfile",
    "ToleranceBand",
    "tolerance_for",
]
