"""Domain layer - pure business models with no external dependencies."""

from rebalance_advisor.domain.models import (
    Asset,
    Portfolio,
    AssetAllocation,
    InvestmentProfile,
    ToleranceBand,
    AssetCategory,
    CATEGORY_ORDER,
    CategoryStatus,
    AssetStatus,
    TradeAction,
    RiskLevel,
    Currency,
    SymbolMatching,
)

__all__ = [
    "Asset",
    "Portfolio",
    "AssetAllocation",
    "InvestmentProfile",
    "ToleranceBand",
    "AssetCategory",
    "CATEGORY_ORDER",
    "CategoryStatus",
    "AssetStatus",
    "TradeAction",
    "RiskLevel",
    "Currency",
    "SymbolMatching",
]
