"""View models for service outputs."""

from rebalance_advisor.domain.views.analysis import (
    CategoryAllocation,
    AssetAnalysis,
    CategoryAnalysis,
    AssetTrade,
    RebalanceRecommendation,
    AnalysisReport,
)
from rebalance_advisor.domain.views.imports import ParsedPortfolio

__all__ = [
    "CategoryAllocation",
    "AssetAnalysis",
    "CategoryAnalysis",
    "AssetTrade",
    "RebalanceRecommendation",
    "AnalysisReport",
    "ParsedPortfolio",
]
