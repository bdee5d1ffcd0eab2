"""Service layer - business logic orchestration."""

from rebalance_advisor.services.allocation_engine import (
    ASSET_ON_TARGET_THRESHOLD,
    aggregate_categories,
    analyze_assets,
    analyze_gaps,
    generate_recommendations,
)
from rebalance_advisor.services.profile_service import ProfileService, ToleranceService
from rebalance_advisor.services.portfolio_service import PortfolioService
from rebalance_advisor.services.analysis_service import AnalysisService

__all__ = [
    "ASSET_ON_TARGET_THRESHOLD",
    "aggregate_categories",
    "analyze_assets",
    "analyze_gaps",
    "generate_recommendations",
    "ProfileService",
    "ToleranceService",
    "PortfolioService",
    "AnalysisService",
]
