"""Pydantic schemas for API request/response."""

from rebalance_advisor.api.schemas.profile import (
    AssetAllocationSchema,
    ProfileResponse,
    ProfileListResponse,
    CategoryTargetsRequest,
    AssetTargetRequest,
)
from rebalance_advisor.api.schemas.tolerance import (
    ToleranceBandSchema,
    ToleranceBandsResponse,
    ToleranceBandsUpdateRequest,
)
from rebalance_advisor.api.schemas.portfolio import (
    AssetSchema,
    PortfolioCreateRequest,
    PortfolioResponse,
    PortfolioListResponse,
    PortfolioImportResponse,
)
from rebalance_advisor.api.schemas.analysis import (
    AssetAnalysisResponse,
    CategoryAnalysisResponse,
    AssetTradeResponse,
    RecommendationResponse,
    AnalysisRequest,
    AnalysisResponse,
)

__all__ = [
    "AssetAllocationSchema",
    "ProfileResponse",
    "ProfileListResponse",
    "CategoryTargetsRequest",
    "AssetTargetRequest",
    "ToleranceBandSchema",
    "ToleranceBandsResponse",
    "ToleranceBandsUpdateRequest",
    "AssetSchema",
    "PortfolioCreateRequest",
    "PortfolioResponse",
    "PortfolioListResponse",
    "PortfolioImportResponse",
    "AssetAnalysisResponse",
    "CategoryAnalysisResponse",
    "AssetTradeResponse",
    "RecommendationResponse",
    "AnalysisRequest",
    "AnalysisResponse",
]
