"""Analysis service for gap analysis and rebalancing reports."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from rebalance_advisor.core.timezone import now_local
from rebalance_advisor.domain.models import CategoryStatus, SymbolMatching, ToleranceBand
from rebalance_advisor.domain.views import AnalysisReport
from rebalance_advisor.services.allocation_engine import (
    ASSET_ON_TARGET_THRESHOLD,
    analyze_gaps,
    generate_recommendations,
)
from rebalance_advisor.services.portfolio_service import PortfolioService
from rebalance_advisor.services.profile_service import ProfileService, ToleranceService

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service that runs the allocation engine against stored data.

    Resolves portfolio, profile and tolerance bands, then delegates to the
    pure engine functions.
    """

    def __init__(
        self,
        portfolio_service: PortfolioService,
        profile_service: ProfileService,
        tolerance_service: ToleranceService,
        asset_threshold: Decimal = ASSET_ON_TARGET_THRESHOLD,
        symbol_matching: SymbolMatching = SymbolMatching.EXACT,
    ):
        self._portfolios = portfolio_service
        self._profiles = profile_service
        self._tolerances = tolerance_service
        self._asset_threshold = asset_threshold
        self._symbol_matching = SymbolMatching(symbol_matching)

    def analyze(
        self,
        portfolio_id: str,
        profile_id: Optional[str] = None,
        tolerance_bands: Optional[Iterable[ToleranceBand]] = None,
    ) -> AnalysisReport:
        """
        Analyze a stored portfolio.

        Args:
            portfolio_id: Portfolio to analyze
            profile_id: Profile to measure against (defaults to the portfolio's)
            tolerance_bands: Category bands (defaults to the stored settings)

        Returns:
            AnalysisReport with per-category gaps and recommendations
        """
        portfolio = self._portfolios.get_portfolio(portfolio_id)
        profile = self._profiles.get_profile(profile_id or portfolio.profile_id)
        bands = (
            list(tolerance_bands)
            if tolerance_bands is not None
            else self._tolerances.get_bands()
        )

        categories = analyze_gaps(
            portfolio,
            profile,
            bands,
            asset_threshold=self._asset_threshold,
            symbol_matching=self._symbol_matching,
        )
        recommendations = generate_recommendations(portfolio, categories)

        off_target = sum(1 for c in categories if c.status != CategoryStatus.ON_TARGET)
        logger.info(
            f"Analyzed {portfolio.portfolio_id} ({portfolio.client_name}) against "
            f"{profile.profile_id}: {off_target} categories off target, "
            f"{len(recommendations)} recommendations"
        )

        return AnalysisReport(
            portfolio=portfolio,
            profile=profile,
            tolerance_bands=bands,
            categories=categories,
            recommendations=recommendations,
            generated_at=now_local(),
        )
