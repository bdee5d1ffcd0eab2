"""Dependency injection for FastAPI."""

import logging
import threading
from typing import Optional

from fastapi import Depends

from rebalance_advisor.config.settings import get_settings
from rebalance_advisor.csv import PortfolioFileParser, PortfolioTemplateGenerator, ReportExporter
from rebalance_advisor.providers import BuiltinProfileProvider, ProfileProvider
from rebalance_advisor.repositories.memory import (
    InMemoryPortfolioRepository,
    InMemoryProfileRepository,
    InMemoryToleranceRepository,
)
from rebalance_advisor.services import (
    AnalysisService,
    PortfolioService,
    ProfileService,
    ToleranceService,
)

logger = logging.getLogger(__name__)

# Process-wide stores, created once on first use under _stores_lock
_stores_lock = threading.Lock()
_profile_repo: Optional[InMemoryProfileRepository] = None
_portfolio_repo: Optional[InMemoryPortfolioRepository] = None
_tolerance_repo: Optional[InMemoryToleranceRepository] = None


def _init_stores() -> None:
    """Build and seed all stores, publishing them together once complete."""
    global _profile_repo, _portfolio_repo, _tolerance_repo
    settings = get_settings()
    provider: ProfileProvider = BuiltinProfileProvider()

    profile_repo = InMemoryProfileRepository(provider.load_profiles())
    tolerance_repo = InMemoryToleranceRepository(
        ToleranceService.bands_from_mapping(settings.default_tolerance_bands)
    )
    portfolio_repo = InMemoryPortfolioRepository()
    if settings.seed_sample_data:
        for portfolio in provider.sample_portfolios():
            portfolio_repo.save(portfolio)

    _profile_repo = profile_repo
    _tolerance_repo = tolerance_repo
    # Assigned last: a non-None portfolio repo means all three are ready
    _portfolio_repo = portfolio_repo
    logger.info("In-memory stores initialized")


def _ensure_stores() -> None:
    if _portfolio_repo is None:
        with _stores_lock:
            if _portfolio_repo is None:
                _init_stores()


def reset_stores() -> None:
    """Drop all in-memory state; the next request reseeds from the provider."""
    global _profile_repo, _portfolio_repo, _tolerance_repo
    with _stores_lock:
        _portfolio_repo = None
        _profile_repo = None
        _tolerance_repo = None


def get_profile_repo() -> InMemoryProfileRepository:
    """Provide ProfileRepository instance."""
    _ensure_stores()
    return _profile_repo


def get_portfolio_repo() -> InMemoryPortfolioRepository:
    """Provide PortfolioRepository instance."""
    _ensure_stores()
    return _portfolio_repo


def get_tolerance_repo() -> InMemoryToleranceRepository:
    """Provide ToleranceRepository instance."""
    _ensure_stores()
    return _tolerance_repo


def get_file_parser() -> PortfolioFileParser:
    """Provide PortfolioFileParser instance."""
    return PortfolioFileParser(max_rows=get_settings().max_import_rows)


def get_profile_service(
    profile_repo: InMemoryProfileRepository = Depends(get_profile_repo),
) -> ProfileService:
    """Provide ProfileService instance."""
    return ProfileService(profile_repo=profile_repo)


def get_tolerance_service(
    tolerance_repo: InMemoryToleranceRepository = Depends(get_tolerance_repo),
) -> ToleranceService:
    """Provide ToleranceService instance."""
    return ToleranceService(tolerance_repo=tolerance_repo)


def get_portfolio_service(
    portfolio_repo: InMemoryPortfolioRepository = Depends(get_portfolio_repo),
    profile_repo: InMemoryProfileRepository = Depends(get_profile_repo),
    parser: PortfolioFileParser = Depends(get_file_parser),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        portfolio_repo=portfolio_repo,
        profile_repo=profile_repo,
        parser=parser,
    )


def get_analysis_service(
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    profile_service: ProfileService = Depends(get_profile_service),
    tolerance_service: ToleranceService = Depends(get_tolerance_service),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    settings = get_settings()
    return AnalysisService(
        portfolio_service=portfolio_service,
        profile_service=profile_service,
        tolerance_service=tolerance_service,
        asset_threshold=settings.asset_tolerance_default,
        symbol_matching=settings.symbol_matching,
    )


def get_report_exporter() -> ReportExporter:
    """Provide ReportExporter instance."""
    return ReportExporter()


def get_template_generator() -> PortfolioTemplateGenerator:
    """Provide PortfolioTemplateGenerator instance."""
    return PortfolioTemplateGenerator()
