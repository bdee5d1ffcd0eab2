"""
Pytest configuration and fixtures for rebalancing advisor tests.

This module provides:
- Factory helpers for assets, portfolios and profiles
- In-memory repositories seeded from the built-in profile catalogue
- Service fixtures wired the way the API wires them
- A FastAPI test client over freshly seeded stores
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest
import pytz
from fastapi.testclient import TestClient

from rebalance_advisor.main import app
from rebalance_advisor.api.deps import reset_stores
from rebalance_advisor.config.settings import reset_settings
from rebalance_advisor.csv import PortfolioFileParser, PortfolioTemplateGenerator, ReportExporter
from rebalance_advisor.domain.models import (
    Asset,
    AssetAllocation,
    AssetCategory,
    Currency,
    InvestmentProfile,
    Portfolio,
    ToleranceBand,
)
from rebalance_advisor.providers import BuiltinProfileProvider
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

SANTIAGO_TZ = pytz.timezone("America/Santiago")


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def santiago_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
) -> datetime:
    """Create a localized datetime in America/Santiago."""
    return SANTIAGO_TZ.localize(datetime(year, month, day, hour, minute))


@pytest.fixture(autouse=True)
def clean_state():
    """Fresh settings and API stores for every test."""
    reset_settings()
    reset_stores()
    yield
    reset_settings()
    reset_stores()


# =============================================================================
# FACTORY HELPERS (exported for use in tests)
# =============================================================================


def make_asset(
    symbol: str,
    category: AssetCategory,
    value: str,
    name: Optional[str] = None,
) -> Asset:
    """Create a holding with a Decimal value given as string."""
    return Asset(
        symbol=symbol,
        name=name or f"{symbol} Fund",
        category=category,
        current_value=Decimal(value),
    )


def make_portfolio(
    assets: list[Asset],
    total_value: Optional[str] = None,
    profile_id: str = "test-profile",
    portfolio_id: str = "test-portfolio",
) -> Portfolio:
    """Create a portfolio; total defaults to the sum of asset values."""
    if total_value is None:
        return Portfolio.from_assets(
            portfolio_id=portfolio_id,
            client_name="Test Client",
            profile_id=profile_id,
            currency=Currency.USD,
            assets=assets,
        )
    return Portfolio(
        portfolio_id=portfolio_id,
        client_name="Test Client",
        profile_id=profile_id,
        currency=Currency.USD,
        assets=assets,
        total_value=Decimal(total_value),
    )


def make_profile(
    targets: dict[AssetCategory, str],
    allocations: Optional[list[tuple[str, AssetCategory, str]]] = None,
    profile_id: str = "test-profile",
) -> InvestmentProfile:
    """Create a profile from {category: target} and (symbol, category, target) triples."""
    return InvestmentProfile(
        profile_id=profile_id,
        name="Test Profile",
        currency=Currency.USD,
        target_allocations={c: Decimal(v) for c, v in targets.items()},
        asset_allocations=[
            AssetAllocation(
                symbol=symbol,
                name=f"{symbol} Fund",
                category=category,
                target_percentage=Decimal(target),
            )
            for symbol, category, target in (allocations or [])
        ],
    )


def band(category: AssetCategory, tolerance: str) -> ToleranceBand:
    """Create a tolerance band from a string value."""
    return ToleranceBand(category=category, tolerance=Decimal(tolerance))


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def balanced_profile() -> InvestmentProfile:
    """
    Profile with one target asset per category.

    FI 50 (BND), Equities 30 (VTI), Alternatives 10 (GLD), Caja 5 (MMF),
    Balanceado 5 (VBAL), Other 0.
    """
    return make_profile(
        {
            AssetCategory.FIXED_INCOME: "50",
            AssetCategory.EQUITIES: "30",
            AssetCategory.ALTERNATIVE_INVESTMENTS: "10",
            AssetCategory.CAJA: "5",
            AssetCategory.BALANCEADO: "5",
        },
        [
            ("BND", AssetCategory.FIXED_INCOME, "50"),
            ("VTI", AssetCategory.EQUITIES, "30"),
            ("GLD", AssetCategory.ALTERNATIVE_INVESTMENTS, "10"),
            ("MMF", AssetCategory.CAJA, "5"),
            ("VBAL", AssetCategory.BALANCEADO, "5"),
        ],
    )


@pytest.fixture
def on_target_portfolio() -> Portfolio:
    """Portfolio of 100,000 exactly matching balanced_profile."""
    return make_portfolio([
        make_asset("BND", AssetCategory.FIXED_INCOME, "50000"),
        make_asset("VTI", AssetCategory.EQUITIES, "30000"),
        make_asset("GLD", AssetCategory.ALTERNATIVE_INVESTMENTS, "10000"),
        make_asset("MMF", AssetCategory.CAJA, "5000"),
        make_asset("VBAL", AssetCategory.BALANCEADO, "5000"),
    ])


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def provider() -> BuiltinProfileProvider:
    """Provide the built-in profile catalogue."""
    return BuiltinProfileProvider()


@pytest.fixture
def profile_repo(provider) -> InMemoryProfileRepository:
    """Provide a profile store seeded with the built-in profiles."""
    return InMemoryProfileRepository(provider.load_profiles())


@pytest.fixture
def portfolio_repo() -> InMemoryPortfolioRepository:
    """Provide an empty portfolio store."""
    return InMemoryPortfolioRepository()


@pytest.fixture
def tolerance_repo() -> InMemoryToleranceRepository:
    """Provide a tolerance store with the default bands."""
    return InMemoryToleranceRepository([
        band(AssetCategory.FIXED_INCOME, "2"),
        band(AssetCategory.EQUITIES, "3"),
        band(AssetCategory.ALTERNATIVE_INVESTMENTS, "1"),
        band(AssetCategory.CAJA, "1"),
        band(AssetCategory.BALANCEADO, "2"),
        band(AssetCategory.OTHER, "1"),
    ])


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def file_parser() -> PortfolioFileParser:
    """Provide test PortfolioFileParser."""
    return PortfolioFileParser(max_rows=100)


@pytest.fixture
def report_exporter() -> ReportExporter:
    """Provide test ReportExporter."""
    return ReportExporter()


@pytest.fixture
def template_generator() -> PortfolioTemplateGenerator:
    """Provide test PortfolioTemplateGenerator."""
    return PortfolioTemplateGenerator()


@pytest.fixture
def profile_service(profile_repo) -> ProfileService:
    """Provide test ProfileService."""
    return ProfileService(profile_repo=profile_repo)


@pytest.fixture
def tolerance_service(tolerance_repo) -> ToleranceService:
    """Provide test ToleranceService."""
    return ToleranceService(tolerance_repo=tolerance_repo)


@pytest.fixture
def portfolio_service(portfolio_repo, profile_repo, file_parser) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(
        portfolio_repo=portfolio_repo,
        profile_repo=profile_repo,
        parser=file_parser,
    )


@pytest.fixture
def analysis_service(portfolio_service, profile_service, tolerance_service) -> AnalysisService:
    """Provide test AnalysisService."""
    return AnalysisService(
        portfolio_service=portfolio_service,
        profile_service=profile_service,
        tolerance_service=tolerance_service,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """Provide FastAPI test client over freshly seeded in-memory stores."""
    with TestClient(app) as c:
        yield c


# =============================================================================
# SAMPLE FILE CONTENT
# =============================================================================


@pytest.fixture
def sample_csv_content() -> str:
    """Custodian statement with Spanish headers and labels."""
    return (
        "Activo,Unidad Monetaria,Cantidad,Monto Moneda Origen,Clase de Activo,ISIN,Nemo Local\n"
        "Vanguard Total Bond Market ETF,USD,800,80000,Renta Fija,US9229087690,BND\n"
        "Apple Inc.,USD,1000,150000,Renta Variable,US0378331005,AAPL\n"
        "Vanguard Real Estate ETF,USD,300,30000,Alternativo,US9229086348,\n"
        "Money Market Fund,Dolar,5000,5000,Money Market,,\n"
    )


@pytest.fixture
def invalid_csv_content() -> str:
    """Statement with one good row and two bad ones."""
    return (
        "Activo,Monto Moneda Origen,Clase de Activo,Nemo Local\n"
        "Vanguard Total Bond Market ETF,80000,Renta Fija,BND\n"
        ",5000,Caja,CASH\n"
        "Broken Fund,n/a,Renta Variable,BRK\n"
    )
