"""
Unit tests for PortfolioService.

Tests cover:
- Creating and replacing client portfolios
- Validation of client name, assets and profile
- File import (partial success, nothing importable)
- Lookup, listing and deletion
"""

from decimal import Decimal

import pytest

from rebalance_advisor.core.exceptions import (
    NotFoundError,
    UnsupportedFileError,
    ValidationError,
)
from rebalance_advisor.domain.models import AssetCategory, Currency
from rebalance_advisor.services import PortfolioService

from tests.conftest import make_asset, santiago_datetime

FI = AssetCategory.FIXED_INCOME
EQ = AssetCategory.EQUITIES


@pytest.fixture
def two_assets():
    return [
        make_asset("BND", FI, "60000"),
        make_asset("VTI", EQ, "40000"),
    ]


class TestCreatePortfolio:
    """Tests for creating portfolios."""

    def test_total_is_sum_of_assets(self, portfolio_service: PortfolioService, two_assets):
        """
        GIVEN two holdings of 60,000 and 40,000
        WHEN I create a portfolio
        THEN total value is 100,000 and last_updated is set
        """
        portfolio = portfolio_service.create_portfolio(
            client_name="  Ana Rojas ",
            profile_id="usd-moderate",
            currency="usd",
            assets=two_assets,
        )

        assert portfolio.client_name == "Ana Rojas"
        assert portfolio.currency == Currency.USD
        assert portfolio.total_value == Decimal("100000")
        assert portfolio.last_updated is not None
        assert portfolio.last_updated.tzinfo is not None

    def test_statement_date_kept(self, portfolio_service: PortfolioService, two_assets):
        as_of = santiago_datetime(2024, 3, 31)

        portfolio = portfolio_service.create_portfolio(
            "Ana Rojas", "usd-moderate", Currency.USD, two_assets, last_updated=as_of
        )

        assert portfolio.last_updated == as_of

    def test_same_client_replaces_portfolio(
        self, portfolio_service: PortfolioService, two_assets
    ):
        """
        GIVEN a client with a stored portfolio
        WHEN I create another portfolio for the same client
        THEN it replaces the first under the same ID
        """
        first = portfolio_service.create_portfolio(
            "Ana Rojas", "usd-moderate", "USD", two_assets
        )

        second = portfolio_service.create_portfolio(
            "Ana Rojas", "usd-aggressive", "USD", [make_asset("QQQ", EQ, "5000")]
        )

        assert second.portfolio_id == first.portfolio_id
        assert len(portfolio_service.list_portfolios()) == 1
        stored = portfolio_service.get_portfolio(first.portfolio_id)
        assert stored.profile_id == "usd-aggressive"
        assert stored.total_value == Decimal("5000")

    def test_empty_client_name_rejected(self, portfolio_service: PortfolioService, two_assets):
        with pytest.raises(ValidationError, match="Client name"):
            portfolio_service.create_portfolio("   ", "usd-moderate", "USD", two_assets)

    def test_no_assets_rejected(self, portfolio_service: PortfolioService):
        with pytest.raises(ValidationError, match="at least one asset"):
            portfolio_service.create_portfolio("Ana Rojas", "usd-moderate", "USD", [])

    def test_zero_total_rejected(self, portfolio_service: PortfolioService):
        with pytest.raises(ValidationError, match="greater than zero"):
            portfolio_service.create_portfolio(
                "Ana Rojas", "usd-moderate", "USD", [make_asset("BND", FI, "0")]
            )

    def test_unknown_profile_rejected(self, portfolio_service: PortfolioService, two_assets):
        with pytest.raises(NotFoundError):
            portfolio_service.create_portfolio("Ana Rojas", "nope", "USD", two_assets)

    def test_unknown_currency_rejected(self, portfolio_service: PortfolioService, two_assets):
        with pytest.raises(ValidationError, match="Unsupported currency"):
            portfolio_service.create_portfolio("Ana Rojas", "usd-moderate", "EUR", two_assets)


class TestImportFile:
    """Tests for importing holdings files."""

    def test_import_creates_portfolio(
        self, portfolio_service: PortfolioService, sample_csv_content: str
    ):
        """
        GIVEN a valid holdings CSV with four rows
        WHEN I import it
        THEN a portfolio with four assets and their summed total is stored
        """
        portfolio, parsed = portfolio_service.import_file(
            client_name="Johnson Family Trust",
            profile_id="usd-moderate",
            currency="USD",
            raw=sample_csv_content.encode("utf-8"),
            filename="holdings.csv",
        )

        assert portfolio is not None
        assert parsed.errors == []
        assert len(portfolio.assets) == 4
        assert portfolio.total_value == Decimal("265000")
        assert portfolio_service.get_portfolio(portfolio.portfolio_id).client_name == (
            "Johnson Family Trust"
        )

    def test_partial_import_reports_errors(
        self, portfolio_service: PortfolioService, invalid_csv_content: str
    ):
        portfolio, parsed = portfolio_service.import_file(
            "Ana Rojas", "usd-moderate", "USD",
            invalid_csv_content.encode("utf-8"), "holdings.csv",
        )

        assert portfolio is not None
        assert [a.symbol for a in portfolio.assets] == ["BND"]
        assert len(parsed.errors) == 2

    def test_nothing_importable_stores_nothing(self, portfolio_service: PortfolioService):
        raw = b"Activo,Monto Moneda Origen\nBroken,n/a\n"

        portfolio, parsed = portfolio_service.import_file(
            "Ana Rojas", "usd-moderate", "USD", raw, "holdings.csv"
        )

        assert portfolio is None
        assert parsed.errors
        assert portfolio_service.list_portfolios() == []

    def test_empty_file_rejected(self, portfolio_service: PortfolioService):
        with pytest.raises(ValidationError, match="empty"):
            portfolio_service.import_file("Ana Rojas", "usd-moderate", "USD", b"", "a.csv")

    def test_unsupported_extension(self, portfolio_service: PortfolioService):
        with pytest.raises(UnsupportedFileError):
            portfolio_service.import_file(
                "Ana Rojas", "usd-moderate", "USD", b"data", "holdings.pdf"
            )


class TestLookup:
    """Tests for get, list and delete."""

    def test_get_missing_portfolio(self, portfolio_service: PortfolioService):
        with pytest.raises(NotFoundError):
            portfolio_service.get_portfolio("missing")

    def test_delete_portfolio(self, portfolio_service: PortfolioService, two_assets):
        portfolio = portfolio_service.create_portfolio(
            "Ana Rojas", "usd-moderate", "USD", two_assets
        )

        portfolio_service.delete_portfolio(portfolio.portfolio_id)

        with pytest.raises(NotFoundError):
            portfolio_service.get_portfolio(portfolio.portfolio_id)

    def test_delete_missing_portfolio(self, portfolio_service: PortfolioService):
        with pytest.raises(NotFoundError):
            portfolio_service.delete_portfolio("missing")

    def test_stored_portfolio_is_isolated_from_caller(
        self, portfolio_service: PortfolioService, two_assets
    ):
        """
        GIVEN a stored portfolio
        WHEN the caller mutates the returned object
        THEN the stored copy is unchanged
        """
        portfolio = portfolio_service.create_portfolio(
            "Ana Rojas", "usd-moderate", "USD", two_assets
        )

        portfolio.assets.clear()

        assert len(portfolio_service.get_portfolio(portfolio.portfolio_id).assets) == 2
