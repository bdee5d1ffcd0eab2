"""Portfolio service for client holdings."""

import logging
from datetime import datetime
from typing import Optional, Union

from rebalance_advisor.core.exceptions import NotFoundError, ValidationError
from rebalance_advisor.core.timezone import now_local, to_local
from rebalance_advisor.csv.importer import PortfolioFileParser
from rebalance_advisor.domain.models import Asset, Currency, Portfolio
from rebalance_advisor.domain.views import ParsedPortfolio
from rebalance_advisor.repositories.protocols import PortfolioRepository, ProfileRepository

logger = logging.getLogger(__name__)


class PortfolioService:
    """
    Service for storing and loading client portfolios.

    A client has at most one current portfolio: creating a portfolio for a
    client name already on file replaces it under the same ID.
    """

    def __init__(
        self,
        portfolio_repo: PortfolioRepository,
        profile_repo: ProfileRepository,
        parser: Optional[PortfolioFileParser] = None,
    ):
        self._portfolio_repo = portfolio_repo
        self._profile_repo = profile_repo
        self._parser = parser or PortfolioFileParser()

    def create_portfolio(
        self,
        client_name: str,
        profile_id: str,
        currency: Union[Currency, str],
        assets: list[Asset],
        last_updated: Optional[datetime] = None,
    ) -> Portfolio:
        """
        Create (or replace) a client's portfolio.

        Args:
            client_name: Client the holdings belong to
            profile_id: Investment profile the portfolio is measured against
            currency: USD or CLP
            assets: Holdings; total value is their sum
            last_updated: Statement date (defaults to now)

        Returns:
            Stored Portfolio instance

        Raises:
            ValidationError: on an empty client name, no assets, or a zero total
            NotFoundError: if the profile does not exist
        """
        client_name = client_name.strip()
        if not client_name:
            raise ValidationError("Client name cannot be empty")
        if not assets:
            raise ValidationError("Portfolio must contain at least one asset")
        try:
            currency = Currency(currency.upper())
        except ValueError:
            raise ValidationError(f"Unsupported currency: {currency}. Use USD or CLP.")

        profile = self._profile_repo.get_by_id(profile_id)
        if not profile:
            raise NotFoundError("Profile", profile_id)
        if profile.currency != currency:
            logger.warning(
                f"Portfolio for {client_name} is in {currency.value} but profile "
                f"{profile_id} targets {profile.currency.value}"
            )

        existing = self._portfolio_repo.get_by_client(client_name)
        portfolio = Portfolio.from_assets(
            portfolio_id=existing.portfolio_id if existing else None,
            client_name=client_name,
            profile_id=profile_id,
            currency=currency,
            assets=assets,
            last_updated=to_local(last_updated) if last_updated else now_local(),
        )
        if portfolio.total_value <= 0:
            raise ValidationError("Portfolio total value must be greater than zero")

        saved = self._portfolio_repo.save(portfolio)
        logger.info(
            f"{'Replaced' if existing else 'Created'} portfolio {saved.portfolio_id} "
            f"for {client_name}: {len(assets)} assets, total {saved.total_value}"
        )
        return saved

    def import_file(
        self,
        client_name: str,
        profile_id: str,
        currency: Union[Currency, str],
        raw: bytes,
        filename: str,
        last_updated: Optional[datetime] = None,
    ) -> tuple[Optional[Portfolio], ParsedPortfolio]:
        """
        Parse a holdings file and store the resulting portfolio.

        Rows that fail to parse are reported and skipped. When no row
        survives, nothing is stored and the portfolio is None.

        Raises:
            UnsupportedFileError: if the extension is not CSV or Excel
        """
        if not raw:
            raise ValidationError("Uploaded file is empty.")

        parsed = self._parser.parse(raw, filename)
        if not parsed.ok:
            logger.warning(f"No assets imported from {filename} for {client_name}")
            return None, parsed

        portfolio = self.create_portfolio(
            client_name=client_name,
            profile_id=profile_id,
            currency=currency,
            assets=parsed.assets,
            last_updated=last_updated,
        )
        return portfolio, parsed

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Get portfolio by ID."""
        portfolio = self._portfolio_repo.get_by_id(portfolio_id)
        if not portfolio:
            raise NotFoundError("Portfolio", portfolio_id)
        return portfolio

    def list_portfolios(self) -> list[Portfolio]:
        """List all portfolios."""
        return self._portfolio_repo.list_all()

    def delete_portfolio(self, portfolio_id: str) -> None:
        """Delete a portfolio."""
        self.get_portfolio(portfolio_id)
        self._portfolio_repo.delete(portfolio_id)
        logger.info(f"Deleted portfolio {portfolio_id}")
