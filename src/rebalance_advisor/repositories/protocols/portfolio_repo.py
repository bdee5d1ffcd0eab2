"""Portfolio repository protocol."""

from typing import Protocol, Optional

from rebalance_advisor.domain.models import Portfolio


class PortfolioRepository(Protocol):
    """Interface for client portfolio data access."""

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        ...

    def get_by_client(self, client_name: str) -> Optional[Portfolio]:
        """Retrieve the current portfolio of a client."""
        ...

    def list_all(self) -> list[Portfolio]:
        """List all portfolios."""
        ...

    def save(self, portfolio: Portfolio) -> Portfolio:
        """Insert or replace a portfolio."""
        ...

    def delete(self, portfolio_id: str) -> None:
        """Remove a portfolio."""
        ...
