"""In-memory implementation of PortfolioRepository."""

import copy
import threading
from typing import Optional

from rebalance_advisor.domain.models import Portfolio


class InMemoryPortfolioRepository:
    """Process-local portfolio store keyed by portfolio ID."""

    def __init__(self):
        self._lock = threading.Lock()
        self._portfolios: dict[str, Portfolio] = {}

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        with self._lock:
            portfolio = self._portfolios.get(portfolio_id)
            return copy.deepcopy(portfolio) if portfolio else None

    def get_by_client(self, client_name: str) -> Optional[Portfolio]:
        """Retrieve the current portfolio of a client."""
        with self._lock:
            for portfolio in self._portfolios.values():
                if portfolio.client_name == client_name:
                    return copy.deepcopy(portfolio)
        return None

    def list_all(self) -> list[Portfolio]:
        """List all portfolios in insertion order."""
        with self._lock:
            return [copy.deepcopy(p) for p in self._portfolios.values()]

    def save(self, portfolio: Portfolio) -> Portfolio:
        """Insert or replace a portfolio."""
        with self._lock:
            self._portfolios[portfolio.portfolio_id] = copy.deepcopy(portfolio)
        return copy.deepcopy(portfolio)

    def delete(self, portfolio_id: str) -> None:
        """Remove a portfolio (no-op if absent)."""
        with self._lock:
            self._portfolios.pop(portfolio_id, None)
