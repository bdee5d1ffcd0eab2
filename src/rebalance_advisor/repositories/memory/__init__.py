"""In-memory repository implementations."""

from rebalance_advisor.repositories.memory.profile_repo import InMemoryProfileRepository
from rebalance_advisor.repositories.memory.portfolio_repo import InMemoryPortfolioRepository
from rebalance_advisor.repositories.memory.tolerance_repo import InMemoryToleranceRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryPortfolioRepository",
    "InMemoryToleranceRepository",
]
