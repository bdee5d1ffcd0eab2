"""Repository protocol definitions (interfaces)."""

from rebalance_advisor.repositories.protocols.profile_repo import ProfileRepository
from rebalance_advisor.repositories.protocols.portfolio_repo import PortfolioRepository
from rebalance_advisor.repositories.protocols.tolerance_repo import ToleranceRepository

__all__ = [
    "ProfileRepository",
    "PortfolioRepository",
    "ToleranceRepository",
]
