"""Repository layer - data access abstractions and implementations."""

from rebalance_advisor.repositories.protocols import (
    ProfileRepository,
    PortfolioRepository,
    ToleranceRepository,
)

__all__ = [
    "ProfileRepository",
    "PortfolioRepository",
    "ToleranceRepository",
]
