"""Investment profile repository protocol."""

from typing import Protocol, Optional

from rebalance_advisor.domain.models import Currency, InvestmentProfile


class ProfileRepository(Protocol):
    """Interface for investment profile data access."""

    def get_by_id(self, profile_id: str) -> Optional[InvestmentProfile]:
        """Retrieve profile by ID."""
        ...

    def list_all(self, currency: Optional[Currency] = None) -> list[InvestmentProfile]:
        """List profiles, optionally restricted to one currency."""
        ...

    def save(self, profile: InvestmentProfile) -> InvestmentProfile:
        """Insert or replace a profile."""
        ...
