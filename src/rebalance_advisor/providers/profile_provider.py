"""Profile provider protocol."""

from typing import Protocol

from rebalance_advisor.domain.models import InvestmentProfile, Portfolio


class ProfileProvider(Protocol):
    """
    Protocol for sources of investment profiles.

    Implementations supply the profile catalogue an advisor starts from and,
    optionally, demo portfolios to analyze against it.
    """

    def load_profiles(self) -> list[InvestmentProfile]:
        """Return the profile catalogue."""
        ...

    def sample_portfolios(self) -> list[Portfolio]:
        """Return demo portfolios (may be empty)."""
        ...
