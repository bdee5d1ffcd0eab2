"""Tolerance band repository protocol."""

from typing import Protocol

from rebalance_advisor.domain.models import ToleranceBand


class ToleranceRepository(Protocol):
    """Interface for tolerance band settings."""

    def get_bands(self) -> list[ToleranceBand]:
        """Return the current bands."""
        ...

    def replace_bands(self, bands: list[ToleranceBand]) -> list[ToleranceBand]:
        """Replace all bands."""
        ...
