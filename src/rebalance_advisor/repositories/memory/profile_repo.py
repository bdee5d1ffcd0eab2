"""In-memory implementation of ProfileRepository."""

import copy
import threading
from typing import Optional

from rebalance_advisor.domain.models import Currency, InvestmentProfile


class InMemoryProfileRepository:
    """
    Process-local profile store.

    Profiles are copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self, profiles: Optional[list[InvestmentProfile]] = None):
        self._lock = threading.Lock()
        self._profiles: dict[str, InvestmentProfile] = {}
        for profile in profiles or []:
            self._profiles[profile.profile_id] = copy.deepcopy(profile)

    def get_by_id(self, profile_id: str) -> Optional[InvestmentProfile]:
        """Retrieve profile by ID."""
        with self._lock:
            profile = self._profiles.get(profile_id)
            return copy.deepcopy(profile) if profile else None

    def list_all(self, currency: Optional[Currency] = None) -> list[InvestmentProfile]:
        """List profiles in insertion order, optionally for one currency."""
        with self._lock:
            profiles = list(self._profiles.values())
        if currency is not None:
            profiles = [p for p in profiles if p.currency == Currency(currency)]
        return [copy.deepcopy(p) for p in profiles]

    def save(self, profile: InvestmentProfile) -> InvestmentProfile:
        """Insert or replace a profile."""
        with self._lock:
            self._profiles[profile.profile_id] = copy.deepcopy(profile)
        return copy.deepcopy(profile)
