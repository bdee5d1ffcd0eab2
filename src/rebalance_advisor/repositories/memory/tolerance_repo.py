"""In-memory implementation of ToleranceRepository."""

import threading
from typing import Optional

from rebalance_advisor.domain.models import ToleranceBand


class InMemoryToleranceRepository:
    """Process-local tolerance band store."""

    def __init__(self, bands: Optional[list[ToleranceBand]] = None):
        self._lock = threading.Lock()
        self._bands: list[ToleranceBand] = list(bands or [])

    def get_bands(self) -> list[ToleranceBand]:
        """Return the current bands."""
        with self._lock:
            return list(self._bands)

    def replace_bands(self, bands: list[ToleranceBand]) -> list[ToleranceBand]:
        """Replace all bands."""
        with self._lock:
            self._bands = list(bands)
            return list(self._bands)
