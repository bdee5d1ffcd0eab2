"""Tolerance band domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from rebalance_advisor.core.exceptions import ValidationError
from rebalance_advisor.domain.models.enums import AssetCategory


@dataclass(frozen=True)
class ToleranceBand:
    """Allowed absolute deviation (percentage points) for a category."""

    category: AssetCategory
    tolerance: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.category, str):
            object.__setattr__(self, "category", AssetCategory(self.category))
        if not isinstance(self.tolerance, Decimal):
            object.__setattr__(self, "tolerance", Decimal(str(self.tolerance)))
        if self.tolerance < 0:
            raise ValidationError(
                f"Tolerance for {self.category.value} must be >= 0, got {self.tolerance}"
            )


def tolerance_for(bands: Iterable[ToleranceBand], category: AssetCategory) -> Decimal:
    """Return the first matching band's tolerance, or 0 if the category has none."""
    for band in bands:
        if band.category == category:
            return band.tolerance
    return Decimal("0")
