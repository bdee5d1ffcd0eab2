"""Investment profile domain models."""

from dataclasses import dataclass, field
from decimal import Decimal

from rebalance_advisor.domain.models.enums import (
    AssetCategory,
    CATEGORY_ORDER,
    Currency,
    RiskLevel,
)


@dataclass
class AssetAllocation:
    """
    Target weight for one asset inside a profile.

    target_percentage is a share of the whole portfolio; category_percentage
    is the share within the asset's category. The two are kept consistent by
    the profile editing service, not checked here.
    """

    symbol: str
    name: str
    category: AssetCategory
    target_percentage: Decimal
    category_percentage: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        if isinstance(self.category, str):
            self.category = AssetCategory(self.category)


@dataclass
class InvestmentProfile:
    """Target allocation model an advisor measures portfolios against."""

    profile_id: str
    name: str
    currency: Currency
    target_allocations: dict[AssetCategory, Decimal]
    asset_allocations: list[AssetAllocation] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.MODERATE
    description: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            self.currency = Currency(self.currency)
        if isinstance(self.risk_level, str):
            self.risk_level = RiskLevel(self.risk_level)
        self.target_allocations = {
            AssetCategory(category): Decimal(str(value))
            for category, value in self.target_allocations.items()
        }

    def target_for(self, category: AssetCategory) -> Decimal:
        """Category target percentage; categories without a target read as 0."""
        return self.target_allocations.get(category, Decimal("0"))

    def allocations_in(self, category: AssetCategory) -> list[AssetAllocation]:
        """Asset allocations of one category, in profile order."""
        return [a for a in self.asset_allocations if a.category == category]

    @property
    def total_allocation(self) -> Decimal:
        """Sum of category targets (100 for a well-formed profile)."""
        return sum((self.target_for(c) for c in CATEGORY_ORDER), Decimal("0"))
