"""Asset domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from rebalance_advisor.core.exceptions import ValidationError
from rebalance_advisor.domain.models.enums import AssetCategory


@dataclass(frozen=True)
class Asset:
    """
    A single holding in a client portfolio.

    Immutable once attached to a portfolio; edits replace the asset.
    """

    symbol: str
    name: str
    category: AssetCategory
    current_value: Decimal
    shares: Optional[Decimal] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    isin: Optional[str] = None
    nemo_local: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.category, str):
            object.__setattr__(self, "category", AssetCategory(self.category))
        if not isinstance(self.current_value, Decimal):
            object.__setattr__(self, "current_value", Decimal(str(self.current_value)))
        if self.current_value < 0:
            raise ValidationError(
                f"Asset {self.symbol} has negative current value: {self.current_value}"
            )
