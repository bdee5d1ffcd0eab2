"""Portfolio domain model."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from rebalance_advisor.domain.models.asset import Asset
from rebalance_advisor.domain.models.enums import Currency


@dataclass
class Portfolio:
    """
    A client's holdings at a point in time.

    total_value is taken as given; callers are responsible for keeping it
    equal to the sum of asset values. Use from_assets() to derive it.
    """

    portfolio_id: str
    client_name: str
    profile_id: str
    currency: Currency
    assets: list[Asset] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    last_updated: Optional[datetime] = None

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            self.currency = Currency(self.currency)

    @classmethod
    def from_assets(
        cls,
        client_name: str,
        profile_id: str,
        currency: Currency,
        assets: list[Asset],
        last_updated: Optional[datetime] = None,
        portfolio_id: Optional[str] = None,
    ) -> "Portfolio":
        """Build a portfolio whose total_value is the sum of its asset values."""
        total = sum((a.current_value for a in assets), Decimal("0"))
        return cls(
            portfolio_id=portfolio_id or f"portfolio-{uuid.uuid4().hex[:12]}",
            client_name=client_name,
            profile_id=profile_id,
            currency=currency,
            assets=list(assets),
            total_value=total,
            last_updated=last_updated,
        )
