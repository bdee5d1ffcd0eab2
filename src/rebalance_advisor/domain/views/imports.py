"""View models for holdings file imports."""

from dataclasses import dataclass, field

from rebalance_advisor.domain.models import Asset


@dataclass
class ParsedPortfolio:
    """
    Result of parsing a holdings file.

    Bad rows are reported in errors and left out of assets; warnings flag
    rows that were kept but deserve a look.
    """

    assets: list[Asset] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.assets)
