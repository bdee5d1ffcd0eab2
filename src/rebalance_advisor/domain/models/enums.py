"""Enumerations for domain models."""

from enum import Enum


class AssetCategory(str, Enum):
    """Fixed asset categories a portfolio is bucketed into."""

    FIXED_INCOME = "Fixed Income"
    EQUITIES = "Equities"
    ALTERNATIVE_INVESTMENTS = "Alternative Investments"
    CAJA = "Caja"  # Cash and money market
    BALANCEADO = "Balanceado"  # Balanced funds
    OTHER = "Other"


# Canonical iteration and display order for every per-category output
CATEGORY_ORDER: tuple[AssetCategory, ...] = (
    AssetCategory.FIXED_INCOME,
    AssetCategory.EQUITIES,
    AssetCategory.ALTERNATIVE_INVESTMENTS,
    AssetCategory.CAJA,
    AssetCategory.BALANCEADO,
    AssetCategory.OTHER,
)


class CategoryStatus(str, Enum):
    """Category position relative to its target and tolerance band."""

    OVER = "Over"
    UNDER = "Under"
    ON_TARGET = "On Target"


class AssetStatus(str, Enum):
    """Asset position relative to its target."""

    OVER = "Over"
    UNDER = "Under"
    ON_TARGET = "On Target"
    MISSING = "Missing"  # Target asset not held at all


class TradeAction(str, Enum):
    """Recommended trade direction."""

    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"


class RiskLevel(str, Enum):
    """Investment profile risk tag."""

    PRESERVATION = "Preservation"
    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    AGGRESSIVE = "Aggressive"


class Currency(str, Enum):
    """Reporting currencies supported for portfolios and profiles."""

    USD = "USD"
    CLP = "CLP"


class SymbolMatching(str, Enum):
    """How held asset symbols are joined against target allocations."""

    EXACT = "exact"
    NORMALIZED = "normalized"  # Trimmed and upper-cased on both sides
