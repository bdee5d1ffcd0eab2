"""
Allocation engine: category aggregation, gap analysis and rebalancing.

Every function here is pure. Inputs are read, never mutated, and results are
recomputed on each call. Two different "on target" thresholds are in play:

- asset level: a fixed band (ASSET_ON_TARGET_THRESHOLD, 0.5 points) unless
  the caller passes asset_threshold;
- category level: the caller's tolerance bands (0 for unlisted categories).

They are kept apart, so a category can be off target while all
of its assets read on target. Such a category yields no recommendation.
"""

from decimal import Decimal
from typing import Iterable, Optional

from rebalance_advisor.core.exceptions import InvalidPortfolioError
from rebalance_advisor.domain.models import (
    Asset,
    AssetCategory,
    AssetStatus,
    CATEGORY_ORDER,
    CategoryStatus,
    InvestmentProfile,
    Portfolio,
    SymbolMatching,
    ToleranceBand,
    TradeAction,
    tolerance_for,
)
from rebalance_advisor.domain.views import (
    AssetAnalysis,
    AssetTrade,
    CategoryAllocation,
    CategoryAnalysis,
    RebalanceRecommendation,
)

ASSET_ON_TARGET_THRESHOLD = Decimal("0.5")

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def _total_value(portfolio: Portfolio) -> Decimal:
    """Return the portfolio total, refusing values no percentage can be taken of."""
    total = portfolio.total_value
    if not isinstance(total, Decimal):
        total = Decimal(str(total))
    if not total.is_finite() or total == _ZERO:
        raise InvalidPortfolioError(
            f"Portfolio {portfolio.portfolio_id} has zero or non-finite total value: {total}"
        )
    return total


def _symbol_key(symbol: str, matching: SymbolMatching) -> str:
    if matching == SymbolMatching.NORMALIZED:
        return symbol.strip().upper()
    return symbol


def _find_holding(
    holdings: list[Asset],
    symbol: str,
    matching: SymbolMatching,
) -> Optional[Asset]:
    """First held asset whose symbol matches; duplicates after it are ignored."""
    key = _symbol_key(symbol, matching)
    for asset in holdings:
        if _symbol_key(asset.symbol, matching) == key:
            return asset
    return None


def aggregate_categories(portfolio: Portfolio) -> dict[AssetCategory, CategoryAllocation]:
    """
    Sum current asset values into the six categories.

    Returns a mapping in canonical category order; categories with no assets
    read as 0 value and 0%. Percentages are taken against
    portfolio.total_value, not the recomputed asset sum.

    Raises:
        InvalidPortfolioError: if total_value is zero or not finite
    """
    total = _total_value(portfolio)

    sums: dict[AssetCategory, Decimal] = {category: _ZERO for category in CATEGORY_ORDER}
    for asset in portfolio.assets:
        sums[asset.category] += asset.current_value

    return {
        category: CategoryAllocation(
            category=category,
            value=sums[category],
            percentage=sums[category] / total * _HUNDRED,
        )
        for category in CATEGORY_ORDER
    }


def analyze_assets(
    portfolio: Portfolio,
    profile: InvestmentProfile,
    category: AssetCategory,
    *,
    asset_threshold: Decimal = ASSET_ON_TARGET_THRESHOLD,
    symbol_matching: SymbolMatching = SymbolMatching.EXACT,
) -> list[AssetAnalysis]:
    """
    Compare each target asset of one category against its holding.

    One entry per target allocation in the profile (held assets without a
    target are not reported). Percentages are of the whole portfolio.

    Status: Missing when nothing is held, On Target when |gap| is within
    asset_threshold (inclusive), otherwise Over or Under by the gap's sign.
    """
    total = _total_value(portfolio)
    category = AssetCategory(category)
    holdings = [a for a in portfolio.assets if a.category == category]

    results: list[AssetAnalysis] = []
    for target in profile.allocations_in(category):
        holding = _find_holding(holdings, target.symbol, symbol_matching)
        current_value = holding.current_value if holding else _ZERO
        current_percentage = current_value / total * _HUNDRED
        gap = current_percentage - target.target_percentage
        gap_amount = gap / _HUNDRED * total

        if current_value == _ZERO:
            status = AssetStatus.MISSING
        elif abs(gap) <= asset_threshold:
            status = AssetStatus.ON_TARGET
        else:
            status = AssetStatus.OVER if gap > 0 else AssetStatus.UNDER

        results.append(
            AssetAnalysis(
                symbol=target.symbol,
                name=target.name,
                current_value=current_value,
                current_percentage=current_percentage,
                target_percentage=target.target_percentage,
                gap=gap,
                gap_amount=gap_amount,
                status=status,
            )
        )

    return results


def analyze_gaps(
    portfolio: Portfolio,
    profile: InvestmentProfile,
    tolerance_bands: Iterable[ToleranceBand] = (),
    *,
    asset_threshold: Decimal = ASSET_ON_TARGET_THRESHOLD,
    symbol_matching: SymbolMatching = SymbolMatching.EXACT,
) -> list[CategoryAnalysis]:
    """
    Classify every category against its target and tolerance band.

    Output follows CATEGORY_ORDER regardless of asset or profile ordering.
    A category is On Target when |gap| <= its tolerance (inclusive); a
    category missing from tolerance_bands has tolerance 0. The asset
    breakdown is attached to every category, on target or not.
    """
    bands = list(tolerance_bands)
    allocations = aggregate_categories(portfolio)
    total = _total_value(portfolio)

    results: list[CategoryAnalysis] = []
    for category in CATEGORY_ORDER:
        allocation = allocations[category]
        target_percentage = profile.target_for(category)
        gap = allocation.percentage - target_percentage
        gap_amount = gap / _HUNDRED * total

        tolerance = tolerance_for(bands, category)
        if abs(gap) <= tolerance:
            status = CategoryStatus.ON_TARGET
        else:
            status = CategoryStatus.OVER if gap > 0 else CategoryStatus.UNDER

        results.append(
            CategoryAnalysis(
                category=category,
                current_value=allocation.value,
                current_percentage=allocation.percentage,
                target_percentage=target_percentage,
                gap=gap,
                gap_amount=gap_amount,
                status=status,
                asset_breakdown=analyze_assets(
                    portfolio,
                    profile,
                    category,
                    asset_threshold=asset_threshold,
                    symbol_matching=symbol_matching,
                ),
            )
        )

    return results


def generate_recommendations(
    portfolio: Portfolio,
    analyses: Iterable[CategoryAnalysis],
) -> list[RebalanceRecommendation]:
    """
    Turn a gap analysis into buy/sell recommendations.

    Two filters apply in order:
      1. categories reading On Target are skipped;
      2. within the rest, only assets not On Target are kept, and a category
         with no such asset is skipped too.

    Asset actions compare current value against the exact target value
    (Hold only on equality); recommended amounts are |asset gap amount|.
    Output order follows the input analyses.
    """
    total = _total_value(portfolio)

    recommendations: list[RebalanceRecommendation] = []
    for analysis in analyses:
        if analysis.status == CategoryStatus.ON_TARGET:
            continue

        off_target = [
            asset for asset in analysis.asset_breakdown
            if asset.status != AssetStatus.ON_TARGET
        ]
        if not off_target:
            continue

        trades: list[AssetTrade] = []
        for asset in off_target:
            target_value = asset.target_percentage / _HUNDRED * total
            if asset.current_value > target_value:
                action = TradeAction.SELL
            elif asset.current_value < target_value:
                action = TradeAction.BUY
            else:
                action = TradeAction.HOLD
            trades.append(
                AssetTrade(
                    symbol=asset.symbol,
                    name=asset.name,
                    recommended_amount=abs(asset.gap_amount),
                    current_value=asset.current_value,
                    target_value=target_value,
                    action=action,
                )
            )

        recommendations.append(
            RebalanceRecommendation(
                category=analysis.category,
                action=TradeAction.SELL if analysis.gap > 0 else TradeAction.BUY,
                amount=abs(analysis.gap_amount),
                assets=trades,
            )
        )

    return recommendations
