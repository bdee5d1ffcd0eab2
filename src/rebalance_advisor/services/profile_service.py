"""Profile catalogue editing and tolerance band settings."""

import logging
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union

from rebalance_advisor.core.exceptions import NotFoundError, ValidationError
from rebalance_advisor.domain.models import (
    AssetAllocation,
    AssetCategory,
    CATEGORY_ORDER,
    Currency,
    InvestmentProfile,
    ToleranceBand,
)
from rebalance_advisor.repositories.protocols import ProfileRepository, ToleranceRepository

logger = logging.getLogger(__name__)

# Category targets must add up to 100 within this many points
ALLOCATION_SUM_TOLERANCE = Decimal("0.01")

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def _to_decimal(value: Union[Decimal, int, float, str], label: str) -> Decimal:
    try:
        result = Decimal(str(value))
    except ArithmeticError:
        raise ValidationError(f"{label} must be a number, got {value!r}")
    if not result.is_finite():
        raise ValidationError(f"{label} must be finite, got {value!r}")
    return result


def _to_category(value: Union[AssetCategory, str]) -> AssetCategory:
    try:
        return AssetCategory(value)
    except ValueError:
        valid = ", ".join(c.value for c in CATEGORY_ORDER)
        raise ValidationError(f"Unknown category '{value}'. Expected one of: {valid}")


class ProfileService:
    """
    Service for browsing and editing investment profiles.

    Edits are applied to a copy fetched from the repository and saved back
    whole, so a failed validation leaves the stored profile untouched.
    """

    def __init__(self, profile_repo: ProfileRepository):
        self._profile_repo = profile_repo

    def list_profiles(self, currency: Optional[Union[Currency, str]] = None) -> list[InvestmentProfile]:
        """List profiles, optionally only those for one currency."""
        if currency is not None:
            try:
                currency = Currency(currency.upper())
            except ValueError:
                raise ValidationError(f"Unsupported currency: {currency}. Use USD or CLP.")
        return self._profile_repo.list_all(currency)

    def get_profile(self, profile_id: str) -> InvestmentProfile:
        """Get profile by ID."""
        profile = self._profile_repo.get_by_id(profile_id)
        if not profile:
            raise NotFoundError("Profile", profile_id)
        return profile

    @staticmethod
    def total_allocation(profile: InvestmentProfile) -> Decimal:
        """Sum of the profile's category targets."""
        return profile.total_allocation

    def update_category_targets(
        self,
        profile_id: str,
        targets: Mapping[Union[AssetCategory, str], Union[Decimal, int, float, str]],
    ) -> InvestmentProfile:
        """
        Replace all category targets of a profile.

        Categories left out of targets are set to 0. The new targets must sum
        to 100 (within ALLOCATION_SUM_TOLERANCE). For every category whose
        target changed, asset targets in it are rescaled in proportion to
        their category_percentage; a category whose assets have no
        category_percentage keeps its asset targets.

        Raises:
            NotFoundError: if the profile does not exist
            ValidationError: on unknown categories, negative targets or a bad sum
        """
        profile = self.get_profile(profile_id)

        new_targets: dict[AssetCategory, Decimal] = {c: _ZERO for c in CATEGORY_ORDER}
        for raw_category, raw_value in targets.items():
            category = _to_category(raw_category)
            value = _to_decimal(raw_value, f"Target for {category.value}")
            if value < 0 or value > _HUNDRED:
                raise ValidationError(
                    f"Target for {category.value} must be between 0 and 100, got {value}"
                )
            new_targets[category] = value

        total = sum(new_targets.values(), _ZERO)
        if abs(total - _HUNDRED) > ALLOCATION_SUM_TOLERANCE:
            raise ValidationError(f"Category targets must sum to 100%, got {total}%")

        for category in CATEGORY_ORDER:
            if new_targets[category] != profile.target_for(category):
                self._rescale_category(profile, category, new_targets[category])

        profile.target_allocations = new_targets
        logger.info(f"Updated category targets of profile {profile_id}")
        return self._profile_repo.save(profile)

    def set_asset_target(
        self,
        profile_id: str,
        symbol: str,
        target_percentage: Union[Decimal, int, float, str],
    ) -> InvestmentProfile:
        """
        Set one asset's share of the whole portfolio.

        category_percentage is recomputed against the asset's category
        target (0 when that target is 0).

        Raises:
            NotFoundError: if the profile or the symbol does not exist
            ValidationError: if the target is outside 0..100
        """
        profile = self.get_profile(profile_id)
        target = _to_decimal(target_percentage, "Asset target")
        if target < 0 or target > _HUNDRED:
            raise ValidationError(f"Asset target must be between 0 and 100, got {target}")

        allocation = self._find_allocation(profile, symbol)
        allocation.target_percentage = target
        allocation.category_percentage = self._share_of_category(profile, allocation.category, target)

        return self._profile_repo.save(profile)

    def add_asset_allocation(
        self,
        profile_id: str,
        allocation: AssetAllocation,
    ) -> InvestmentProfile:
        """
        Add a target asset to a profile.

        A zero category_percentage is derived from the target.

        Raises:
            NotFoundError: if the profile does not exist
            ValidationError: on an empty symbol, a bad target, or a symbol
                already targeted in any category
        """
        profile = self.get_profile(profile_id)

        symbol = allocation.symbol.strip()
        if not symbol:
            raise ValidationError("Asset symbol cannot be empty")
        target = _to_decimal(allocation.target_percentage, "Asset target")
        if target < 0 or target > _HUNDRED:
            raise ValidationError(f"Asset target must be between 0 and 100, got {target}")

        for existing in profile.asset_allocations:
            if existing.symbol == symbol:
                raise ValidationError(
                    f"Asset '{symbol}' already has a target in {existing.category.value}"
                )

        category_percentage = _to_decimal(allocation.category_percentage, "Category share")
        if category_percentage == _ZERO:
            category_percentage = self._share_of_category(profile, allocation.category, target)

        profile.asset_allocations.append(
            AssetAllocation(
                symbol=symbol,
                name=allocation.name.strip() or symbol,
                category=allocation.category,
                target_percentage=target,
                category_percentage=category_percentage,
            )
        )
        return self._profile_repo.save(profile)

    def remove_asset_allocation(self, profile_id: str, symbol: str) -> InvestmentProfile:
        """
        Remove a target asset from a profile.

        Raises:
            NotFoundError: if the profile or the symbol does not exist
        """
        profile = self.get_profile(profile_id)
        allocation = self._find_allocation(profile, symbol)
        profile.asset_allocations.remove(allocation)
        return self._profile_repo.save(profile)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _find_allocation(profile: InvestmentProfile, symbol: str) -> AssetAllocation:
        for allocation in profile.asset_allocations:
            if allocation.symbol == symbol:
                return allocation
        raise NotFoundError("Asset allocation", f"{profile.profile_id}/{symbol}")

    @staticmethod
    def _share_of_category(
        profile: InvestmentProfile,
        category: AssetCategory,
        target: Decimal,
    ) -> Decimal:
        category_total = profile.target_for(category)
        if category_total <= 0:
            return _ZERO
        return target / category_total * _HUNDRED

    @staticmethod
    def _rescale_category(
        profile: InvestmentProfile,
        category: AssetCategory,
        new_target: Decimal,
    ) -> None:
        allocations = profile.allocations_in(category)
        weight = sum((a.category_percentage for a in allocations), _ZERO)
        if weight <= 0:
            return
        for allocation in allocations:
            allocation.target_percentage = allocation.category_percentage / weight * new_target


class ToleranceService:
    """Service for the per-category tolerance bands used in gap analysis."""

    def __init__(self, tolerance_repo: ToleranceRepository):
        self._tolerance_repo = tolerance_repo

    def get_bands(self) -> list[ToleranceBand]:
        """One band per category, in canonical order (0 where none is stored)."""
        stored = {band.category: band for band in self._tolerance_repo.get_bands()}
        return [
            stored.get(category, ToleranceBand(category=category, tolerance=_ZERO))
            for category in CATEGORY_ORDER
        ]

    def set_bands(self, bands: Iterable[ToleranceBand]) -> list[ToleranceBand]:
        """
        Update bands for the categories given; others keep their value.

        Raises:
            ValidationError: if a category appears twice
        """
        updates: dict[AssetCategory, ToleranceBand] = {}
        for band in bands:
            if band.category in updates:
                raise ValidationError(f"Duplicate tolerance for {band.category.value}")
            updates[band.category] = band

        merged = [updates.get(band.category, band) for band in self.get_bands()]
        self._tolerance_repo.replace_bands(merged)
        logger.info(
            "Tolerance bands updated: "
            + ", ".join(f"{b.category.value}={b.tolerance}" for b in merged)
        )
        return merged

    @staticmethod
    def bands_from_mapping(
        mapping: Mapping[str, Union[Decimal, int, float, str]],
    ) -> list[ToleranceBand]:
        """
        Build bands from a {category label: tolerance} mapping.

        Raises:
            ValidationError: on unknown categories or negative tolerances
        """
        return [
            ToleranceBand(
                category=_to_category(label),
                tolerance=_to_decimal(value, f"Tolerance for {label}"),
            )
            for label, value in mapping.items()
        ]
