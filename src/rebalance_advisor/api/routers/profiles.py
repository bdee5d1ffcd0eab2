"""Investment profile endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from rebalance_advisor.api.deps import get_profile_service
from rebalance_advisor.api.schemas import (
    AssetAllocationSchema,
    AssetTargetRequest,
    CategoryTargetsRequest,
    ProfileListResponse,
    ProfileResponse,
)
from rebalance_advisor.domain.models import AssetAllocation, InvestmentProfile
from rebalance_advisor.services import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _to_response(profile: InvestmentProfile) -> ProfileResponse:
    return ProfileResponse(
        profile_id=profile.profile_id,
        name=profile.name,
        description=profile.description,
        currency=profile.currency,
        risk_level=profile.risk_level,
        target_allocations=profile.target_allocations,
        asset_allocations=[
            AssetAllocationSchema(
                symbol=a.symbol,
                name=a.name,
                category=a.category,
                target_percentage=a.target_percentage,
                category_percentage=a.category_percentage,
            )
            for a in profile.asset_allocations
        ],
        total_allocation=ProfileService.total_allocation(profile),
    )


@router.get("", response_model=ProfileListResponse)
def list_profiles(
    currency: Optional[str] = Query(None, description="USD or CLP (all if empty)"),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """List investment profiles."""
    profiles = service.list_profiles(currency)
    return ProfileListResponse(
        profiles=[_to_response(p) for p in profiles],
        total=len(profiles),
    )


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get a single profile."""
    return _to_response(service.get_profile(profile_id))


@router.put("/{profile_id}/targets", response_model=ProfileResponse)
def update_category_targets(
    profile_id: str,
    data: CategoryTargetsRequest,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Replace category targets; asset targets are rescaled to match."""
    return _to_response(service.update_category_targets(profile_id, data.targets))


@router.put("/{profile_id}/assets/{symbol}", response_model=ProfileResponse)
def set_asset_target(
    profile_id: str,
    symbol: str,
    data: AssetTargetRequest,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Set one asset's target percentage."""
    return _to_response(service.set_asset_target(profile_id, symbol, data.target_percentage))


@router.post("/{profile_id}/assets", response_model=ProfileResponse, status_code=201)
def add_asset_allocation(
    profile_id: str,
    data: AssetAllocationSchema,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add a target asset to a profile."""
    allocation = AssetAllocation(
        symbol=data.symbol,
        name=data.name,
        category=data.category,
        target_percentage=data.target_percentage,
        category_percentage=data.category_percentage,
    )
    return _to_response(service.add_asset_allocation(profile_id, allocation))


@router.delete("/{profile_id}/assets/{symbol}", response_model=ProfileResponse)
def remove_asset_allocation(
    profile_id: str,
    symbol: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove a target asset from a profile."""
    return _to_response(service.remove_asset_allocation(profile_id, symbol))
