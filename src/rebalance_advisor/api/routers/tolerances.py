"""Tolerance band endpoints."""

from fastapi import APIRouter, Depends

from rebalance_advisor.api.deps import get_tolerance_service
from rebalance_advisor.api.schemas import (
    ToleranceBandSchema,
    ToleranceBandsResponse,
    ToleranceBandsUpdateRequest,
)
from rebalance_advisor.domain.models import ToleranceBand
from rebalance_advisor.services import ToleranceService

router = APIRouter(prefix="/tolerances", tags=["tolerances"])


def _to_response(bands: list[ToleranceBand]) -> ToleranceBandsResponse:
    return ToleranceBandsResponse(
        bands=[
            ToleranceBandSchema(category=b.category, tolerance=b.tolerance)
            for b in bands
        ]
    )


@router.get("", response_model=ToleranceBandsResponse)
def get_bands(
    service: ToleranceService = Depends(get_tolerance_service),
) -> ToleranceBandsResponse:
    """Get the tolerance band for every category."""
    return _to_response(service.get_bands())


@router.put("", response_model=ToleranceBandsResponse)
def update_bands(
    data: ToleranceBandsUpdateRequest,
    service: ToleranceService = Depends(get_tolerance_service),
) -> ToleranceBandsResponse:
    """Update tolerance bands; categories left out keep their value."""
    bands = service.set_bands(
        ToleranceBand(category=b.category, tolerance=b.tolerance) for b in data.bands
    )
    return _to_response(bands)
