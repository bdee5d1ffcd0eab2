"""Client portfolio endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import Response

from rebalance_advisor.api.deps import get_portfolio_service, get_template_generator
from rebalance_advisor.api.schemas import (
    AssetSchema,
    PortfolioCreateRequest,
    PortfolioImportResponse,
    PortfolioListResponse,
    PortfolioResponse,
)
from rebalance_advisor.core.exceptions import ImportFailedError, ValidationError
from rebalance_advisor.core.timezone import parse_datetime_local
from rebalance_advisor.csv import PortfolioTemplateGenerator
from rebalance_advisor.domain.models import Asset, Portfolio
from rebalance_advisor.services import PortfolioService

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


def _to_response(portfolio: Portfolio) -> PortfolioResponse:
    return PortfolioResponse(
        portfolio_id=portfolio.portfolio_id,
        client_name=portfolio.client_name,
        profile_id=portfolio.profile_id,
        currency=portfolio.currency,
        total_value=portfolio.total_value,
        last_updated=portfolio.last_updated,
        assets=[
            AssetSchema(
                symbol=a.symbol,
                name=a.name,
                category=a.category,
                current_value=a.current_value,
                shares=a.shares,
                price=a.price,
                currency=a.currency,
                isin=a.isin,
                nemo_local=a.nemo_local,
            )
            for a in portfolio.assets
        ],
    )


@router.get("", response_model=PortfolioListResponse)
def list_portfolios(
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioListResponse:
    """List all client portfolios."""
    portfolios = service.list_portfolios()
    return PortfolioListResponse(
        portfolios=[_to_response(p) for p in portfolios],
        total=len(portfolios),
    )


@router.post("", response_model=PortfolioResponse, status_code=201)
def create_portfolio(
    data: PortfolioCreateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Create a portfolio from holdings; replaces the client's previous one."""
    portfolio = service.create_portfolio(
        client_name=data.client_name,
        profile_id=data.profile_id,
        currency=data.currency,
        assets=[Asset(**asset.model_dump()) for asset in data.assets],
        last_updated=data.last_updated,
    )
    return _to_response(portfolio)


# ---------------------------------------------------------------------------
# File Import / Template
# ---------------------------------------------------------------------------


@router.post("/import", response_model=PortfolioImportResponse, status_code=201)
def import_portfolio(
    file: UploadFile = File(...),
    client_name: str = Form(...),
    profile_id: str = Form(...),
    currency: str = Form("USD"),
    as_of: Optional[str] = Form(None, description="Statement date; defaults to now"),
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioImportResponse:
    """Import holdings from a CSV or Excel statement.

    Rows that fail to parse are skipped and reported; the portfolio is
    stored when at least one row is valid.
    """
    last_updated = None
    if as_of:
        try:
            last_updated = parse_datetime_local(as_of)
        except (ValueError, OverflowError):
            raise ValidationError(f"Invalid statement date: {as_of}")

    raw = file.file.read()
    portfolio, parsed = service.import_file(
        client_name=client_name,
        profile_id=profile_id,
        currency=currency,
        raw=raw,
        filename=file.filename or "",
        last_updated=last_updated,
    )

    if portfolio is None:
        raise ImportFailedError(parsed.errors, parsed.warnings)

    return PortfolioImportResponse(
        portfolio=_to_response(portfolio),
        imported=len(parsed.assets),
        errors=parsed.errors,
        warnings=parsed.warnings,
    )


@router.get("/template")
def download_template(
    currency: str = Query("USD", description="USD or CLP example rows"),
    generator: PortfolioTemplateGenerator = Depends(get_template_generator),
):
    """Download a holdings template with header and example rows."""
    csv_text = generator.generate(currency)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{generator.filename(currency)}"'},
    )


@router.get("/{portfolio_id}", response_model=PortfolioResponse)
def get_portfolio(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Get a single portfolio."""
    return _to_response(service.get_portfolio(portfolio_id))


@router.delete("/{portfolio_id}", status_code=204)
def delete_portfolio(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> None:
    """Delete a portfolio."""
    service.delete_portfolio(portfolio_id)
