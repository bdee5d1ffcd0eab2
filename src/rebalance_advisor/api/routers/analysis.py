"""Gap analysis and rebalancing endpoints."""

from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from rebalance_advisor.api.deps import get_analysis_service, get_report_exporter
from rebalance_advisor.api.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    AssetAnalysisResponse,
    AssetTradeResponse,
    CategoryAnalysisResponse,
    RecommendationResponse,
    ToleranceBandSchema,
)
from rebalance_advisor.csv import ReportExporter
from rebalance_advisor.domain.models import ToleranceBand
from rebalance_advisor.domain.views import AnalysisReport
from rebalance_advisor.services import AnalysisService

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _to_response(report: AnalysisReport) -> AnalysisResponse:
    portfolio = report.portfolio
    return AnalysisResponse(
        portfolio_id=portfolio.portfolio_id,
        client_name=portfolio.client_name,
        profile_id=report.profile.profile_id,
        profile_name=report.profile.name,
        currency=portfolio.currency,
        total_value=portfolio.total_value,
        generated_at=report.generated_at,
        tolerance_bands=[
            ToleranceBandSchema(category=b.category, tolerance=b.tolerance)
            for b in report.tolerance_bands
        ],
        categories=[
            CategoryAnalysisResponse(
                category=c.category,
                current_value=c.current_value,
                current_percentage=c.current_percentage,
                target_percentage=c.target_percentage,
                gap=c.gap,
                gap_amount=c.gap_amount,
                status=c.status,
                asset_breakdown=[
                    AssetAnalysisResponse(
                        symbol=a.symbol,
                        name=a.name,
                        current_value=a.current_value,
                        current_percentage=a.current_percentage,
                        target_percentage=a.target_percentage,
                        gap=a.gap,
                        gap_amount=a.gap_amount,
                        status=a.status,
                    )
                    for a in c.asset_breakdown
                ],
            )
            for c in report.categories
        ],
        recommendations=[
            RecommendationResponse(
                category=r.category,
                action=r.action,
                amount=r.amount,
                assets=[
                    AssetTradeResponse(
                        symbol=t.symbol,
                        name=t.name,
                        action=t.action,
                        recommended_amount=t.recommended_amount,
                        current_value=t.current_value,
                        target_value=t.target_value,
                    )
                    for t in r.assets
                ],
            )
            for r in report.recommendations
        ],
    )


def _content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names also go in an RFC 5987 filename*."""
    fallback = filename.encode("ascii", "ignore").decode("ascii").strip("_") or "report.csv"
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _csv_download(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@router.get("/{portfolio_id}", response_model=AnalysisResponse)
def analyze_portfolio(
    portfolio_id: str,
    profile_id: Optional[str] = Query(None, description="Profile to compare against (portfolio's own if empty)"),
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResponse:
    """Run gap analysis with the stored tolerance bands."""
    return _to_response(service.analyze(portfolio_id, profile_id=profile_id))


@router.post("/{portfolio_id}", response_model=AnalysisResponse)
def analyze_portfolio_with_options(
    portfolio_id: str,
    data: AnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResponse:
    """Run gap analysis with an explicit profile and/or tolerance bands."""
    bands = None
    if data.tolerance_bands is not None:
        bands = [
            ToleranceBand(category=b.category, tolerance=b.tolerance)
            for b in data.tolerance_bands
        ]
    report = service.analyze(portfolio_id, profile_id=data.profile_id, tolerance_bands=bands)
    return _to_response(report)


# ---------------------------------------------------------------------------
# CSV Export
# ---------------------------------------------------------------------------


@router.get("/{portfolio_id}/export/gaps")
def export_gaps(
    portfolio_id: str,
    profile_id: Optional[str] = Query(None),
    service: AnalysisService = Depends(get_analysis_service),
    exporter: ReportExporter = Depends(get_report_exporter),
):
    """Download the category gap table as CSV."""
    report = service.analyze(portfolio_id, profile_id=profile_id)
    return _csv_download(
        exporter.gap_analysis_csv(report.categories),
        exporter.report_filename(report.portfolio.client_name, "Gap_Analysis"),
    )


@router.get("/{portfolio_id}/export/recommendations")
def export_recommendations(
    portfolio_id: str,
    profile_id: Optional[str] = Query(None),
    service: AnalysisService = Depends(get_analysis_service),
    exporter: ReportExporter = Depends(get_report_exporter),
):
    """Download the recommended trades as CSV."""
    report = service.analyze(portfolio_id, profile_id=profile_id)
    return _csv_download(
        exporter.recommendations_csv(report.recommendations),
        exporter.report_filename(report.portfolio.client_name, "Recommendations"),
    )


@router.get("/{portfolio_id}/export/report")
def export_report(
    portfolio_id: str,
    profile_id: Optional[str] = Query(None),
    service: AnalysisService = Depends(get_analysis_service),
    exporter: ReportExporter = Depends(get_report_exporter),
):
    """Download the full rebalancing report as CSV."""
    report = service.analyze(portfolio_id, profile_id=profile_id)
    return _csv_download(
        exporter.report_csv(report),
        exporter.report_filename(report.portfolio.client_name),
    )
