"""CSV export of gap analyses and rebalancing recommendations."""

import csv
import io
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from rebalance_advisor.domain.views import (
    AnalysisReport,
    CategoryAnalysis,
    RebalanceRecommendation,
)

GAP_COLUMNS = ["Category", "Current %", "Target %", "Gap %", "Gap Amount", "Status"]

RECOMMENDATION_COLUMNS = [
    "Category",
    "Category Action",
    "Category Amount",
    "Symbol",
    "Name",
    "Action",
    "Current Value",
    "Target Value",
    "Recommended Amount",
]

_UNSAFE_FILENAME = re.compile(r"[^\w\-]+")


def format_percent(value: Decimal) -> str:
    """One decimal place, half up."""
    return str(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_amount(value: Decimal) -> str:
    """Whole currency units, half up."""
    return str(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ReportExporter:
    """
    CSV exporter for analysis results.

    Produces text rather than files; callers decide whether it is streamed
    as a download or written to disk.
    """

    def gap_analysis_csv(self, categories: Iterable[CategoryAnalysis]) -> str:
        """One row per category, in the order given."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(GAP_COLUMNS)
        for analysis in categories:
            writer.writerow([
                analysis.category.value,
                format_percent(analysis.current_percentage),
                format_percent(analysis.target_percentage),
                format_percent(analysis.gap),
                format_amount(analysis.gap_amount),
                analysis.status.value,
            ])
        return output.getvalue()

    def recommendations_csv(
        self,
        recommendations: Iterable[RebalanceRecommendation],
    ) -> str:
        """One row per asset trade, repeating the category move on each row."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(RECOMMENDATION_COLUMNS)
        for rec in recommendations:
            for trade in rec.assets:
                writer.writerow([
                    rec.category.value,
                    rec.action.value,
                    format_amount(rec.amount),
                    trade.symbol,
                    trade.name,
                    trade.action.value,
                    format_amount(trade.current_value),
                    format_amount(trade.target_value),
                    format_amount(trade.recommended_amount),
                ])
        return output.getvalue()

    def report_csv(self, report: AnalysisReport) -> str:
        """
        Full rebalancing report: a short header block, the gap table and the
        recommendations table, separated by blank lines.
        """
        portfolio = report.portfolio
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(["Client", portfolio.client_name])
        writer.writerow(["Profile", report.profile.name])
        writer.writerow(["Currency", portfolio.currency.value])
        writer.writerow(["Total Value", format_amount(portfolio.total_value)])
        if report.generated_at is not None:
            writer.writerow(["Generated", report.generated_at.isoformat()])
        writer.writerow([])

        output.write(self.gap_analysis_csv(report.categories))
        writer.writerow([])
        output.write(self.recommendations_csv(report.recommendations))
        return output.getvalue()

    def report_filename(self, client_name: str, suffix: str = "Rebalancing_Report") -> str:
        """Download name, e.g. Johnson_Family_Trust_Rebalancing_Report.csv."""
        safe = _UNSAFE_FILENAME.sub("_", client_name.strip()).strip("_") or "Portfolio"
        return f"{safe}_{suffix}.csv"
