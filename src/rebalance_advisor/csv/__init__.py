"""Holdings file import, template and report export."""

from rebalance_advisor.csv.importer import PortfolioFileParser
from rebalance_advisor.csv.exporter import ReportExporter
from rebalance_advisor.csv.template import PortfolioTemplateGenerator

__all__ = [
    "PortfolioFileParser",
    "ReportExporter",
    "PortfolioTemplateGenerator",
]
