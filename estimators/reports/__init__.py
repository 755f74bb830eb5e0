"""Text report generation."""

from estimators.reports.comparison_report import ComparisonReportGenerator
from estimators.reports.settlement_report import SettlementReportGenerator
from estimators.reports.tax_report import TaxReportGenerator

__all__ = [
    "ComparisonReportGenerator",
    "SettlementReportGenerator",
    "TaxReportGenerator",
]
