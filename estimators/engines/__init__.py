"""Calculation engines."""

from estimators.engines.comparison import ComparisonEngine
from estimators.engines.hourly import HourlyRateEngine
from estimators.engines.paycheck import PaycheckEngine
from estimators.engines.quarterly import QuarterlyTaxEstimator
from estimators.engines.settlement import SettlementEngine
from estimators.engines.tax import TaxEngine, compute_bracket_tax, compute_payroll_tax

__all__ = [
    "ComparisonEngine",
    "HourlyRateEngine",
    "PaycheckEngine",
    "QuarterlyTaxEstimator",
    "SettlementEngine",
    "TaxEngine",
    "compute_bracket_tax",
    "compute_payroll_tax",
]
