"""Tax report generator: SE tax, hourly rate, paycheck, quarterly plan."""

from estimators.models.config import PayFrequencyConfig
from estimators.models.results import (
    HourlyRateResult,
    PaycheckResult,
    PayrollTaxResult,
    QuarterlyEstimate,
)
from estimators.reports.base import build_environment


class TaxReportGenerator:
    def __init__(self) -> None:
        self.env = build_environment()

    def render_se_tax(self, result: PayrollTaxResult, tax_year: int) -> str:
        template = self.env.get_template("se_tax.txt")
        return template.render(res=result, tax_year=tax_year)

    def render_hourly_rate(self, result: HourlyRateResult) -> str:
        template = self.env.get_template("hourly_rate.txt")
        return template.render(res=result)

    def render_paycheck(self, result: PaycheckResult, frequency: PayFrequencyConfig) -> str:
        template = self.env.get_template("paycheck.txt")
        return template.render(res=result, frequency=frequency)

    def render_quarterly(self, result: QuarterlyEstimate) -> str:
        template = self.env.get_template("quarterly.txt")
        return template.render(res=result)
