"""Freelance hourly-rate calculator.

Works backwards from a take-home target: self-employment tax sets the
effective rate, business expenses take a fixed share, and only part of the
working hours are billable.
"""

from decimal import Decimal

from estimators.engines.tables import HOURLY_RATE_DEFAULTS
from estimators.engines.tax import TaxEngine
from estimators.exceptions import DataValidationError
from estimators.models.config import HourlyRateParams
from estimators.models.results import HourlyRateResult

ZERO = Decimal("0")


class HourlyRateEngine:
    def __init__(
        self, tax_engine: TaxEngine, params: HourlyRateParams = HOURLY_RATE_DEFAULTS
    ) -> None:
        self.tax_engine = tax_engine
        self.params = params

    def compute(
        self,
        target_income: Decimal,
        weeks_per_year: int | None = None,
        hours_per_week: int | None = None,
        expense_rate: Decimal | None = None,
    ) -> HourlyRateResult:
        """Minimum, break-even and recommended hourly rates for a target income.

        Raises:
            DataValidationError: if there are no billable hours, or taxes and
                expenses together consume all revenue.
        """
        weeks = self.params.weeks_per_year if weeks_per_year is None else weeks_per_year
        hours = self.params.hours_per_week if hours_per_week is None else hours_per_week
        expenses = self.params.expense_rate if expense_rate is None else expense_rate

        tax = self.tax_engine.compute_se_tax(target_income)
        billable_hours = Decimal(weeks * hours) * self.params.utilization_rate
        if billable_hours <= ZERO:
            raise DataValidationError("hours", "no billable hours in the year")

        margin = 1 - tax.effective_rate - expenses
        if margin <= ZERO:
            raise DataValidationError(
                "expense_rate", "taxes and expenses leave no income to keep"
            )

        gross_needed = target_income / margin
        min_hourly_rate = gross_needed / billable_hours
        recommended_rate = min_hourly_rate * self.params.recommended_markup

        return HourlyRateResult(
            target_income=target_income,
            total_tax=tax.total_tax,
            effective_tax_rate=tax.effective_rate,
            billable_hours=billable_hours,
            gross_needed=gross_needed,
            break_even_rate=target_income / billable_hours,
            min_hourly_rate=min_hourly_rate,
            recommended_rate=recommended_rate,
            annual_at_recommended=recommended_rate * billable_hours,
        )
