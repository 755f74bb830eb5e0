"""Quarterly estimated-tax planner (Form 1040-ES).

The only date-dependent calculation in the suite. "Today" comes from an
injected clock so everything else stays deterministic.

Quarter status follows the tax year's own due dates, not the calendar: a
payment is outstanding until the end of its due date, so from June 17 the
Q2 payment is past and Q3 is current.
"""

import logging
from collections.abc import Callable
from datetime import date
from decimal import ROUND_CEILING, Decimal

from estimators.engines.tables import DEFAULT_TAX_YEAR, get_quarterly_deadlines
from estimators.engines.tax import TaxEngine
from estimators.exceptions import DataValidationError
from estimators.models.config import QuarterDeadline
from estimators.models.enums import QuarterStatus
from estimators.models.results import QuarterlyEstimate, QuarterScheduleLine

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


class QuarterlyTaxEstimator:
    """Splits the year's self-employment tax over the payments still due."""

    def __init__(
        self,
        tax_engine: TaxEngine | None = None,
        tax_year: int = DEFAULT_TAX_YEAR,
        clock: Clock = date.today,
    ) -> None:
        self.tax_engine = tax_engine or TaxEngine.for_year(tax_year)
        self.tax_year = tax_year
        self.clock = clock

    def pending_deadlines(self, today: date | None = None) -> list[QuarterDeadline]:
        """Deadlines on or after ``today``, earliest first.

        Raises:
            DataValidationError: if every payment for the tax year is
                already past due.
        """
        if today is None:
            today = self.clock()
        pending = [d for d in get_quarterly_deadlines(self.tax_year) if d.due_date >= today]
        if not pending:
            raise DataValidationError(
                "as_of",
                f"all {self.tax_year} estimated payments were due before {today.isoformat()}",
            )
        return pending

    def current_quarter(self) -> int:
        """Quarter whose payment is due next."""
        return self.pending_deadlines()[0].quarter

    def remaining_quarters(self) -> int:
        """Payments still due this tax year, including the next one."""
        return len(self.pending_deadlines())

    def schedule(self, today: date | None = None) -> list[QuarterScheduleLine]:
        if today is None:
            today = self.clock()
        next_due = self.pending_deadlines(today)[0]
        lines = []
        for deadline in get_quarterly_deadlines(self.tax_year):
            if deadline.due_date < today:
                status = QuarterStatus.PAST
            elif deadline == next_due:
                status = QuarterStatus.CURRENT
            else:
                status = QuarterStatus.UPCOMING
            lines.append(
                QuarterScheduleLine(
                    quarter=deadline.quarter,
                    period=deadline.period,
                    due_date=deadline.due_date,
                    status=status,
                )
            )
        return lines

    def estimate(
        self, gross_income: Decimal, already_paid: Decimal = Decimal("0")
    ) -> QuarterlyEstimate:
        today = self.clock()
        pending = self.pending_deadlines(today)
        next_due = pending[0]
        remaining_quarters = len(pending)

        tax = self.tax_engine.compute_se_tax(gross_income)
        remaining_tax = max(tax.total_tax - already_paid, Decimal("0"))
        remaining_payment = (remaining_tax / remaining_quarters).to_integral_value(
            rounding=ROUND_CEILING
        )

        logger.debug(
            "Quarterly estimate as of %s: Q%d due %s, %d left, remaining tax %s",
            today, next_due.quarter, next_due.due_date, remaining_quarters, remaining_tax,
        )

        return QuarterlyEstimate(
            as_of=today,
            current_quarter=next_due.quarter,
            remaining_quarters=remaining_quarters,
            next_deadline=next_due.due_date,
            total_tax=tax.total_tax,
            quarterly_payment=tax.quarterly_payment,
            already_paid=already_paid,
            remaining_tax=remaining_tax,
            remaining_payment=remaining_payment,
            schedule=self.schedule(today),
        )
