"""Side-by-side comparisons: W-2 vs 1099, LLC vs S-Corp."""

import logging
from decimal import Decimal

from estimators.engines.tax import TaxEngine
from estimators.models.results import EntityComparison, IncomeComparison

logger = logging.getLogger(__name__)


class ComparisonEngine:
    def __init__(self, tax_engine: TaxEngine) -> None:
        self.tax_engine = tax_engine

    def compare_w2_vs_1099(self, gross_income: Decimal) -> IncomeComparison:
        """Same gross paid as W-2 salary vs as 1099 contract income.

        ``break_even_rate`` is the 1099 rate, as a percentage of the W-2
        salary, at which take-home pay would match.
        """
        w2 = self.tax_engine.compute_w2_tax(gross_income)
        contractor = self.tax_engine.compute_se_tax(gross_income)
        difference = w2.net_income - contractor.net_income

        if gross_income > 0:
            break_even_rate = (gross_income + difference) / gross_income * 100
        else:
            break_even_rate = Decimal("0")

        return IncomeComparison(
            gross_income=gross_income,
            w2=w2,
            contractor=contractor,
            difference=difference,
            break_even_rate=break_even_rate,
        )

    def compare_llc_vs_scorp(
        self, income: Decimal, salary: Decimal | None = None
    ) -> EntityComparison:
        """Single-member LLC (SE tax on everything) vs S-Corp election.

        Without a salary, the S-Corp side uses the default reasonable-salary
        share of income. The election is worth it only when the tax saved
        exceeds the S-Corp's fixed annual cost.
        """
        if salary is None:
            salary = self.tax_engine.default_scorp_salary(income)
            logger.debug("Using default S-Corp salary %s", salary)

        llc = self.tax_engine.compute_se_tax(income)
        s_corp = self.tax_engine.compute_scorp_tax(income, salary)
        savings = llc.total_tax - s_corp.total_tax

        return EntityComparison(
            income=income,
            llc=llc,
            s_corp=s_corp,
            savings=savings,
            scorp_worth_it=savings > s_corp.fixed_cost,
        )
