"""W-2 take-home pay per pay period."""

from decimal import Decimal

from estimators.engines.tables import get_pay_frequency
from estimators.engines.tax import TaxEngine
from estimators.models.enums import PayFrequency
from estimators.models.results import PaycheckResult


class PaycheckEngine:
    """Spreads annual employee FICA and federal income tax over pay periods."""

    def __init__(self, tax_engine: TaxEngine) -> None:
        self.tax_engine = tax_engine

    def compute(self, annual_salary: Decimal, frequency: PayFrequency | str) -> PaycheckResult:
        periods = get_pay_frequency(frequency).periods
        annual = self.tax_engine.compute_w2_tax(annual_salary)

        gross_pay = annual_salary / periods
        social_security = annual.social_security_tax / periods
        medicare = (annual.medicare_tax + annual.additional_medicare_tax) / periods
        federal_tax = annual.federal_tax / periods
        total_deductions = social_security + medicare + federal_tax
        net_pay = gross_pay - total_deductions

        return PaycheckResult(
            annual_salary=annual_salary,
            pay_periods=periods,
            gross_pay=gross_pay,
            social_security=social_security,
            medicare=medicare,
            federal_tax=federal_tax,
            total_deductions=total_deductions,
            net_pay=net_pay,
            annual_net=net_pay * periods,
            effective_rate=annual.effective_rate,
        )
