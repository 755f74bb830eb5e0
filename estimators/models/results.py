"""Calculator output models.

Amounts are carried unrounded; rounding to whole dollars happens at
presentation time (see ``estimators.formatting``).
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from estimators.models.enums import EntityType, IncomeType, QuarterStatus, Severity


class PayrollTaxResult(BaseModel):
    """Result of the payroll + federal income tax calculation.

    Produced for both self-employment income and W-2 salary; for W-2 the
    ``se_deduction`` is zero and ``net_earnings`` equals gross income.
    """

    gross_income: Decimal
    net_earnings: Decimal
    social_security_tax: Decimal
    medicare_tax: Decimal
    additional_medicare_tax: Decimal
    total_se_tax: Decimal
    se_deduction: Decimal
    taxable_income: Decimal
    federal_tax: Decimal
    total_tax: Decimal
    quarterly_payment: Decimal
    effective_rate: Decimal

    @property
    def net_income(self) -> Decimal:
        return self.gross_income - self.total_tax


class SettlementRange(BaseModel):
    min: Decimal
    max: Decimal


class SettlementResult(BaseModel):
    medical_expenses: Decimal
    lost_wages: Decimal
    other_damages: Decimal
    severity: Severity
    has_attorney: bool
    fault_percent: Decimal
    pain_suffering_multiplier: Decimal
    pain_suffering: Decimal
    subtotal: Decimal
    adjusted_total: Decimal
    attorney_fees: Decimal
    net_settlement: Decimal
    range: SettlementRange

    @property
    def economic_damages(self) -> Decimal:
        return self.medical_expenses + self.lost_wages + self.other_damages

    @property
    def fault_reduction(self) -> Decimal:
        return self.subtotal - self.adjusted_total


class InsuranceClaimResult(BaseModel):
    vehicle_damage: Decimal
    medical_expenses: Decimal
    lost_wages: Decimal
    pain_suffering: Decimal
    total_claim: Decimal
    policy_limit: Decimal
    expected_payout: Decimal

    @property
    def exceeds_policy_limit(self) -> bool:
        return self.total_claim > self.policy_limit

    @property
    def uncovered_amount(self) -> Decimal:
        return max(self.total_claim - self.policy_limit, Decimal("0"))


class HourlyRateResult(BaseModel):
    target_income: Decimal
    total_tax: Decimal
    effective_tax_rate: Decimal
    billable_hours: Decimal
    gross_needed: Decimal
    break_even_rate: Decimal
    min_hourly_rate: Decimal
    recommended_rate: Decimal
    annual_at_recommended: Decimal


class PaycheckResult(BaseModel):
    annual_salary: Decimal
    pay_periods: int
    gross_pay: Decimal
    social_security: Decimal
    medicare: Decimal
    federal_tax: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    annual_net: Decimal
    effective_rate: Decimal


class QuarterScheduleLine(BaseModel):
    quarter: int
    period: str
    due_date: date
    status: QuarterStatus


class QuarterlyEstimate(BaseModel):
    as_of: date
    current_quarter: int
    remaining_quarters: int
    next_deadline: date | None
    total_tax: Decimal
    quarterly_payment: Decimal
    already_paid: Decimal
    remaining_tax: Decimal
    remaining_payment: Decimal
    schedule: list[QuarterScheduleLine]


class IncomeComparison(BaseModel):
    """W-2 salary vs 1099 contract income at the same gross amount."""

    gross_income: Decimal
    w2: PayrollTaxResult
    contractor: PayrollTaxResult
    difference: Decimal
    break_even_rate: Decimal

    @property
    def advantage(self) -> IncomeType:
        return IncomeType.W2 if self.difference > 0 else IncomeType.CONTRACTOR


class SCorpTaxResult(BaseModel):
    income: Decimal
    salary: Decimal
    distribution: Decimal
    employee_fica: Decimal
    employer_fica: Decimal
    total_fica: Decimal
    taxable_income: Decimal
    federal_tax: Decimal
    fixed_cost: Decimal
    total_tax: Decimal
    net_income: Decimal


class EntityComparison(BaseModel):
    income: Decimal
    llc: PayrollTaxResult
    s_corp: SCorpTaxResult
    savings: Decimal
    scorp_worth_it: bool

    @property
    def better_entity(self) -> EntityType:
        return EntityType.S_CORP if self.savings > 0 else EntityType.LLC
