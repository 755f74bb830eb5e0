"""Immutable configuration models: bracket tables, payroll-tax parameters,
settlement multipliers.

Every calculator receives one of these explicitly. A new tax year or a
variant (W-2 employee FICA, S-Corp payroll) is a different instance, never a
mutation of an existing one; use ``model_copy(update=...)`` to derive one.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from estimators.models.enums import PayFrequency, Severity


class TaxBracket(BaseModel):
    """One marginal bracket. ``upper_bound`` of None means unbounded."""

    model_config = ConfigDict(frozen=True)

    lower_bound: Decimal = Field(ge=0)
    upper_bound: Decimal | None = None
    rate: Decimal = Field(ge=0)

    @property
    def width(self) -> Decimal | None:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound


class SelfEmploymentTaxParams(BaseModel):
    """Payroll-tax parameters.

    The self-employed parameter set uses the combined employer+employee rates,
    a net-earnings multiplier of 0.9235 and deducts half of the SE tax. The
    W-2 employee variant uses the employee-only rates with a multiplier of 1
    and a deduction rate of 0.
    """

    model_config = ConfigDict(frozen=True)

    social_security_rate: Decimal
    social_security_wage_base: Decimal
    medicare_rate: Decimal
    additional_medicare_rate: Decimal
    additional_medicare_threshold: Decimal
    net_earnings_multiplier: Decimal = Decimal("1")
    se_tax_deduction_rate: Decimal = Decimal("0")
    standard_deduction: Decimal


class SCorpParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    employee_fica_rate: Decimal
    employer_fica_rate: Decimal
    fixed_annual_cost: Decimal
    min_salary_share: Decimal


class SeverityMultiplier(BaseModel):
    """Pain-and-suffering multipliers for one severity category."""

    model_config = ConfigDict(frozen=True)

    min: Decimal
    avg: Decimal
    max: Decimal


class SettlementParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    multipliers: dict[Severity, SeverityMultiplier]
    attorney_fee_rate: Decimal
    post_trial_fee_rate: Decimal
    insurance_claim_multiplier: Decimal


class InjuryTypeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    severity: Severity
    settlement_min: Decimal
    settlement_max: Decimal
    recovery_time: str
    description: str


class QuarterDeadline(BaseModel):
    model_config = ConfigDict(frozen=True)

    quarter: int = Field(ge=1, le=4)
    period: str
    due_date: date


class PayFrequencyConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    frequency: PayFrequency
    label: str
    periods: int = Field(gt=0)


class HourlyRateParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    weeks_per_year: int = 48
    hours_per_week: int = 40
    expense_rate: Decimal = Decimal("0.10")
    utilization_rate: Decimal = Decimal("0.75")
    recommended_markup: Decimal = Decimal("1.2")
