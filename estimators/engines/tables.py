"""Rate tables and fixed parameters.

Federal brackets, payroll-tax parameters, settlement multipliers and the
injury guide. Keyed by tax year where the value changes yearly. Never
hardcode rates in computation functions; pass one of these in.

Sources:
  - 2024: IRS Rev. Proc. 2023-34, SSA wage base announcement (168,600)
  - 2025: IRS Rev. Proc. 2024-40, SSA wage base announcement (176,100)
"""

from datetime import date
from decimal import Decimal

from estimators.exceptions import (
    TaxYearNotSupportedError,
    UnknownPayFrequencyError,
    UnknownSeverityError,
)
from estimators.models.config import (
    HourlyRateParams,
    InjuryTypeProfile,
    PayFrequencyConfig,
    QuarterDeadline,
    SCorpParams,
    SelfEmploymentTaxParams,
    SettlementParams,
    SeverityMultiplier,
    TaxBracket,
)
from estimators.models.enums import PayFrequency, Severity

DEFAULT_TAX_YEAR = 2025


def _brackets(rows: list[tuple[Decimal | None, Decimal]]) -> tuple[TaxBracket, ...]:
    """Build a contiguous bracket table from (upper_bound, rate) rows."""
    table = []
    lower = Decimal("0")
    for upper, rate in rows:
        table.append(TaxBracket(lower_bound=lower, upper_bound=upper, rate=rate))
        if upper is not None:
            lower = upper
    return tuple(table)


# ---------------------------------------------------------------------------
# Federal ordinary income brackets, single filer: {year: (TaxBracket, ...)}
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, tuple[TaxBracket, ...]] = {
    2024: _brackets([
        (Decimal("11600"), Decimal("0.10")),
        (Decimal("47150"), Decimal("0.12")),
        (Decimal("100525"), Decimal("0.22")),
        (Decimal("191950"), Decimal("0.24")),
        (Decimal("243725"), Decimal("0.32")),
        (Decimal("609350"), Decimal("0.35")),
        (None, Decimal("0.37")),
    ]),
    2025: _brackets([
        (Decimal("11925"), Decimal("0.10")),
        (Decimal("48475"), Decimal("0.12")),
        (Decimal("103350"), Decimal("0.22")),
        (Decimal("197300"), Decimal("0.24")),
        (Decimal("250525"), Decimal("0.32")),
        (Decimal("626350"), Decimal("0.35")),
        (None, Decimal("0.37")),
    ]),
}

# ---------------------------------------------------------------------------
# Self-employment tax (Schedule SE). Additional Medicare threshold is
# statutory, not inflation-adjusted.
# ---------------------------------------------------------------------------
SE_TAX_PARAMS: dict[int, SelfEmploymentTaxParams] = {
    2024: SelfEmploymentTaxParams(
        social_security_rate=Decimal("0.124"),
        social_security_wage_base=Decimal("168600"),
        medicare_rate=Decimal("0.029"),
        additional_medicare_rate=Decimal("0.009"),
        additional_medicare_threshold=Decimal("200000"),
        net_earnings_multiplier=Decimal("0.9235"),
        se_tax_deduction_rate=Decimal("0.5"),
        standard_deduction=Decimal("14600"),
    ),
    2025: SelfEmploymentTaxParams(
        social_security_rate=Decimal("0.124"),
        social_security_wage_base=Decimal("176100"),
        medicare_rate=Decimal("0.029"),
        additional_medicare_rate=Decimal("0.009"),
        additional_medicare_threshold=Decimal("200000"),
        net_earnings_multiplier=Decimal("0.9235"),
        se_tax_deduction_rate=Decimal("0.5"),
        standard_deduction=Decimal("15000"),
    ),
}

# ---------------------------------------------------------------------------
# W-2 employee FICA: employee share only, no net-earnings multiplier,
# no SE deduction.
# ---------------------------------------------------------------------------
W2_FICA_PARAMS: dict[int, SelfEmploymentTaxParams] = {
    year: se.model_copy(update={
        "social_security_rate": Decimal("0.062"),
        "medicare_rate": Decimal("0.0145"),
        "net_earnings_multiplier": Decimal("1"),
        "se_tax_deduction_rate": Decimal("0"),
    })
    for year, se in SE_TAX_PARAMS.items()
}

# ---------------------------------------------------------------------------
# S-Corp: FICA on reasonable salary only (7.65% each side) plus a flat
# payroll/accounting cost. Salary defaults to 40% of net income.
# ---------------------------------------------------------------------------
SCORP_PARAMS = SCorpParams(
    employee_fica_rate=Decimal("0.0765"),
    employer_fica_rate=Decimal("0.0765"),
    fixed_annual_cost=Decimal("3000"),
    min_salary_share=Decimal("0.40"),
)

# ---------------------------------------------------------------------------
# Personal-injury settlement
# ---------------------------------------------------------------------------
SETTLEMENT_PARAMS = SettlementParams(
    multipliers={
        # Soft tissue, bruises, minor whiplash
        Severity.MINOR: SeverityMultiplier(
            min=Decimal("1.5"), avg=Decimal("2"), max=Decimal("3")
        ),
        # Fractures, sprains
        Severity.MODERATE: SeverityMultiplier(
            min=Decimal("3"), avg=Decimal("4"), max=Decimal("5")
        ),
        # Surgery required, long recovery
        Severity.SEVERE: SeverityMultiplier(
            min=Decimal("5"), avg=Decimal("7"), max=Decimal("10")
        ),
        # Permanent disability, TBI, paralysis
        Severity.CATASTROPHIC: SeverityMultiplier(
            min=Decimal("10"), avg=Decimal("15"), max=Decimal("25")
        ),
    },
    attorney_fee_rate=Decimal("0.33"),  # settled before trial
    post_trial_fee_rate=Decimal("0.40"),
    insurance_claim_multiplier=Decimal("2"),
)

INJURY_TYPES: dict[str, InjuryTypeProfile] = {
    profile.key: profile
    for profile in [
        InjuryTypeProfile(
            key="whiplash",
            name="Whiplash",
            severity=Severity.MINOR,
            settlement_min=Decimal("10000"),
            settlement_max=Decimal("30000"),
            recovery_time="2-6 weeks",
            description="Neck strain from sudden movement, common in rear-end collisions",
        ),
        InjuryTypeProfile(
            key="broken_bone",
            name="Broken Bone / Fracture",
            severity=Severity.MODERATE,
            settlement_min=Decimal("25000"),
            settlement_max=Decimal("100000"),
            recovery_time="6-12 weeks",
            description="Bone fracture requiring cast, splint, or surgery",
        ),
        InjuryTypeProfile(
            key="back_injury",
            name="Back / Spine Injury",
            severity=Severity.SEVERE,
            settlement_min=Decimal("50000"),
            settlement_max=Decimal("250000"),
            recovery_time="3-12 months",
            description="Herniated disc, spinal damage, or chronic back pain",
        ),
        InjuryTypeProfile(
            key="tbi",
            name="Traumatic Brain Injury (TBI)",
            severity=Severity.CATASTROPHIC,
            settlement_min=Decimal("100000"),
            settlement_max=Decimal("1000000"),
            recovery_time="Months to permanent",
            description="Concussion, brain damage, cognitive impairment",
        ),
        InjuryTypeProfile(
            key="spinal_cord",
            name="Spinal Cord Injury",
            severity=Severity.CATASTROPHIC,
            settlement_min=Decimal("500000"),
            settlement_max=Decimal("5000000"),
            recovery_time="Permanent",
            description="Paralysis, loss of motor function",
        ),
        InjuryTypeProfile(
            key="soft_tissue",
            name="Soft Tissue Injury",
            severity=Severity.MINOR,
            settlement_min=Decimal("5000"),
            settlement_max=Decimal("20000"),
            recovery_time="1-4 weeks",
            description="Bruises, sprains, strains, minor cuts",
        ),
        InjuryTypeProfile(
            key="burns",
            name="Burns",
            severity=Severity.SEVERE,
            settlement_min=Decimal("30000"),
            settlement_max=Decimal("200000"),
            recovery_time="Weeks to months",
            description="First, second, or third-degree burns",
        ),
        InjuryTypeProfile(
            key="internal_injury",
            name="Internal Injuries",
            severity=Severity.SEVERE,
            settlement_min=Decimal("75000"),
            settlement_max=Decimal("300000"),
            recovery_time="1-6 months",
            description="Organ damage, internal bleeding",
        ),
    ]
}

# ---------------------------------------------------------------------------
# Estimated-tax (Form 1040-ES) payment deadlines
# ---------------------------------------------------------------------------
QUARTERLY_DEADLINES: dict[int, tuple[QuarterDeadline, ...]] = {
    2024: (
        QuarterDeadline(quarter=1, period="Jan 1 - Mar 31", due_date=date(2024, 4, 15)),
        QuarterDeadline(quarter=2, period="Apr 1 - May 31", due_date=date(2024, 6, 17)),
        QuarterDeadline(quarter=3, period="Jun 1 - Aug 31", due_date=date(2024, 9, 16)),
        QuarterDeadline(quarter=4, period="Sep 1 - Dec 31", due_date=date(2025, 1, 15)),
    ),
    2025: (
        QuarterDeadline(quarter=1, period="Jan 1 - Mar 31", due_date=date(2025, 4, 15)),
        QuarterDeadline(quarter=2, period="Apr 1 - May 31", due_date=date(2025, 6, 16)),
        QuarterDeadline(quarter=3, period="Jun 1 - Aug 31", due_date=date(2025, 9, 15)),
        QuarterDeadline(quarter=4, period="Sep 1 - Dec 31", due_date=date(2026, 1, 15)),
    ),
}

PAY_FREQUENCIES: dict[PayFrequency, PayFrequencyConfig] = {
    PayFrequency.WEEKLY: PayFrequencyConfig(
        frequency=PayFrequency.WEEKLY, label="Weekly", periods=52
    ),
    PayFrequency.BIWEEKLY: PayFrequencyConfig(
        frequency=PayFrequency.BIWEEKLY, label="Bi-weekly", periods=26
    ),
    PayFrequency.SEMIMONTHLY: PayFrequencyConfig(
        frequency=PayFrequency.SEMIMONTHLY, label="Semi-monthly", periods=24
    ),
    PayFrequency.MONTHLY: PayFrequencyConfig(
        frequency=PayFrequency.MONTHLY, label="Monthly", periods=12
    ),
}

HOURLY_RATE_DEFAULTS = HourlyRateParams()


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_federal_brackets(tax_year: int) -> tuple[TaxBracket, ...]:
    brackets = FEDERAL_BRACKETS.get(tax_year)
    if brackets is None:
        raise TaxYearNotSupportedError(tax_year, "federal brackets")
    return brackets


def get_se_tax_params(tax_year: int) -> SelfEmploymentTaxParams:
    params = SE_TAX_PARAMS.get(tax_year)
    if params is None:
        raise TaxYearNotSupportedError(tax_year, "self-employment tax parameters")
    return params


def get_w2_fica_params(tax_year: int) -> SelfEmploymentTaxParams:
    params = W2_FICA_PARAMS.get(tax_year)
    if params is None:
        raise TaxYearNotSupportedError(tax_year, "W-2 FICA parameters")
    return params


def get_quarterly_deadlines(tax_year: int) -> tuple[QuarterDeadline, ...]:
    deadlines = QUARTERLY_DEADLINES.get(tax_year)
    if deadlines is None:
        raise TaxYearNotSupportedError(tax_year, "quarterly deadlines")
    return deadlines


def get_severity_multiplier(
    severity: Severity | str, params: SettlementParams = SETTLEMENT_PARAMS
) -> SeverityMultiplier:
    try:
        return params.multipliers[Severity(severity)]
    except (KeyError, ValueError):
        raise UnknownSeverityError(str(severity)) from None


def get_pay_frequency(frequency: PayFrequency | str) -> PayFrequencyConfig:
    try:
        return PAY_FREQUENCIES[PayFrequency(frequency)]
    except (KeyError, ValueError):
        raise UnknownPayFrequencyError(str(frequency)) from None
