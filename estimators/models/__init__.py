"""Data models for the estimator suite."""

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
from estimators.models.enums import (
    EntityType,
    IncomeType,
    PayFrequency,
    QuarterStatus,
    Severity,
)
from estimators.models.results import (
    EntityComparison,
    HourlyRateResult,
    IncomeComparison,
    InsuranceClaimResult,
    PaycheckResult,
    PayrollTaxResult,
    QuarterlyEstimate,
    QuarterScheduleLine,
    SCorpTaxResult,
    SettlementRange,
    SettlementResult,
)

__all__ = [
    "EntityComparison",
    "EntityType",
    "HourlyRateParams",
    "HourlyRateResult",
    "IncomeComparison",
    "IncomeType",
    "InjuryTypeProfile",
    "InsuranceClaimResult",
    "PayFrequency",
    "PayFrequencyConfig",
    "PaycheckResult",
    "PayrollTaxResult",
    "QuarterDeadline",
    "QuarterlyEstimate",
    "QuarterScheduleLine",
    "QuarterStatus",
    "SCorpParams",
    "SCorpTaxResult",
    "SelfEmploymentTaxParams",
    "SettlementParams",
    "SettlementRange",
    "SettlementResult",
    "Severity",
    "SeverityMultiplier",
    "TaxBracket",
]
