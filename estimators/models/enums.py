"""Enumerations for the estimator suite."""

from enum import StrEnum


class Severity(StrEnum):
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    CATASTROPHIC = "catastrophic"

    @property
    def rank(self) -> int:
        return list(Severity).index(self)

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Injury"


class PayFrequency(StrEnum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"


class QuarterStatus(StrEnum):
    PAST = "PAST"
    CURRENT = "CURRENT"
    UPCOMING = "UPCOMING"


class IncomeType(StrEnum):
    W2 = "W2"
    CONTRACTOR = "1099"


class EntityType(StrEnum):
    LLC = "LLC"
    S_CORP = "S_CORP"
