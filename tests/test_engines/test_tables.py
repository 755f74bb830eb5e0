"""Tests for the configured rate tables and their lookups."""

from decimal import Decimal

import pytest

from estimators.engines.tables import (
    FEDERAL_BRACKETS,
    INJURY_TYPES,
    QUARTERLY_DEADLINES,
    SE_TAX_PARAMS,
    SETTLEMENT_PARAMS,
    W2_FICA_PARAMS,
    get_federal_brackets,
    get_pay_frequency,
    get_quarterly_deadlines,
    get_se_tax_params,
    get_severity_multiplier,
    get_w2_fica_params,
)
from estimators.engines.tax import validate_brackets
from estimators.exceptions import (
    TaxYearNotSupportedError,
    UnknownPayFrequencyError,
    UnknownSeverityError,
)
from estimators.models.enums import PayFrequency, Severity


class TestFederalBrackets:
    @pytest.mark.parametrize("year", sorted(FEDERAL_BRACKETS))
    def test_tables_are_contiguous(self, year):
        validate_brackets(FEDERAL_BRACKETS[year])

    def test_rates_increase(self):
        for brackets in FEDERAL_BRACKETS.values():
            rates = [b.rate for b in brackets]
            assert rates == sorted(rates)

    def test_first_bracket_width(self):
        assert FEDERAL_BRACKETS[2025][0].width == Decimal("11925")
        assert FEDERAL_BRACKETS[2025][-1].width is None


class TestPayrollParams:
    def test_w2_params_derived_from_se(self):
        se = SE_TAX_PARAMS[2025]
        w2 = W2_FICA_PARAMS[2025]
        assert w2.social_security_rate == se.social_security_rate / 2
        assert w2.medicare_rate == se.medicare_rate / 2
        assert w2.social_security_wage_base == se.social_security_wage_base
        assert w2.net_earnings_multiplier == Decimal("1")
        assert w2.se_tax_deduction_rate == Decimal("0")

    def test_years_line_up(self):
        assert set(SE_TAX_PARAMS) == set(FEDERAL_BRACKETS) == set(QUARTERLY_DEADLINES)

    @pytest.mark.parametrize(
        "lookup",
        [get_federal_brackets, get_se_tax_params, get_w2_fica_params, get_quarterly_deadlines],
    )
    def test_unsupported_year(self, lookup):
        with pytest.raises(TaxYearNotSupportedError) as exc_info:
            lookup(1999)
        assert exc_info.value.year == 1999


class TestSeverityMultipliers:
    def test_min_avg_max_ordered(self):
        for multiplier in SETTLEMENT_PARAMS.multipliers.values():
            assert multiplier.min <= multiplier.avg <= multiplier.max

    def test_strictly_increasing_by_severity(self):
        ordered = [SETTLEMENT_PARAMS.multipliers[s] for s in Severity]
        for lower, higher in zip(ordered, ordered[1:]):
            assert lower.min < higher.min
            assert lower.avg < higher.avg
            assert lower.max < higher.max

    def test_lookup_by_name(self):
        assert get_severity_multiplier("severe").avg == Decimal("7")

    def test_unknown_severity(self):
        with pytest.raises(UnknownSeverityError) as exc_info:
            get_severity_multiplier("extreme")
        assert exc_info.value.severity == "extreme"

    def test_fee_rates(self):
        assert SETTLEMENT_PARAMS.attorney_fee_rate == Decimal("0.33")
        assert SETTLEMENT_PARAMS.post_trial_fee_rate == Decimal("0.40")


class TestInjuryTypes:
    def test_ranges_are_ordered(self):
        for profile in INJURY_TYPES.values():
            assert profile.settlement_min < profile.settlement_max

    def test_keys_match_profiles(self):
        for key, profile in INJURY_TYPES.items():
            assert key == profile.key


class TestQuarterlyDeadlines:
    @pytest.mark.parametrize("year", sorted(QUARTERLY_DEADLINES))
    def test_four_quarters_in_order(self, year):
        deadlines = QUARTERLY_DEADLINES[year]
        assert [d.quarter for d in deadlines] == [1, 2, 3, 4]
        dates = [d.due_date for d in deadlines]
        assert dates == sorted(dates)
        assert dates[-1].year == year + 1


class TestPayFrequencies:
    @pytest.mark.parametrize(
        ("frequency", "periods"),
        [("weekly", 52), ("biweekly", 26), ("semimonthly", 24), ("monthly", 12)],
    )
    def test_periods(self, frequency, periods):
        assert get_pay_frequency(frequency).periods == periods

    def test_enum_lookup(self):
        assert get_pay_frequency(PayFrequency.BIWEEKLY).label == "Bi-weekly"

    def test_unknown(self):
        with pytest.raises(UnknownPayFrequencyError):
            get_pay_frequency("daily")
