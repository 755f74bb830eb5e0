"""Tests for the hourly-rate, paycheck and comparison engines."""

from decimal import Decimal

import pytest

from estimators.engines.comparison import ComparisonEngine
from estimators.engines.hourly import HourlyRateEngine
from estimators.engines.paycheck import PaycheckEngine
from estimators.exceptions import DataValidationError, UnknownPayFrequencyError
from estimators.formatting import round_cents, round_currency
from estimators.models.config import HourlyRateParams
from estimators.models.enums import EntityType, IncomeType, PayFrequency


class TestHourlyRate:
    def test_defaults(self, tax_engine):
        """48 weeks x 40 h x 75% = 1,440 billable hours."""
        result = HourlyRateEngine(tax_engine).compute(Decimal("100000"))
        assert result.billable_hours == Decimal("1440")
        assert result.effective_tax_rate == Decimal("0.261892995")
        assert round_currency(result.break_even_rate) == Decimal("69")
        assert round_currency(result.min_hourly_rate) == Decimal("109")
        assert round_currency(result.recommended_rate) == Decimal("131")

    def test_gross_needed_covers_tax_and_expenses(self, tax_engine):
        result = HourlyRateEngine(tax_engine).compute(Decimal("100000"))
        kept = result.gross_needed * (1 - result.effective_tax_rate - Decimal("0.10"))
        assert round_cents(kept) == Decimal("100000.00")
        assert round_cents(result.annual_at_recommended) == round_cents(
            result.gross_needed * Decimal("1.2")
        )

    def test_custom_schedule(self, tax_engine):
        result = HourlyRateEngine(tax_engine).compute(
            Decimal("100000"), weeks_per_year=50, hours_per_week=30
        )
        assert result.billable_hours == Decimal("1125.00")

    def test_zero_target(self, tax_engine):
        result = HourlyRateEngine(tax_engine).compute(Decimal("0"))
        assert result.effective_tax_rate == Decimal("0")
        assert result.min_hourly_rate == Decimal("0")

    def test_no_billable_hours(self, tax_engine):
        engine = HourlyRateEngine(tax_engine, HourlyRateParams(utilization_rate=Decimal("0")))
        with pytest.raises(DataValidationError):
            engine.compute(Decimal("100000"))

    def test_expenses_consume_revenue(self, tax_engine):
        with pytest.raises(DataValidationError):
            HourlyRateEngine(tax_engine).compute(Decimal("100000"), expense_rate=Decimal("0.9"))

    @pytest.mark.parametrize("field", ["weeks_per_year", "hours_per_week"])
    def test_explicit_zero_is_not_replaced_by_default(self, tax_engine, field):
        with pytest.raises(DataValidationError) as exc_info:
            HourlyRateEngine(tax_engine).compute(Decimal("100000"), **{field: 0})
        assert exc_info.value.field == "hours"

    def test_zero_expense_rate(self, tax_engine):
        result = HourlyRateEngine(tax_engine).compute(Decimal("100000"), expense_rate=Decimal("0"))
        kept = result.gross_needed * (1 - result.effective_tax_rate)
        assert round_cents(kept) == Decimal("100000.00")


class TestPaycheck:
    def test_biweekly(self, tax_engine):
        """$100,000 W-2: annual tax 21,264 spread over 26 periods."""
        result = PaycheckEngine(tax_engine).compute(Decimal("100000"), PayFrequency.BIWEEKLY)
        assert result.pay_periods == 26
        assert round_cents(result.gross_pay) == Decimal("3846.15")
        assert round_cents(result.social_security) == Decimal("238.46")
        assert round_cents(result.federal_tax) == Decimal("523.62")
        assert round_cents(result.net_pay) == Decimal("3028.31")
        assert round_currency(result.annual_net) == Decimal("78736")
        assert result.effective_rate == Decimal("0.21264")

    def test_monthly_by_name(self, tax_engine):
        result = PaycheckEngine(tax_engine).compute(Decimal("100000"), "monthly")
        assert result.pay_periods == 12
        assert round_cents(result.net_pay) == Decimal("6561.33")

    def test_deductions_add_up(self, tax_engine):
        result = PaycheckEngine(tax_engine).compute(Decimal("85000"), PayFrequency.WEEKLY)
        assert result.gross_pay - result.total_deductions == result.net_pay

    def test_unknown_frequency(self, tax_engine):
        with pytest.raises(UnknownPayFrequencyError):
            PaycheckEngine(tax_engine).compute(Decimal("100000"), "fortnightly-ish")


class TestW2Vs1099:
    def test_100k(self, tax_engine):
        """W-2 net 78,736 vs 1099 net 73,810.7005."""
        result = ComparisonEngine(tax_engine).compare_w2_vs_1099(Decimal("100000"))
        assert result.w2.net_income == Decimal("78736.00")
        assert result.contractor.net_income == Decimal("73810.7005")
        assert result.difference == Decimal("4925.2995")
        assert result.advantage == IncomeType.W2
        assert result.break_even_rate == Decimal("104.925299500")

    def test_zero_income_break_even(self, tax_engine):
        result = ComparisonEngine(tax_engine).compare_w2_vs_1099(Decimal("0"))
        assert result.break_even_rate == Decimal("0")


class TestLLCVsSCorp:
    def test_default_salary(self, tax_engine):
        """Savings 26,189.2995 - 22,060.80 = 4,128.4995, above the 3,000 cost."""
        result = ComparisonEngine(tax_engine).compare_llc_vs_scorp(Decimal("100000"))
        assert result.s_corp.salary == Decimal("40000")
        assert result.savings == Decimal("4128.4995")
        assert result.scorp_worth_it
        assert result.better_entity == EntityType.S_CORP

    def test_low_income_favours_llc(self, tax_engine):
        result = ComparisonEngine(tax_engine).compare_llc_vs_scorp(Decimal("30000"))
        assert not result.scorp_worth_it
        assert result.better_entity == EntityType.LLC

    def test_explicit_salary(self, tax_engine):
        result = ComparisonEngine(tax_engine).compare_llc_vs_scorp(
            Decimal("100000"), salary=Decimal("60000")
        )
        assert result.s_corp.salary == Decimal("60000")

    def test_zero_salary_is_used_as_given(self, tax_engine):
        """No salary: no FICA, all 100,000 distributed; 13,614 + 3,000 cost."""
        result = ComparisonEngine(tax_engine).compare_llc_vs_scorp(
            Decimal("100000"), salary=Decimal("0")
        )
        assert result.s_corp.salary == Decimal("0")
        assert result.s_corp.total_fica == Decimal("0")
        assert result.s_corp.distribution == Decimal("100000")
        assert result.s_corp.total_tax == Decimal("16614.00")
