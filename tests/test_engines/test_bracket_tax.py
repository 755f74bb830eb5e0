"""Tests for the progressive bracket evaluator and bracket-table validation.

Expected values are hand-computed from the 2025 single-filer table
(IRS Rev. Proc. 2024-40).
"""

from decimal import Decimal

import pytest

from estimators.engines.tables import FEDERAL_BRACKETS
from estimators.engines.tax import compute_bracket_tax, effective_rate, validate_brackets
from estimators.exceptions import InvalidBracketTableError
from estimators.models.config import TaxBracket

BRACKETS_2025 = FEDERAL_BRACKETS[2025]


def _table(*rows: tuple[str, str | None, str]) -> tuple[TaxBracket, ...]:
    return tuple(
        TaxBracket(
            lower_bound=Decimal(lower),
            upper_bound=Decimal(upper) if upper is not None else None,
            rate=Decimal(rate),
        )
        for lower, upper, rate in rows
    )


class TestComputeBracketTax:
    def test_zero_income(self):
        assert compute_bracket_tax(Decimal("0"), BRACKETS_2025) == Decimal("0")

    def test_zero_income_any_table(self):
        for brackets in FEDERAL_BRACKETS.values():
            assert compute_bracket_tax(Decimal("0"), brackets) == Decimal("0")

    def test_within_first_bracket(self):
        """$10,000 sits entirely in the 10% bracket."""
        tax = compute_bracket_tax(Decimal("10000"), BRACKETS_2025)
        assert tax == Decimal("10000") * BRACKETS_2025[0].rate
        assert tax == Decimal("1000.00")

    def test_top_of_first_bracket(self):
        assert compute_bracket_tax(Decimal("11925"), BRACKETS_2025) == Decimal("1192.50")

    def test_spans_three_brackets(self):
        """$50,000: 1,192.50 + 36,550 x 12% + 1,525 x 22% = 5,914.00."""
        assert compute_bracket_tax(Decimal("50000"), BRACKETS_2025) == Decimal("5914.00")

    def test_income_above_top_bound(self):
        """$1M consumes every bounded bracket and 373,650 at 37%."""
        tax = compute_bracket_tax(Decimal("1000000"), BRACKETS_2025)
        assert tax == Decimal("327020.25")

    def test_only_slice_taxed_at_marginal_rate(self):
        """Crossing into the 22% bracket by $1 adds only $0.22."""
        at_bound = compute_bracket_tax(Decimal("48475"), BRACKETS_2025)
        above = compute_bracket_tax(Decimal("48476"), BRACKETS_2025)
        assert above - at_bound == Decimal("0.22")

    def test_monotonically_non_decreasing(self):
        incomes = [Decimal(n) for n in range(0, 1_000_001, 7_919)]
        taxes = [compute_bracket_tax(i, BRACKETS_2025) for i in incomes]
        assert taxes == sorted(taxes)

    def test_substituted_table(self):
        """Any table can be passed in: 1,000 at 10% + 500 at 20%."""
        brackets = _table(("0", "1000", "0.10"), ("1000", None, "0.20"))
        assert compute_bracket_tax(Decimal("1500"), brackets) == Decimal("200.00")

    def test_fractional_income(self):
        assert compute_bracket_tax(Decimal("100.50"), BRACKETS_2025) == Decimal("10.050")


class TestValidateBrackets:
    def test_configured_tables_are_valid(self):
        for brackets in FEDERAL_BRACKETS.values():
            validate_brackets(brackets)

    def test_empty_table(self):
        with pytest.raises(InvalidBracketTableError):
            validate_brackets(())

    def test_must_start_at_zero(self):
        with pytest.raises(InvalidBracketTableError, match="expected 0"):
            validate_brackets(_table(("100", None, "0.10")))

    def test_gap_between_brackets(self):
        brackets = _table(("0", "1000", "0.10"), ("1500", None, "0.20"))
        with pytest.raises(InvalidBracketTableError, match="gap or overlap"):
            validate_brackets(brackets)

    def test_bounded_top_bracket(self):
        brackets = _table(("0", "1000", "0.10"), ("1000", "2000", "0.20"))
        with pytest.raises(InvalidBracketTableError, match="unbounded"):
            validate_brackets(brackets)

    def test_unbounded_middle_bracket(self):
        brackets = _table(("0", None, "0.10"), ("1000", None, "0.20"))
        with pytest.raises(InvalidBracketTableError):
            validate_brackets(brackets)


class TestEffectiveRate:
    def test_zero_income_yields_zero(self):
        assert effective_rate(Decimal("500"), Decimal("0")) == Decimal("0")

    def test_ratio(self):
        assert effective_rate(Decimal("25000"), Decimal("100000")) == Decimal("0.25")
