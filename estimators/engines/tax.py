"""Progressive income tax and payroll (SE/FICA) tax engine.

Implements:
  - Marginal bracket accumulation over an explicit bracket table
  - Self-employment tax per Schedule SE (92.35% net earnings, SS wage base,
    Additional Medicare Tax over the threshold, half-SE-tax deduction)
  - W-2 employee FICA as a reparameterisation of the same calculation
  - S-Corp salary/distribution split with FICA on salary only
"""

import logging
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from estimators.engines.tables import (
    DEFAULT_TAX_YEAR,
    SCORP_PARAMS,
    get_federal_brackets,
    get_se_tax_params,
    get_w2_fica_params,
)
from estimators.exceptions import InvalidBracketTableError
from estimators.models.config import SCorpParams, SelfEmploymentTaxParams, TaxBracket
from estimators.models.results import PayrollTaxResult, SCorpTaxResult

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def compute_bracket_tax(taxable_income: Decimal, brackets: tuple[TaxBracket, ...]) -> Decimal:
    """Apply progressive tax brackets to income.

    Only the slice of income inside each bracket is taxed at that bracket's
    rate. The unbounded top bracket absorbs whatever income remains.
    """
    tax = ZERO
    remaining = taxable_income

    for bracket in brackets:
        if remaining <= ZERO:
            break
        width = bracket.width
        in_bracket = remaining if width is None else min(remaining, width)
        tax += in_bracket * bracket.rate
        remaining -= in_bracket

    return tax


def validate_brackets(brackets: tuple[TaxBracket, ...]) -> None:
    """Check that a table starts at 0, is contiguous and ends unbounded."""
    if not brackets:
        raise InvalidBracketTableError("table is empty")
    if brackets[0].lower_bound != ZERO:
        raise InvalidBracketTableError(
            f"first bracket starts at {brackets[0].lower_bound}, expected 0"
        )
    for current, following in zip(brackets, brackets[1:]):
        if current.upper_bound is None:
            raise InvalidBracketTableError("only the last bracket may be unbounded")
        if current.upper_bound <= current.lower_bound:
            raise InvalidBracketTableError(
                f"bracket {current.lower_bound}-{current.upper_bound} is empty or inverted"
            )
        if current.upper_bound != following.lower_bound:
            raise InvalidBracketTableError(
                f"gap or overlap at {current.upper_bound} / {following.lower_bound}"
            )
    if brackets[-1].upper_bound is not None:
        raise InvalidBracketTableError("top bracket must be unbounded")


def effective_rate(tax: Decimal, income: Decimal) -> Decimal:
    """Tax as a fraction of income; 0 when income is 0."""
    if income == ZERO:
        return ZERO
    return tax / income


def compute_payroll_tax(
    gross_income: Decimal,
    params: SelfEmploymentTaxParams,
    brackets: tuple[TaxBracket, ...],
) -> PayrollTaxResult:
    """Payroll tax + federal income tax for one parameter set.

    With self-employment parameters this is the Schedule SE calculation;
    with W-2 employee parameters (multiplier 1, no deduction) it is the
    employee's FICA withholding plus income tax.
    """
    net_earnings = gross_income * params.net_earnings_multiplier
    social_security_tax = (
        min(net_earnings, params.social_security_wage_base) * params.social_security_rate
    )
    medicare_tax = net_earnings * params.medicare_rate
    additional_medicare_tax = (
        max(net_earnings - params.additional_medicare_threshold, ZERO)
        * params.additional_medicare_rate
    )
    total_se_tax = social_security_tax + medicare_tax + additional_medicare_tax

    se_deduction = total_se_tax * params.se_tax_deduction_rate
    taxable_income = max(gross_income - se_deduction - params.standard_deduction, ZERO)
    federal_tax = compute_bracket_tax(taxable_income, brackets)

    total_tax = total_se_tax + federal_tax
    quarterly_payment = (total_tax / 4).to_integral_value(rounding=ROUND_CEILING)

    logger.debug(
        "Payroll tax on %s: se=%s federal=%s total=%s",
        gross_income, total_se_tax, federal_tax, total_tax,
    )

    return PayrollTaxResult(
        gross_income=gross_income,
        net_earnings=net_earnings,
        social_security_tax=social_security_tax,
        medicare_tax=medicare_tax,
        additional_medicare_tax=additional_medicare_tax,
        total_se_tax=total_se_tax,
        se_deduction=se_deduction,
        taxable_income=taxable_income,
        federal_tax=federal_tax,
        total_tax=total_tax,
        quarterly_payment=quarterly_payment,
        effective_rate=effective_rate(total_tax, gross_income),
    )


class TaxEngine:
    """Computes self-employment, W-2 and S-Corp taxes for one tax year.

    The bracket table and parameter sets are injected; ``for_year`` pulls
    them from the configured tables.
    """

    def __init__(
        self,
        brackets: tuple[TaxBracket, ...],
        se_params: SelfEmploymentTaxParams,
        w2_params: SelfEmploymentTaxParams,
        scorp_params: SCorpParams = SCORP_PARAMS,
    ) -> None:
        self.brackets = brackets
        self.se_params = se_params
        self.w2_params = w2_params
        self.scorp_params = scorp_params

    @classmethod
    def for_year(cls, tax_year: int = DEFAULT_TAX_YEAR) -> "TaxEngine":
        return cls(
            brackets=get_federal_brackets(tax_year),
            se_params=get_se_tax_params(tax_year),
            w2_params=get_w2_fica_params(tax_year),
        )

    def compute_federal_tax(self, taxable_income: Decimal) -> Decimal:
        return compute_bracket_tax(taxable_income, self.brackets)

    def compute_se_tax(self, gross_income: Decimal) -> PayrollTaxResult:
        """Self-employment (1099 / single-member LLC) tax."""
        return compute_payroll_tax(gross_income, self.se_params, self.brackets)

    def compute_w2_tax(self, salary: Decimal) -> PayrollTaxResult:
        """Employee-side FICA plus federal income tax on a W-2 salary."""
        return compute_payroll_tax(salary, self.w2_params, self.brackets)

    def default_scorp_salary(self, income: Decimal) -> Decimal:
        """Reasonable salary default: a fixed share of income, whole dollars."""
        return (income * self.scorp_params.min_salary_share).to_integral_value(
            rounding=ROUND_HALF_UP
        )

    def compute_scorp_tax(self, income: Decimal, salary: Decimal) -> SCorpTaxResult:
        """S-Corp owner tax: FICA on salary only, the rest as distribution.

        The employer half of FICA is a business expense, so it comes out of
        the distribution before income tax.
        """
        params = self.scorp_params
        employee_fica = salary * params.employee_fica_rate
        employer_fica = salary * params.employer_fica_rate
        total_fica = employee_fica + employer_fica

        distribution = income - salary - employer_fica
        taxable_income = max(
            salary + distribution - self.se_params.standard_deduction, ZERO
        )
        federal_tax = compute_bracket_tax(taxable_income, self.brackets)
        total_tax = total_fica + federal_tax + params.fixed_annual_cost

        return SCorpTaxResult(
            income=income,
            salary=salary,
            distribution=max(distribution, ZERO),
            employee_fica=employee_fica,
            employer_fica=employer_fica,
            total_fica=total_fica,
            taxable_income=taxable_income,
            federal_tax=federal_tax,
            fixed_cost=params.fixed_annual_cost,
            total_tax=total_tax,
            net_income=income - total_tax,
        )
