"""Typer CLI interface for the estimator suite."""

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError

from estimators.engines.tables import DEFAULT_TAX_YEAR
from estimators.exceptions import EstimatorError
from estimators.formatting import parse_formatted_number
from estimators.models.enums import PayFrequency, Severity

app = typer.Typer(
    name="estimators",
    help="Settlement and tax estimators for injury claims, freelance and payroll taxes.",
)

CAR_ACCIDENT_SEVERITIES = (Severity.MINOR, Severity.MODERATE, Severity.SEVERE)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Settlement and tax estimators."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _amount(value: str | None, default: str = "0") -> Decimal:
    """Parse a formatted amount; an omitted option falls back to the default."""
    return parse_formatted_number(default if value is None else value)


def _tax_engine(year: int, params_file: Path | None):
    from estimators.engines.tax import TaxEngine
    from estimators.models.config import SelfEmploymentTaxParams

    engine = TaxEngine.for_year(year)
    if params_file is not None:
        try:
            data = json.loads(params_file.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            _fail(f"Cannot read parameters file {params_file}: {exc}")
        try:
            engine.se_params = SelfEmploymentTaxParams(**data)
        except ValidationError as exc:
            _fail(f"Invalid parameters in {params_file}: {exc}")
    return engine


def _positive_income(raw: str) -> Decimal:
    income = parse_formatted_number(raw)
    if income <= 0:
        _fail("Income must be greater than zero.")
    return income


YEAR_OPTION = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year")
PARAMS_FILE_OPTION = typer.Option(
    None,
    "--params-file",
    help="JSON file overriding the self-employment tax parameters",
)


# ---------------------------------------------------------------------------
# Settlement pages
# ---------------------------------------------------------------------------


@app.command(name="injury-settlement")
def injury_settlement(
    medical: str | None = typer.Option(None, "--medical", "-m", help="Medical expenses (default 10,000)"),
    lost_wages: str | None = typer.Option(None, "--lost-wages", "-w", help="Lost wages"),
    severity: Severity = typer.Option(Severity.MODERATE, "--severity", "-s", help="Injury severity"),
    attorney: bool = typer.Option(True, "--attorney/--no-attorney", help="Represented by an attorney"),
    post_trial: bool = typer.Option(False, "--post-trial", help="Use the post-trial contingency rate"),
    fault: float = typer.Option(0.0, "--fault", min=0, max=100, help="Your share of fault (%)"),
) -> None:
    """Estimate a personal-injury settlement."""
    from estimators.reports.settlement_report import SettlementReportGenerator

    engine = _settlement_engine(post_trial)
    result = engine.compute_settlement(
        medical_expenses=_amount(medical, "10000"),
        lost_wages=_amount(lost_wages),
        other_damages=Decimal("0"),
        severity=severity,
        has_attorney=attorney,
        fault_percent=Decimal(str(fault)),
    )
    typer.echo(SettlementReportGenerator().render_settlement(result))


@app.command(name="car-accident")
def car_accident(
    vehicle_damage: str | None = typer.Option(None, "--vehicle-damage", "-d", help="Vehicle damage (default 5,000)"),
    medical: str | None = typer.Option(None, "--medical", "-m", help="Medical expenses (default 10,000)"),
    lost_wages: str | None = typer.Option(None, "--lost-wages", "-w", help="Lost wages"),
    severity: Severity = typer.Option(Severity.MODERATE, "--severity", "-s", help="minor, moderate or severe"),
    attorney: bool = typer.Option(True, "--attorney/--no-attorney", help="Represented by an attorney"),
    post_trial: bool = typer.Option(False, "--post-trial", help="Use the post-trial contingency rate"),
    fault: float = typer.Option(0.0, "--fault", min=0, max=100, help="Your share of fault (%)"),
) -> None:
    """Estimate a car-accident settlement with comparative fault."""
    from estimators.reports.settlement_report import SettlementReportGenerator

    if severity not in CAR_ACCIDENT_SEVERITIES:
        valid = ", ".join(s.value for s in CAR_ACCIDENT_SEVERITIES)
        _fail(f"Invalid severity '{severity.value}' for a car accident. Valid: {valid}")

    engine = _settlement_engine(post_trial)
    result = engine.compute_car_accident(
        vehicle_damage=_amount(vehicle_damage, "5000"),
        medical_expenses=_amount(medical, "10000"),
        lost_wages=_amount(lost_wages),
        severity=severity,
        has_attorney=attorney,
        fault_percent=Decimal(str(fault)),
    )
    typer.echo(SettlementReportGenerator().render_settlement(result, title="Car Accident"))


@app.command(name="insurance-claim")
def insurance_claim(
    vehicle_damage: str | None = typer.Option(None, "--vehicle-damage", "-d", help="Vehicle damage"),
    medical: str | None = typer.Option(None, "--medical", "-m", help="Medical expenses"),
    lost_wages: str | None = typer.Option(None, "--lost-wages", "-w", help="Lost wages"),
    policy_limit: str | None = typer.Option(None, "--policy-limit", "-l", help="At-fault driver's policy limit (default 100,000)"),
) -> None:
    """Estimate an insurance-claim payout capped at the policy limit."""
    from estimators.engines.settlement import SettlementEngine
    from estimators.reports.settlement_report import SettlementReportGenerator

    result = SettlementEngine().compute_insurance_claim(
        vehicle_damage=_amount(vehicle_damage),
        medical_expenses=_amount(medical),
        lost_wages=_amount(lost_wages),
        policy_limit=_amount(policy_limit, "100000"),
    )
    typer.echo(SettlementReportGenerator().render_insurance_claim(result))


@app.command(name="injury-types")
def injury_types(
    severity: Severity | None = typer.Option(None, "--severity", "-s", help="Only show this severity"),
    injury: str | None = typer.Option(None, "--injury", "-i", help="Look up one injury type, e.g. broken-bone"),
) -> None:
    """Typical settlement ranges by injury type."""
    from rich.console import Console
    from rich.table import Table

    from estimators.engines.settlement import get_injury_type, list_injury_types
    from estimators.formatting import format_currency

    if injury is not None:
        try:
            profiles = [get_injury_type(injury)]
        except EstimatorError as exc:
            _fail(str(exc))
    else:
        profiles = list_injury_types()

    table = Table(title="Injury Settlement Guide")
    table.add_column("Injury")
    table.add_column("Severity")
    table.add_column("Typical Settlement", justify="right")
    table.add_column("Recovery")

    for profile in profiles:
        if severity is not None and profile.severity != severity:
            continue
        table.add_row(
            profile.name,
            profile.severity.value,
            f"{format_currency(profile.settlement_min)} - {format_currency(profile.settlement_max)}",
            profile.recovery_time,
        )

    console = Console()
    console.print(table)
    if injury is not None:
        console.print(profiles[0].description)


def _settlement_engine(post_trial: bool):
    from estimators.engines.settlement import SettlementEngine
    from estimators.engines.tables import SETTLEMENT_PARAMS

    if not post_trial:
        return SettlementEngine()
    params = SETTLEMENT_PARAMS.model_copy(
        update={"attorney_fee_rate": SETTLEMENT_PARAMS.post_trial_fee_rate}
    )
    return SettlementEngine(params)


# ---------------------------------------------------------------------------
# Tax pages
# ---------------------------------------------------------------------------


@app.command(name="se-tax")
def se_tax(
    income: str = typer.Argument(..., help="Net self-employment income"),
    year: int = YEAR_OPTION,
    params_file: Path | None = PARAMS_FILE_OPTION,
) -> None:
    """Self-employment tax and federal income tax on 1099 income."""
    from estimators.reports.tax_report import TaxReportGenerator

    gross = _positive_income(income)
    try:
        engine = _tax_engine(year, params_file)
    except EstimatorError as exc:
        _fail(str(exc))
    result = engine.compute_se_tax(gross)
    typer.echo(TaxReportGenerator().render_se_tax(result, tax_year=year))


@app.command(name="hourly-rate")
def hourly_rate(
    income: str = typer.Argument(..., help="Target annual take-home income"),
    weeks: int | None = typer.Option(None, "--weeks", help="Working weeks per year (default 48)"),
    hours: int | None = typer.Option(None, "--hours", help="Working hours per week (default 40)"),
    expense_rate: float | None = typer.Option(None, "--expense-rate", help="Business expenses as a fraction of revenue"),
    year: int = YEAR_OPTION,
    params_file: Path | None = PARAMS_FILE_OPTION,
) -> None:
    """Hourly rate needed to hit a take-home target as a freelancer."""
    from estimators.engines.hourly import HourlyRateEngine
    from estimators.reports.tax_report import TaxReportGenerator

    target = _positive_income(income)
    try:
        engine = HourlyRateEngine(_tax_engine(year, params_file))
        result = engine.compute(
            target,
            weeks_per_year=weeks,
            hours_per_week=hours,
            expense_rate=Decimal(str(expense_rate)) if expense_rate is not None else None,
        )
    except EstimatorError as exc:
        _fail(str(exc))
    typer.echo(TaxReportGenerator().render_hourly_rate(result))


@app.command()
def paycheck(
    salary: str = typer.Argument(..., help="Annual W-2 salary"),
    frequency: PayFrequency = typer.Option(PayFrequency.BIWEEKLY, "--frequency", "-f", help="Pay frequency"),
    year: int = YEAR_OPTION,
) -> None:
    """Take-home pay per paycheck."""
    from estimators.engines.paycheck import PaycheckEngine
    from estimators.engines.tables import get_pay_frequency
    from estimators.reports.tax_report import TaxReportGenerator

    annual = _positive_income(salary)
    try:
        result = PaycheckEngine(_tax_engine(year, None)).compute(annual, frequency)
    except EstimatorError as exc:
        _fail(str(exc))
    typer.echo(TaxReportGenerator().render_paycheck(result, get_pay_frequency(frequency)))


@app.command(name="quarterly-tax")
def quarterly_tax(
    income: str = typer.Argument(..., help="Expected annual self-employment income"),
    paid: str | None = typer.Option(None, "--paid", help="Estimated payments already made this year"),
    as_of: datetime | None = typer.Option(
        None, "--as-of", formats=["%Y-%m-%d"], help="Plan as of this date (default: today)"
    ),
    year: int = YEAR_OPTION,
    params_file: Path | None = PARAMS_FILE_OPTION,
) -> None:
    """Quarterly estimated-tax payments for the rest of the year."""
    from estimators.engines.quarterly import QuarterlyTaxEstimator
    from estimators.reports.tax_report import TaxReportGenerator

    gross = _positive_income(income)
    try:
        estimator = QuarterlyTaxEstimator(
            tax_engine=_tax_engine(year, params_file), tax_year=year
        )
        if as_of is not None:
            as_of_date = as_of.date()
            estimator.clock = lambda: as_of_date
        result = estimator.estimate(gross, already_paid=_amount(paid))
    except EstimatorError as exc:
        _fail(str(exc))
    typer.echo(TaxReportGenerator().render_quarterly(result))


@app.command(name="w2-vs-1099")
def w2_vs_1099(
    income: str = typer.Argument(..., help="Gross pay offered"),
    year: int = YEAR_OPTION,
    params_file: Path | None = PARAMS_FILE_OPTION,
) -> None:
    """Compare take-home pay as a W-2 employee vs a 1099 contractor."""
    from estimators.engines.comparison import ComparisonEngine
    from estimators.reports.comparison_report import ComparisonReportGenerator

    gross = _positive_income(income)
    try:
        result = ComparisonEngine(_tax_engine(year, params_file)).compare_w2_vs_1099(gross)
    except EstimatorError as exc:
        _fail(str(exc))
    typer.echo(ComparisonReportGenerator().render_w2_vs_1099(result))


@app.command(name="llc-vs-scorp")
def llc_vs_scorp(
    income: str = typer.Argument(..., help="Net business income"),
    salary: str | None = typer.Option(None, "--salary", help="S-Corp reasonable salary (default 40% of income)"),
    year: int = YEAR_OPTION,
    params_file: Path | None = PARAMS_FILE_OPTION,
) -> None:
    """Compare a single-member LLC with an S-Corp election."""
    from estimators.engines.comparison import ComparisonEngine
    from estimators.reports.comparison_report import ComparisonReportGenerator

    net = _positive_income(income)
    try:
        result = ComparisonEngine(_tax_engine(year, params_file)).compare_llc_vs_scorp(
            net, salary=parse_formatted_number(salary) if salary is not None else None
        )
    except EstimatorError as exc:
        _fail(str(exc))
    typer.echo(ComparisonReportGenerator().render_llc_vs_scorp(result))
