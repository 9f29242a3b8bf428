"""Typer CLI interface for takehome."""

import logging
import os
from datetime import date
from decimal import Decimal

import typer

from takehome.models.enums import FilingStatus, PayFrequency, StateTaxMethod

logger = logging.getLogger(__name__)

BANNER = r"""
   _        _          _
  | |_ __ _| |_____ __| |_  ___ _ __  ___
  |  _/ _` | / / -_) _` | ' \/ _ \ '  \/ -_)
   \__\__,_|_\_\___\__,_|_||_\___/_|_|_\___|

  Paycheck & take-home pay estimator
"""

app = typer.Typer(
    name="takehome",
    help="takehome: US paycheck and take-home pay estimator.",
)

_FS_MAP: dict[str, str] = {
    "SINGLE": "SINGLE",
    "MFJ": "MARRIED_FILING_JOINTLY",
    "MFS": "MARRIED_FILING_SEPARATELY",
    "HOH": "HEAD_OF_HOUSEHOLD",
}

_FREQUENCY_ALIASES: dict[str, str] = {
    "YEARLY": "ANNUAL",
    "SALARY": "ANNUAL",
    "HOUR": "HOURLY",
}


def show_banner() -> None:
    typer.echo(BANNER)


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr.

    The level comes from ``LOG_LEVEL`` (default WARNING); ``--verbose``
    forces DEBUG.
    """
    from rich.console import Console
    from rich.logging import RichHandler

    level_name = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """takehome: US paycheck and take-home pay estimator."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        show_banner()
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Option parsing helpers
# ---------------------------------------------------------------------------


def _parse_filing_status(filing_status: str) -> FilingStatus:
    fs_key = filing_status.upper()
    fs_value = _FS_MAP.get(fs_key, fs_key)
    try:
        return FilingStatus(fs_value)
    except ValueError:
        valid = ", ".join(_FS_MAP.keys())
        typer.echo(f"Error: Invalid filing status '{filing_status}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _parse_frequency(frequency: str) -> PayFrequency:
    key = frequency.upper().replace("-", "").replace("_", "")
    key = _FREQUENCY_ALIASES.get(key, key)
    try:
        return PayFrequency(key)
    except ValueError:
        valid = ", ".join(f.value for f in PayFrequency)
        typer.echo(f"Error: Invalid pay frequency '{frequency}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _parse_method(method: str) -> StateTaxMethod:
    try:
        return StateTaxMethod(method.upper())
    except ValueError:
        valid = ", ".join(m.value for m in StateTaxMethod)
        typer.echo(f"Error: Invalid tax method '{method}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _resolve_year(year: int | None) -> int:
    """Explicit ``--year``, else ``TAKEHOME_TAX_YEAR``, else the default year."""
    from takehome.engines.tax_year import DEFAULT_TAX_YEAR

    if year is not None:
        return year
    raw = os.environ.get("TAKEHOME_TAX_YEAR")
    if not raw:
        return DEFAULT_TAX_YEAR
    try:
        return int(raw)
    except ValueError:
        typer.echo(f"Error: TAKEHOME_TAX_YEAR must be a year, got '{raw}'", err=True)
        raise typer.Exit(1)


def _load_tax_year(year: int | None):
    from takehome.engines.tax_year import get_tax_year
    from takehome.exceptions import UnknownTaxYearError

    resolved = _resolve_year(year)
    try:
        constants = get_tax_year(resolved)
    except UnknownTaxYearError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    logger.debug("Using %d tax tables", resolved)
    return constants


# ---------------------------------------------------------------------------
# calculate
# ---------------------------------------------------------------------------


@app.command()
def calculate(
    amount: float = typer.Argument(..., help="Gross pay per period (hourly rate for --frequency hourly)"),
    frequency: str = typer.Option(
        "ANNUAL",
        "--frequency",
        "-f",
        help="Pay frequency: HOURLY, WEEKLY, BIWEEKLY, SEMIMONTHLY, MONTHLY, ANNUAL",
    ),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    state: str = typer.Option("TX", "--state", help="Two-letter state code (DC included)"),
    hours: float | None = typer.Option(None, "--hours", help="Hours worked per week (required for hourly pay)"),
    weeks: float = typer.Option(52, "--weeks", help="Weeks worked per year (hourly pay)"),
    tips: float = typer.Option(0, "--tips", help="Tips per hour (hourly pay)"),
    year: int | None = typer.Option(None, "--year", "-y", help="Tax year (default: $TAKEHOME_TAX_YEAR or 2026)"),
    retirement_401k: float = typer.Option(0, "--401k", help="Annual 401(k) contribution"),
    retirement_401k_percent: bool = typer.Option(
        False, "--401k-percent", help="Treat --401k as a percentage of gross"
    ),
    hsa: float = typer.Option(0, "--hsa", help="Annual HSA contribution"),
    health_insurance: float = typer.Option(0, "--health-insurance", help="Annual pre-tax health premiums"),
    fsa: float = typer.Option(0, "--fsa", help="Annual FSA election"),
    traditional_ira: float = typer.Option(0, "--traditional-ira", help="Annual traditional IRA contribution"),
    other_pre_tax: float = typer.Option(0, "--other-pre-tax", help="Other annual pre-tax deductions"),
    roth_ira: float = typer.Option(0, "--roth-ira", help="Annual Roth IRA contribution"),
    child_support: float = typer.Option(0, "--child-support", help="Annual child support withholding"),
    student_loan: float = typer.Option(0, "--student-loan", help="Annual student loan payments"),
    other_post_tax: float = typer.Option(0, "--other-post-tax", help="Other annual post-tax deductions"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    report: bool = typer.Option(False, "--report", help="Print the full paycheck summary report"),
    show_brackets: bool = typer.Option(False, "--brackets", help="Show the bracket-by-bracket breakdown"),
) -> None:
    """Calculate federal, FICA and state taxes and take-home pay."""
    from takehome.engines.paycheck import PaycheckEngine
    from takehome.exceptions import TakehomeError
    from takehome.models.deductions import PostTaxDeductions, PreTaxDeductions

    fs = _parse_filing_status(filing_status)
    freq = _parse_frequency(frequency)
    constants = _load_tax_year(year)

    pre_tax = PreTaxDeductions(
        retirement_401k=Decimal(str(retirement_401k)),
        retirement_401k_is_percent=retirement_401k_percent,
        hsa=Decimal(str(hsa)),
        health_insurance=Decimal(str(health_insurance)),
        fsa=Decimal(str(fsa)),
        traditional_ira=Decimal(str(traditional_ira)),
        other=Decimal(str(other_pre_tax)),
    )
    post_tax = PostTaxDeductions(
        roth_ira=Decimal(str(roth_ira)),
        child_support=Decimal(str(child_support)),
        student_loan=Decimal(str(student_loan)),
        other=Decimal(str(other_post_tax)),
    )

    engine = PaycheckEngine(constants)
    try:
        result = engine.calculate(
            Decimal(str(amount)),
            freq,
            fs,
            state,
            hours_per_week=Decimal(str(hours)) if hours is not None else None,
            weeks_per_year=Decimal(str(weeks)),
            tips_per_hour=Decimal(str(tips)),
            pre_tax=pre_tax,
            post_tax=post_tax,
        )
    except TakehomeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    if report:
        from takehome.reports.paycheck_summary import PaycheckSummaryGenerator

        typer.echo(PaycheckSummaryGenerator().render(result))
        return

    per = result.per_period
    typer.echo(f"\n{result.tax_year} Take-Home Pay ({fs.value}, {result.state_name})")
    typer.echo("=" * 50)
    typer.echo("")
    typer.echo("ANNUAL")
    typer.echo(f"  Gross Pay:             ${result.annual_gross:>12,.2f}")
    if result.deductions.total_pre_tax > 0:
        typer.echo(f"  Pre-Tax Deductions:    ${result.deductions.total_pre_tax:>12,.2f}")
    typer.echo(f"  Standard Deduction:    ${result.federal_standard_deduction:>12,.2f}")
    typer.echo(f"  Taxable Income:        ${result.taxable_income:>12,.2f}")
    typer.echo(f"  Federal Income Tax:    ${result.federal_tax:>12,.2f}")
    typer.echo(f"  State Income Tax:      ${result.state_tax:>12,.2f}")
    typer.echo(f"  Social Security:       ${result.social_security:>12,.2f}")
    typer.echo(f"  Medicare:              ${result.medicare:>12,.2f}")
    if result.additional_medicare > 0:
        typer.echo(f"  Addl Medicare Tax:     ${result.additional_medicare:>12,.2f}")
    typer.echo("  ──────────────────────────────────────")
    typer.echo(f"  Total Taxes:           ${result.total_taxes:>12,.2f}")
    if result.deductions.total_post_tax > 0:
        typer.echo(f"  Post-Tax Deductions:   ${result.deductions.total_post_tax:>12,.2f}")
    typer.echo(f"  Take-Home Pay:         ${result.annual_net:>12,.2f}")
    typer.echo("")
    typer.echo(f"PER PERIOD ({freq.value})")
    typer.echo(f"  Gross:                 ${per.gross:>12,.2f}")
    typer.echo(f"  Taxes:                 ${per.total_taxes:>12,.2f}")
    typer.echo(f"  Net:                   ${per.net:>12,.2f}")
    typer.echo("")
    typer.echo("RATES")
    typer.echo(f"  Effective Tax Rate:    {result.effective_tax_rate:>12.2f}%")
    typer.echo(f"  Take-Home:             {result.take_home_percentage:>12.2f}%")
    typer.echo(f"  Marginal Federal:      {result.marginal_federal_rate * 100:>12.2f}%")
    typer.echo(f"  Marginal State:        {result.marginal_state_rate * 100:>12.2f}%")

    if show_brackets:
        _print_bracket_details("FEDERAL BRACKETS", result.federal_brackets)
        if result.state_brackets:
            _print_bracket_details(f"{result.state_code} BRACKETS", result.state_brackets)

    if result.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in result.warnings:
            typer.echo(f"  - {w}")


def _print_bracket_details(title: str, details) -> None:
    typer.echo("")
    typer.echo(title)
    for d in details:
        upper = f"${d.max:,.0f}" if d.max is not None else "and up"
        typer.echo(
            f"  {d.rate * 100:>6.2f}%  ${d.min:,.0f} - {upper}: "
            f"${d.amount_taxed:,.2f} taxed, ${d.tax_owed:,.2f}"
        )


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


@app.command()
def convert(
    amount: float = typer.Argument(..., help="Amount to convert"),
    from_frequency: str = typer.Option("HOURLY", "--from", help="Frequency of the amount"),
    to_frequency: str = typer.Option("ANNUAL", "--to", help="Frequency to convert to"),
    hours: float = typer.Option(40, "--hours", help="Hours worked per week"),
    weeks: float = typer.Option(52, "--weeks", help="Weeks worked per year"),
) -> None:
    """Convert pay between hourly, salaried and per-period amounts."""
    from takehome.engines.conversions import (
        MAX_HOURS_PER_WEEK,
        MAX_WEEKS_PER_YEAR,
        period_breakdown,
        periods_per_year,
        to_decimal,
    )
    from takehome.engines.progressive import round_cents
    from takehome.exceptions import TakehomeError

    src = _parse_frequency(from_frequency)
    dst = _parse_frequency(to_frequency)
    try:
        value = to_decimal(Decimal(str(amount)), "amount")
        hours_dec = to_decimal(
            Decimal(str(hours)), "hours_per_week", positive=True, maximum=MAX_HOURS_PER_WEEK
        )
        weeks_dec = to_decimal(
            Decimal(str(weeks)), "weeks_per_year", positive=True, maximum=MAX_WEEKS_PER_YEAR
        )
    except TakehomeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    annual = value * periods_per_year(src, hours_dec, weeks_dec)
    converted = round_cents(annual / periods_per_year(dst, hours_dec, weeks_dec))
    typer.echo(f"${value:,.2f} {src.value} = ${converted:,.2f} {dst.value}")

    breakdown = period_breakdown(annual, hours_dec)
    typer.echo("")
    typer.echo(f"  Annual:                ${breakdown.annual:>12,.2f}")
    typer.echo(f"  Monthly:               ${breakdown.monthly:>12,.2f}")
    typer.echo(f"  Semi-Monthly:          ${breakdown.semi_monthly:>12,.2f}")
    typer.echo(f"  Bi-Weekly:             ${breakdown.bi_weekly:>12,.2f}")
    typer.echo(f"  Weekly:                ${breakdown.weekly:>12,.2f}")
    typer.echo(f"  Daily:                 ${breakdown.daily:>12,.2f}")
    typer.echo(f"  Hourly:                ${breakdown.hourly:>12,.2f}")


# ---------------------------------------------------------------------------
# states / brackets / sources
# ---------------------------------------------------------------------------


@app.command()
def states(
    method: str | None = typer.Option(None, "--method", "-m", help="Filter: PROGRESSIVE, FLAT, NONE"),
    year: int | None = typer.Option(None, "--year", "-y", help="Tax year"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List state income tax profiles."""
    from rich.console import Console
    from rich.table import Table

    constants = _load_tax_year(year)
    profiles = sorted(constants.states.values(), key=lambda p: p.name)
    if method is not None:
        wanted = _parse_method(method)
        profiles = [p for p in profiles if p.method == wanted]

    if json_output:
        import json

        typer.echo(json.dumps([p.model_dump(mode="json") for p in profiles], indent=2))
        return

    table = Table(title=f"{constants.year} State Income Tax")
    table.add_column("Code", style="cyan")
    table.add_column("State")
    table.add_column("Method")
    table.add_column("Top Rate", justify="right", style="green")
    table.add_column("Std Ded (Single)", justify="right")
    for p in profiles:
        table.add_row(
            p.code,
            p.name,
            p.method.value,
            f"{p.top_rate * 100:.2f}%",
            f"${p.deduction_for(FilingStatus.SINGLE):,.0f}",
        )
    Console().print(table)


@app.command()
def brackets(
    state: str | None = typer.Option(None, "--state", help="State code (default: federal brackets)"),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    year: int | None = typer.Option(None, "--year", "-y", help="Tax year"),
) -> None:
    """Show the federal or a state bracket table."""
    from rich.console import Console
    from rich.table import Table

    from takehome.engines.state import StateTaxResolver
    from takehome.exceptions import UnknownJurisdictionError

    fs = _parse_filing_status(filing_status)
    constants = _load_tax_year(year)

    if state is None:
        title = f"{constants.year} Federal Brackets ({fs.value})"
        table_rows = constants.federal_brackets[fs]
        deduction = constants.federal_standard_deduction[fs]
    else:
        try:
            profile = StateTaxResolver(constants).profile(state)
        except UnknownJurisdictionError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)
        deduction = profile.deduction_for(fs)
        if profile.method == StateTaxMethod.NONE:
            typer.echo(f"{profile.name} has no state income tax.")
            return
        if profile.method == StateTaxMethod.FLAT:
            typer.echo(
                f"{profile.name} flat tax: {profile.flat_rate * 100:.2f}% "
                f"(standard deduction ${deduction:,.2f})"
            )
            return
        title = f"{constants.year} {profile.name} Brackets ({fs.value})"
        table_rows = profile.brackets[fs]

    table = Table(title=title)
    table.add_column("Rate", justify="right", style="green")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    for b in table_rows:
        upper = f"${b.max:,.0f}" if b.max is not None else "and up"
        table.add_row(f"{b.rate * 100:.2f}%", f"${b.min:,.0f}", upper)
    console = Console()
    console.print(table)
    console.print(f"Standard deduction: ${deduction:,.2f}")


@app.command()
def sources(
    state: str | None = typer.Option(None, "--state", help="Only show this state's source"),
    outdated: bool = typer.Option(False, "--outdated", help="Only show sources due for re-verification"),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date YYYY-MM-DD (default: today)"),
    days: int = typer.Option(90, "--days", help="Days before a source counts as outdated"),
) -> None:
    """List the data sources behind the tax tables."""
    from takehome.engines.sources import (
        TAX_DISCLAIMER,
        all_sources,
        format_source_citation,
        get_outdated_sources,
        get_state_source,
    )

    if state is not None:
        source = get_state_source(state)
        if source is None:
            typer.echo(f"Error: No source for state '{state}'", err=True)
            raise typer.Exit(1)
        selected = [source]
    elif outdated:
        try:
            reference = date.fromisoformat(as_of) if as_of else date.today()
        except ValueError:
            typer.echo(f"Error: Invalid date '{as_of}'. Use YYYY-MM-DD.", err=True)
            raise typer.Exit(1)
        selected = get_outdated_sources(reference, days)
        if not selected:
            typer.echo(f"All sources verified within {days} days of {reference.isoformat()}.")
            return
    else:
        selected = all_sources()

    for source in selected:
        typer.echo(f"  - {format_source_citation(source)}")
    typer.echo("")
    typer.echo(TAX_DISCLAIMER)


# ---------------------------------------------------------------------------
# wizard
# ---------------------------------------------------------------------------


@app.command()
def wizard(
    year: int | None = typer.Option(None, "--year", "-y", help="Tax year"),
) -> None:
    """Interactive step-by-step take-home pay wizard."""
    from takehome.wizard import run_wizard

    constants = _load_tax_year(year)
    run_wizard(constants)


if __name__ == "__main__":
    show_banner()
    app()
