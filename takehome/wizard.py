"""Interactive step-by-step wizard for takehome.

Guides the user through one take-home pay calculation:
  Step 1: Filing status and state
  Step 2: Pay (frequency, amount, hours and tips for hourly work)
  Step 3: Optional payroll deductions
  Step 4: Results (annual summary, per-period breakdown, pay stub)
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule
from rich.table import Table

from takehome.cli import BANNER
from takehome.engines.paycheck import PaycheckEngine
from takehome.exceptions import TakehomeError, UnknownJurisdictionError
from takehome.models.deductions import PostTaxDeductions, PreTaxDeductions
from takehome.models.enums import FilingStatus, PayFrequency
from takehome.models.reports import TaxCalculationResult
from takehome.models.tax_tables import TaxYearConstants

# ---------------------------------------------------------------------------
# Choice helpers
# ---------------------------------------------------------------------------

_FS_MAP: dict[str, str] = {
    "SINGLE": "SINGLE",
    "MFJ": "MARRIED_FILING_JOINTLY",
    "MFS": "MARRIED_FILING_SEPARATELY",
    "HOH": "HEAD_OF_HOUSEHOLD",
}

_FS_CHOICES = list(_FS_MAP.keys())

_FREQUENCY_CHOICES = [f.value.lower() for f in PayFrequency]


def _filing_status_to_enum(key: str) -> FilingStatus:
    """Convert a short filing-status key (e.g. 'MFJ') to a FilingStatus enum."""
    return FilingStatus(_FS_MAP[key.upper()])


def _frequency_to_enum(key: str) -> PayFrequency:
    return PayFrequency(key.upper())


# ---------------------------------------------------------------------------
# Decimal prompt helper
# ---------------------------------------------------------------------------


def _prompt_decimal(
    label: str,
    default: Decimal,
    console: Console,
    positive: bool = False,
) -> Decimal:
    """Prompt the user for a non-negative Decimal value, retrying on bad input."""
    while True:
        raw = Prompt.ask(
            label,
            default=str(default),
            console=console,
        )
        try:
            value = Decimal(raw.strip().replace(",", "").lstrip("$"))
        except InvalidOperation:
            console.print(f"[red]Invalid number: {raw!r}. Try again.[/red]")
            continue
        if not value.is_finite() or value < 0 or (positive and value == 0):
            bound = "greater than zero" if positive else "zero or more"
            console.print(f"[red]Enter an amount {bound}.[/red]")
            continue
        return value


# ---------------------------------------------------------------------------
# Step header
# ---------------------------------------------------------------------------


def _show_step_header(step_num: int, title: str, console: Console) -> None:
    console.print()
    console.print(Rule(f"Step {step_num}: {title}", style="bold cyan"))
    console.print()


# ---------------------------------------------------------------------------
# Step 1: Filing status and state
# ---------------------------------------------------------------------------


def _step_profile(
    engine: PaycheckEngine, console: Console
) -> tuple[FilingStatus, str]:
    fs_key = Prompt.ask(
        "Filing status",
        choices=_FS_CHOICES,
        default="SINGLE",
        console=console,
    )
    filing_status = _filing_status_to_enum(fs_key)

    while True:
        state = Prompt.ask("State (two-letter code)", default="TX", console=console)
        try:
            profile = engine.state_resolver.profile(state)
        except UnknownJurisdictionError:
            console.print(f"[red]Unknown state {state!r}. Try again.[/red]")
            continue
        console.print(f"[dim]{profile.name}: {profile.method.value.lower()} income tax[/dim]")
        return filing_status, profile.code


# ---------------------------------------------------------------------------
# Step 2: Pay
# ---------------------------------------------------------------------------


def _step_pay(
    console: Console,
) -> tuple[PayFrequency, Decimal, Decimal | None, Decimal]:
    freq_key = Prompt.ask(
        "Pay frequency",
        choices=_FREQUENCY_CHOICES,
        default="annual",
        console=console,
    )
    frequency = _frequency_to_enum(freq_key)

    if frequency == PayFrequency.HOURLY:
        amount = _prompt_decimal("Hourly rate ($)", Decimal("25"), console)
        hours = _prompt_decimal("Hours per week", Decimal("40"), console, positive=True)
        tips = _prompt_decimal("Tips per hour ($)", Decimal("0"), console)
        return frequency, amount, hours, tips

    amount = _prompt_decimal(f"Gross pay per {freq_key} period ($)", Decimal("0"), console)
    return frequency, amount, None, Decimal("0")


# ---------------------------------------------------------------------------
# Step 3: Deductions
# ---------------------------------------------------------------------------


def _step_deductions(
    console: Console,
) -> tuple[PreTaxDeductions | None, PostTaxDeductions | None]:
    if not Confirm.ask("Add payroll deductions?", default=False, console=console):
        console.print("[dim]Skipped.[/dim]")
        return None, None

    console.print("[dim]Enter annual amounts. Contribution limits are applied automatically.[/dim]")
    zero = Decimal("0")
    pre_tax = PreTaxDeductions(
        retirement_401k=_prompt_decimal("401(k) contribution", zero, console),
        hsa=_prompt_decimal("HSA contribution", zero, console),
        health_insurance=_prompt_decimal("Health insurance premiums", zero, console),
        fsa=_prompt_decimal("FSA election", zero, console),
        traditional_ira=_prompt_decimal("Traditional IRA contribution", zero, console),
    )
    post_tax = PostTaxDeductions(
        roth_ira=_prompt_decimal("Roth IRA contribution", zero, console),
    )
    return pre_tax, post_tax


# ---------------------------------------------------------------------------
# Step 4: Results
# ---------------------------------------------------------------------------


def _display_result(result: TaxCalculationResult, console: Console) -> None:
    """Pretty-print a TaxCalculationResult using Rich."""
    annual = Table(title="Annual", show_header=False, padding=(0, 1))
    annual.add_column("", style="cyan", min_width=28)
    annual.add_column("", justify="right", style="green")
    annual.add_row("Gross Pay", f"${result.annual_gross:,.2f}")
    if result.deductions.total_pre_tax > 0:
        annual.add_row("Pre-Tax Deductions", f"${result.deductions.total_pre_tax:,.2f}")
    annual.add_row("Taxable Income", f"${result.taxable_income:,.2f}")
    annual.add_row("Federal Income Tax", f"${result.federal_tax:,.2f}")
    annual.add_row(f"{result.state_code} Income Tax", f"${result.state_tax:,.2f}")
    annual.add_row("Social Security", f"${result.social_security:,.2f}")
    annual.add_row("Medicare", f"${result.medicare:,.2f}")
    if result.additional_medicare > 0:
        annual.add_row("Addl Medicare Tax", f"${result.additional_medicare:,.2f}")
    annual.add_row("Total Taxes", f"${result.total_taxes:,.2f}")
    if result.deductions.total_post_tax > 0:
        annual.add_row("Post-Tax Deductions", f"${result.deductions.total_post_tax:,.2f}")
    annual.add_row("Take-Home Pay", f"${result.annual_net:,.2f}")
    console.print(annual)

    periods = Table(title="By Pay Period", padding=(0, 1))
    periods.add_column("Period", style="cyan")
    periods.add_column("Gross", justify="right")
    periods.add_column("Taxes", justify="right", style="red")
    periods.add_column("Net", justify="right", style="green")
    for label, attr in (
        ("Monthly", "monthly"),
        ("Semi-Monthly", "semi_monthly"),
        ("Bi-Weekly", "bi_weekly"),
        ("Weekly", "weekly"),
        ("Hourly", "hourly"),
    ):
        periods.add_row(
            label,
            f"${getattr(result.gross_income, attr):,.2f}",
            f"${getattr(result.taxes_by_period, attr):,.2f}",
            f"${getattr(result.net_income, attr):,.2f}",
        )
    console.print(periods)

    console.print(
        Panel(
            f"Effective tax rate: [bold]{result.effective_tax_rate:.2f}%[/bold]\n"
            f"Take-home: [bold]{result.take_home_percentage:.2f}%[/bold]\n"
            f"Marginal federal / state: {result.marginal_federal_rate * 100:.2f}% / "
            f"{result.marginal_state_rate * 100:.2f}%\n"
            f"Bi-weekly net pay: [bold green]${result.pay_stub.net_pay:,.2f}[/bold green]",
            title="Rates",
            border_style="green",
        )
    )
    for w in result.warnings:
        console.print(f"[yellow]Warning: {w}[/yellow]")


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


def run_wizard(
    tax_year: TaxYearConstants, console: Console | None = None
) -> TaxCalculationResult | None:
    """Main wizard orchestration. Called from cli.py."""
    if console is None:
        console = Console()

    engine = PaycheckEngine(tax_year)
    console.print(
        Panel(
            f"[bold green]{BANNER}[/bold green]\n"
            f"[bold]Interactive Take-Home Pay Wizard ({tax_year.year})[/bold]",
            border_style="cyan",
        )
    )

    _show_step_header(1, "Filing Status & State", console)
    filing_status, state_code = _step_profile(engine, console)

    _show_step_header(2, "Pay", console)
    frequency, amount, hours, tips = _step_pay(console)

    _show_step_header(3, "Deductions", console)
    pre_tax, post_tax = _step_deductions(console)

    _show_step_header(4, "Results", console)
    try:
        result = engine.calculate(
            amount,
            frequency,
            filing_status,
            state_code,
            hours_per_week=hours,
            tips_per_hour=tips,
            pre_tax=pre_tax,
            post_tax=post_tax,
        )
    except TakehomeError as exc:
        console.print(f"[red]Calculation failed: {exc}[/red]")
        return None

    _display_result(result, console)
    console.print()
    console.print(
        Panel(
            f"[bold]Filing Status:[/bold] {filing_status.value}\n"
            f"[bold]State:[/bold] {result.state_name}\n\n"
            "[bold green]Wizard complete![/bold green]",
            title="[bold cyan]takehome: Done[/bold cyan]",
            border_style="cyan",
        )
    )
    return result
