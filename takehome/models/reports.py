"""Calculation output models."""

from decimal import Decimal

from takehome.models.deductions import DeductionBreakdown
from takehome.models.enums import FilingStatus, PayFrequency, StateTaxMethod
from takehome.models.tax_tables import DataSource, ImmutableModel


class BracketDetail(ImmutableModel):
    """Income and tax attributed to one bracket. Amounts are unrounded."""

    min: Decimal
    max: Decimal | None
    rate: Decimal
    amount_taxed: Decimal
    tax_owed: Decimal
    cumulative_tax: Decimal


class BracketComputation(ImmutableModel):
    """Result of applying a bracket table to one taxable income."""

    taxable_income: Decimal
    total: Decimal  # rounded to cents
    details: tuple[BracketDetail, ...] = ()


class StateTaxResult(ImmutableModel):
    state_code: str
    state_name: str
    method: StateTaxMethod
    standard_deduction: Decimal
    taxable_income: Decimal
    tax: Decimal
    marginal_rate: Decimal
    details: tuple[BracketDetail, ...] = ()


class PeriodBreakdown(ImmutableModel):
    """One annual amount expressed per pay period, rounded to cents."""

    annual: Decimal
    monthly: Decimal
    semi_monthly: Decimal
    bi_weekly: Decimal
    weekly: Decimal
    daily: Decimal
    hourly: Decimal


class PeriodAmounts(ImmutableModel):
    """Every result component de-annualized to the input pay frequency."""

    frequency: PayFrequency
    gross: Decimal
    federal_tax: Decimal
    state_tax: Decimal
    social_security: Decimal
    medicare: Decimal
    additional_medicare: Decimal
    pre_tax_deductions: Decimal
    post_tax_deductions: Decimal
    total_taxes: Decimal
    net: Decimal


class PayStub(ImmutableModel):
    """Bi-weekly pay stub view of the annual figures."""

    gross_pay: Decimal
    federal_withholding: Decimal
    state_withholding: Decimal
    social_security: Decimal
    medicare: Decimal  # regular + additional
    pre_tax_deductions: Decimal
    post_tax_deductions: Decimal
    net_pay: Decimal


class TaxCalculationResult(ImmutableModel):
    tax_year: int
    filing_status: FilingStatus
    state_code: str
    state_name: str
    state_method: StateTaxMethod
    # Input summary
    frequency: PayFrequency
    gross_pay: Decimal
    hours_per_week: Decimal | None = None
    weeks_per_year: Decimal
    # Annual figures
    annual_gross: Decimal
    deductions: DeductionBreakdown
    federal_standard_deduction: Decimal
    taxable_income: Decimal
    federal_tax: Decimal
    state_standard_deduction: Decimal
    state_taxable_income: Decimal
    state_tax: Decimal
    social_security: Decimal
    medicare: Decimal
    additional_medicare: Decimal
    total_fica: Decimal
    total_taxes: Decimal
    annual_net: Decimal
    # Bracket detail
    federal_brackets: tuple[BracketDetail, ...] = ()
    state_brackets: tuple[BracketDetail, ...] = ()
    # Display views
    per_period: PeriodAmounts
    gross_income: PeriodBreakdown
    taxes_by_period: PeriodBreakdown
    net_income: PeriodBreakdown
    pay_stub: PayStub
    # Rates (percentages, two decimals; marginal rates as fractions)
    effective_tax_rate: Decimal
    take_home_percentage: Decimal
    marginal_federal_rate: Decimal
    marginal_state_rate: Decimal
    # Citations
    federal_source: DataSource | None = None
    state_source: DataSource | None = None
    fica_source: DataSource | None = None
    warnings: tuple[str, ...] = ()


class QuickEstimate(ImmutableModel):
    """Gross and net pay at a glance for a single hourly filer."""

    annual_gross: Decimal
    annual_net: Decimal
    monthly_gross: Decimal
    monthly_net: Decimal
    weekly_gross: Decimal
    weekly_net: Decimal
    effective_tax_rate: Decimal
