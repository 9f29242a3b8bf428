"""Paycheck and take-home pay engine.

Combines the federal bracket tax, FICA, state income tax and payroll
deductions into one ``TaxCalculationResult``:
  - Annualize the input pay (hourly pay includes tips and worked weeks)
  - Cap pre-tax and Roth deductions at the tax year's contribution limits
  - Federal tax on gross less pre-tax deductions and the standard deduction
  - FICA on gross wages (Social Security capped at the wage base)
  - State tax on gross less pre-tax deductions, per the state's method
  - De-annualize every component back to the input pay frequency

Amounts stay unrounded until a final total; totals round half-up to cents.
"""

import logging
from decimal import Decimal

from takehome.engines.conversions import (
    DEFAULT_HOURS_PER_WEEK,
    DEFAULT_WEEKS_PER_YEAR,
    MAX_AMOUNT,
    MAX_HOURS_PER_WEEK,
    MAX_WEEKS_PER_YEAR,
    PERIODS_PER_YEAR,
    period_breakdown,
    periods_per_year,
    to_decimal,
)
from takehome.engines.progressive import ZERO, calculate_progressive_tax, marginal_rate, round_cents
from takehome.engines.state import StateTaxResolver
from takehome.engines.tax_year import DEFAULT_TAX_YEAR, get_tax_year
from takehome.exceptions import InvalidInputError
from takehome.models.deductions import DeductionBreakdown, PostTaxDeductions, PreTaxDeductions
from takehome.models.enums import FilingStatus, PayFrequency
from takehome.models.reports import (
    PayStub,
    PeriodAmounts,
    QuickEstimate,
    TaxCalculationResult,
)
from takehome.models.tax_tables import TaxYearConstants

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
PAY_STUB_PERIODS = PERIODS_PER_YEAR[PayFrequency.BIWEEKLY]

Number = Decimal | int | float | str


class PaycheckEngine:
    """Computes take-home pay against one tax year's tables."""

    def __init__(self, tax_year: TaxYearConstants):
        self.tax_year = tax_year
        self.state_resolver = StateTaxResolver(tax_year)

    def calculate(
        self,
        gross_pay: Number,
        frequency: PayFrequency | str,
        filing_status: FilingStatus | str,
        state_code: str,
        *,
        hours_per_week: Number | None = None,
        weeks_per_year: Number = DEFAULT_WEEKS_PER_YEAR,
        tips_per_hour: Number = ZERO,
        pre_tax: PreTaxDeductions | None = None,
        post_tax: PostTaxDeductions | None = None,
    ) -> TaxCalculationResult:
        """Compute the full take-home breakdown for one paycheck.

        ``gross_pay`` is per ``frequency`` period (the hourly rate for
        HOURLY pay, which then requires ``hours_per_week``). Deductions are
        annual amounts.

        Raises:
            InvalidInputError: on any invalid amount, frequency or filing status.
            UnknownJurisdictionError: if ``state_code`` is not modelled.
        """
        # --- Input validation (nothing is computed until all inputs pass) ---
        gross = to_decimal(gross_pay, "gross_pay")
        frequency = self._coerce_frequency(frequency)
        filing_status = self._coerce_filing_status(filing_status)
        weeks = to_decimal(
            weeks_per_year, "weeks_per_year", positive=True, maximum=MAX_WEEKS_PER_YEAR
        )
        tips = to_decimal(tips_per_hour, "tips_per_hour")
        hours = None
        if hours_per_week is not None:
            hours = to_decimal(
                hours_per_week, "hours_per_week", positive=True, maximum=MAX_HOURS_PER_WEEK
            )
        if frequency == PayFrequency.HOURLY and hours is None:
            raise InvalidInputError("hours_per_week", "required for hourly pay")
        profile = self.state_resolver.profile(state_code)
        pre_tax = pre_tax or PreTaxDeductions()
        post_tax = post_tax or PostTaxDeductions()
        self._validate_deductions(pre_tax, post_tax)

        # --- Annualize ---
        if frequency == PayFrequency.HOURLY:
            annual_gross = (gross + tips) * hours * weeks
        else:
            annual_gross = gross * PERIODS_PER_YEAR[frequency]
        logger.debug(
            "Annual gross %s from %s %s (%s, %s)",
            annual_gross, gross, frequency, filing_status, profile.code,
        )

        warnings: list[str] = []
        deductions = self.compute_deductions(annual_gross, pre_tax, post_tax, warnings)
        if deductions.total_pre_tax > annual_gross:
            warnings.append("Pre-tax deductions exceed gross pay")

        # --- Federal income tax ---
        std_ded = self.tax_year.federal_standard_deduction[filing_status]
        taxable_income = max(ZERO, annual_gross - deductions.total_pre_tax - std_ded)
        federal_table = self.tax_year.federal_brackets[filing_status]
        federal = calculate_progressive_tax(taxable_income, federal_table)

        # --- FICA ---
        social_security, medicare, additional_medicare = self.compute_fica(
            annual_gross, filing_status
        )
        total_fica = social_security + medicare + additional_medicare

        # --- State income tax ---
        state_income = max(ZERO, annual_gross - deductions.total_pre_tax)
        state = self.state_resolver.calculate(state_income, profile.code, filing_status)

        # --- Totals ---
        total_taxes = federal.total + state.tax + total_fica
        annual_net = (
            annual_gross - total_taxes - deductions.total_pre_tax - deductions.total_post_tax
        )
        if annual_net < 0:
            warnings.append("Taxes and deductions exceed gross pay")

        if annual_gross > 0:
            effective_tax_rate = round_cents(total_taxes / annual_gross * HUNDRED)
            take_home_percentage = round_cents(annual_net / annual_gross * HUNDRED)
        else:
            effective_tax_rate = ZERO
            take_home_percentage = ZERO

        # --- De-annualize ---
        divisor = periods_per_year(frequency, hours, weeks)
        per_period = PeriodAmounts(
            frequency=frequency,
            gross=round_cents(annual_gross / divisor),
            federal_tax=round_cents(federal.total / divisor),
            state_tax=round_cents(state.tax / divisor),
            social_security=round_cents(social_security / divisor),
            medicare=round_cents(medicare / divisor),
            additional_medicare=round_cents(additional_medicare / divisor),
            pre_tax_deductions=round_cents(deductions.total_pre_tax / divisor),
            post_tax_deductions=round_cents(deductions.total_post_tax / divisor),
            total_taxes=round_cents(total_taxes / divisor),
            net=round_cents(annual_net / divisor),
        )
        breakdown_hours = hours or DEFAULT_HOURS_PER_WEEK
        pay_stub = PayStub(
            gross_pay=round_cents(annual_gross / PAY_STUB_PERIODS),
            federal_withholding=round_cents(federal.total / PAY_STUB_PERIODS),
            state_withholding=round_cents(state.tax / PAY_STUB_PERIODS),
            social_security=round_cents(social_security / PAY_STUB_PERIODS),
            medicare=round_cents((medicare + additional_medicare) / PAY_STUB_PERIODS),
            pre_tax_deductions=round_cents(deductions.total_pre_tax / PAY_STUB_PERIODS),
            post_tax_deductions=round_cents(deductions.total_post_tax / PAY_STUB_PERIODS),
            net_pay=round_cents(annual_net / PAY_STUB_PERIODS),
        )

        logger.info(
            "%s %s in %s: gross %s, taxes %s, net %s",
            self.tax_year.year, filing_status, profile.code,
            round_cents(annual_gross), total_taxes, round_cents(annual_net),
        )
        return TaxCalculationResult(
            tax_year=self.tax_year.year,
            filing_status=filing_status,
            state_code=profile.code,
            state_name=profile.name,
            state_method=profile.method,
            frequency=frequency,
            gross_pay=gross,
            hours_per_week=hours,
            weeks_per_year=weeks,
            annual_gross=round_cents(annual_gross),
            deductions=deductions,
            federal_standard_deduction=std_ded,
            taxable_income=round_cents(taxable_income),
            federal_tax=federal.total,
            state_standard_deduction=state.standard_deduction,
            state_taxable_income=round_cents(state.taxable_income),
            state_tax=state.tax,
            social_security=social_security,
            medicare=medicare,
            additional_medicare=additional_medicare,
            total_fica=total_fica,
            total_taxes=total_taxes,
            annual_net=round_cents(annual_net),
            federal_brackets=federal.details,
            state_brackets=state.details,
            per_period=per_period,
            gross_income=period_breakdown(annual_gross, breakdown_hours),
            taxes_by_period=period_breakdown(total_taxes, breakdown_hours),
            net_income=period_breakdown(annual_net, breakdown_hours),
            pay_stub=pay_stub,
            effective_tax_rate=effective_tax_rate,
            take_home_percentage=take_home_percentage,
            marginal_federal_rate=marginal_rate(taxable_income, federal_table),
            marginal_state_rate=state.marginal_rate,
            federal_source=self.tax_year.federal_source,
            state_source=profile.source,
            fica_source=self.tax_year.fica_source,
            warnings=tuple(warnings),
        )

    def compute_fica(
        self, annual_gross: Decimal, filing_status: FilingStatus
    ) -> tuple[Decimal, Decimal, Decimal]:
        """Social Security, Medicare and Additional Medicare on gross wages.

        Pre-tax deductions do not reduce FICA wages here.
        """
        fica = self.tax_year.fica
        social_security = round_cents(
            min(annual_gross, fica.social_security_wage_base) * fica.social_security_rate
        )
        medicare = round_cents(annual_gross * fica.medicare_rate)
        threshold = fica.additional_medicare_threshold(filing_status)
        additional = round_cents(max(ZERO, annual_gross - threshold) * fica.additional_medicare_rate)
        return social_security, medicare, additional

    def compute_deductions(
        self,
        annual_gross: Decimal,
        pre_tax: PreTaxDeductions,
        post_tax: PostTaxDeductions,
        warnings: list[str],
    ) -> DeductionBreakdown:
        """Apply contribution limits and total the deductions."""
        limits = self.tax_year.deduction_limits

        retirement_401k = pre_tax.retirement_401k
        if pre_tax.retirement_401k_is_percent:
            retirement_401k = annual_gross * pre_tax.retirement_401k / HUNDRED
        retirement_401k = self._cap(retirement_401k, limits.retirement_401k, "401(k)", warnings)
        hsa = self._cap(pre_tax.hsa, limits.hsa, "HSA", warnings)
        fsa = self._cap(pre_tax.fsa, limits.fsa, "FSA", warnings)
        traditional_ira = self._cap(
            pre_tax.traditional_ira, limits.traditional_ira, "Traditional IRA", warnings
        )
        health_insurance = round_cents(pre_tax.health_insurance)
        other_pre_tax = round_cents(pre_tax.other)

        roth_ira = self._cap(post_tax.roth_ira, limits.roth_ira, "Roth IRA", warnings)
        child_support = round_cents(post_tax.child_support)
        student_loan = round_cents(post_tax.student_loan)
        other_post_tax = round_cents(post_tax.other)

        return DeductionBreakdown(
            retirement_401k=retirement_401k,
            hsa=hsa,
            health_insurance=health_insurance,
            fsa=fsa,
            traditional_ira=traditional_ira,
            other_pre_tax=other_pre_tax,
            total_pre_tax=(
                retirement_401k + hsa + health_insurance + fsa + traditional_ira + other_pre_tax
            ),
            roth_ira=roth_ira,
            child_support=child_support,
            student_loan=student_loan,
            other_post_tax=other_post_tax,
            total_post_tax=roth_ira + child_support + student_loan + other_post_tax,
        )

    @staticmethod
    def _cap(amount: Decimal, limit: Decimal, label: str, warnings: list[str]) -> Decimal:
        if amount > limit:
            warnings.append(
                f"{label} contribution of ${amount:,.2f} capped at the annual limit of ${limit:,.2f}"
            )
            return limit
        return round_cents(amount)

    @staticmethod
    def _coerce_frequency(frequency: PayFrequency | str) -> PayFrequency:
        try:
            return PayFrequency(str(frequency).strip().upper())
        except ValueError:
            raise InvalidInputError("frequency", f"unknown pay frequency {frequency!r}") from None

    def _coerce_filing_status(self, filing_status: FilingStatus | str) -> FilingStatus:
        # Accepts full values ("MARRIED_FILING_JOINTLY") or short names ("MFJ")
        key = str(filing_status).strip().upper()
        if key in FilingStatus.__members__:
            status = FilingStatus[key]
        else:
            try:
                status = FilingStatus(key)
            except ValueError:
                raise InvalidInputError(
                    "filing_status", f"unknown filing status {filing_status!r}"
                ) from None
        if status not in self.tax_year.federal_brackets:
            raise InvalidInputError(
                "filing_status", f"no {self.tax_year.year} federal brackets for {status}"
            )
        return status

    @staticmethod
    def _validate_deductions(pre_tax: PreTaxDeductions, post_tax: PostTaxDeductions) -> None:
        for prefix, model in (("pre_tax", pre_tax), ("post_tax", post_tax)):
            for name, value in model.model_dump().items():
                if isinstance(value, Decimal) and (not value.is_finite() or value < 0):
                    raise InvalidInputError(f"{prefix}.{name}", f"must be non-negative, got {value}")
                if isinstance(value, Decimal) and value > MAX_AMOUNT:
                    raise InvalidInputError(
                        f"{prefix}.{name}", f"exceeds maximum of {MAX_AMOUNT:,}, got {value}"
                    )
        if pre_tax.retirement_401k_is_percent and pre_tax.retirement_401k > HUNDRED:
            raise InvalidInputError(
                "pre_tax.retirement_401k", "percentage cannot exceed 100"
            )


def _resolve_tax_year(tax_year: TaxYearConstants | int) -> TaxYearConstants:
    if isinstance(tax_year, TaxYearConstants):
        return tax_year
    return get_tax_year(tax_year)


def calculate_taxes(
    gross_pay: Number,
    frequency: PayFrequency | str,
    filing_status: FilingStatus | str,
    state_code: str,
    tax_year: TaxYearConstants | int = DEFAULT_TAX_YEAR,
    *,
    hours_per_week: Number | None = None,
    weeks_per_year: Number = DEFAULT_WEEKS_PER_YEAR,
    tips_per_hour: Number = ZERO,
    pre_tax: PreTaxDeductions | None = None,
    post_tax: PostTaxDeductions | None = None,
) -> TaxCalculationResult:
    """Compute take-home pay; ``tax_year`` is a year or its constants."""
    engine = PaycheckEngine(_resolve_tax_year(tax_year))
    return engine.calculate(
        gross_pay,
        frequency,
        filing_status,
        state_code,
        hours_per_week=hours_per_week,
        weeks_per_year=weeks_per_year,
        tips_per_hour=tips_per_hour,
        pre_tax=pre_tax,
        post_tax=post_tax,
    )


def quick_estimate(
    hourly_rate: Number,
    hours_per_week: Number = DEFAULT_HOURS_PER_WEEK,
    state_code: str = "TX",
    tax_year: TaxYearConstants | int = DEFAULT_TAX_YEAR,
) -> QuickEstimate:
    """Single filer, no deductions: annual, monthly and weekly gross vs net."""
    result = calculate_taxes(
        hourly_rate,
        PayFrequency.HOURLY,
        FilingStatus.SINGLE,
        state_code,
        tax_year,
        hours_per_week=hours_per_week,
    )
    return QuickEstimate(
        annual_gross=result.gross_income.annual,
        annual_net=result.net_income.annual,
        monthly_gross=result.gross_income.monthly,
        monthly_net=result.net_income.monthly,
        weekly_gross=result.gross_income.weekly,
        weekly_net=result.net_income.weekly,
        effective_tax_rate=result.effective_tax_rate,
    )
