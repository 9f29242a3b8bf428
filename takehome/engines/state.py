"""State income tax resolution.

Dispatches on ``StateTaxProfile.method``: no-tax states owe nothing, flat
states apply one rate after the state standard deduction, progressive
states run the bracket calculator on the same reduced income.
"""

import logging
from decimal import Decimal

from takehome.engines.progressive import ZERO, calculate_progressive_tax, marginal_rate, round_cents
from takehome.exceptions import InvalidInputError, UnknownJurisdictionError
from takehome.models.enums import FilingStatus, StateTaxMethod
from takehome.models.reports import StateTaxResult
from takehome.models.tax_tables import StateTaxProfile, TaxYearConstants

logger = logging.getLogger(__name__)


def normalize_state_code(state_code: str) -> str:
    if not isinstance(state_code, str):
        raise InvalidInputError("state_code", f"expected a state code, got {state_code!r}")
    return state_code.strip().upper()


class StateTaxResolver:
    """Compute state income tax from one tax year's state profiles."""

    def __init__(self, tax_year: TaxYearConstants):
        self.tax_year = tax_year

    def profile(self, state_code: str) -> StateTaxProfile:
        code = normalize_state_code(state_code)
        try:
            return self.tax_year.states[code]
        except KeyError:
            raise UnknownJurisdictionError(state_code) from None

    def calculate(
        self, state_income: Decimal, state_code: str, filing_status: FilingStatus
    ) -> StateTaxResult:
        """Tax ``state_income`` (annual gross less pre-tax deductions).

        Raises:
            UnknownJurisdictionError: if the state code is not modelled.
            InvalidInputError: if the income is negative or the state has no
                bracket table for ``filing_status``.
        """
        profile = self.profile(state_code)
        if state_income < 0:
            raise InvalidInputError("state_income", f"must be non-negative, got {state_income}")

        if profile.method == StateTaxMethod.NONE:
            return StateTaxResult(
                state_code=profile.code,
                state_name=profile.name,
                method=profile.method,
                standard_deduction=ZERO,
                taxable_income=ZERO,
                tax=ZERO,
                marginal_rate=ZERO,
            )

        deduction = profile.deduction_for(filing_status)
        taxable = max(ZERO, state_income - deduction)

        if profile.method == StateTaxMethod.FLAT:
            rate = profile.flat_rate or ZERO
            tax = round_cents(taxable * rate)
            logger.debug("%s flat tax: %s x %s = %s", profile.code, taxable, rate, tax)
            return StateTaxResult(
                state_code=profile.code,
                state_name=profile.name,
                method=profile.method,
                standard_deduction=deduction,
                taxable_income=taxable,
                tax=tax,
                marginal_rate=rate,
            )

        table = profile.brackets.get(filing_status)
        if table is None:
            raise InvalidInputError(
                "filing_status", f"{profile.code} has no brackets for {filing_status}"
            )
        computation = calculate_progressive_tax(taxable, table)
        logger.debug("%s progressive tax on %s = %s", profile.code, taxable, computation.total)
        return StateTaxResult(
            state_code=profile.code,
            state_name=profile.name,
            method=profile.method,
            standard_deduction=deduction,
            taxable_income=taxable,
            tax=computation.total,
            marginal_rate=marginal_rate(taxable, table),
            details=computation.details,
        )

    def marginal_rate(
        self, state_income: Decimal, state_code: str, filing_status: FilingStatus
    ) -> Decimal:
        return self.calculate(state_income, state_code, filing_status).marginal_rate


def calculate_state_tax(
    state_income: Decimal,
    state_code: str,
    filing_status: FilingStatus,
    tax_year: TaxYearConstants,
) -> StateTaxResult:
    return StateTaxResolver(tax_year).calculate(state_income, state_code, filing_status)
