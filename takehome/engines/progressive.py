"""Progressive bracket tax computation."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from takehome.exceptions import InvalidInputError
from takehome.models.reports import BracketComputation, BracketDetail
from takehome.models.tax_tables import TaxBracket

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to cents.

    The context precision is widened to the integer digits plus two, so an
    amount with more than 26 integer digits still quantizes.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_progressive_tax(
    taxable_income: Decimal, brackets: tuple[TaxBracket, ...]
) -> BracketComputation:
    """Apply a bracket table to ``taxable_income``.

    Each bracket taxes the part of the income inside ``[min, max)``. Detail
    amounts are left unrounded; only the total is rounded to cents, so the
    details' ``amount_taxed`` sum exactly to the income.

    Raises:
        InvalidInputError: if ``taxable_income`` is negative.
    """
    if taxable_income < 0:
        raise InvalidInputError("taxable_income", f"must be non-negative, got {taxable_income}")

    details: list[BracketDetail] = []
    cumulative = ZERO
    for bracket in brackets:
        if bracket.min >= taxable_income:
            break
        upper = taxable_income if bracket.max is None else min(bracket.max, taxable_income)
        amount = upper - bracket.min
        if amount <= 0:
            continue
        tax = amount * bracket.rate
        cumulative += tax
        details.append(
            BracketDetail(
                min=bracket.min,
                max=bracket.max,
                rate=bracket.rate,
                amount_taxed=amount,
                tax_owed=tax,
                cumulative_tax=cumulative,
            )
        )

    return BracketComputation(
        taxable_income=taxable_income,
        total=round_cents(cumulative),
        details=tuple(details),
    )


def marginal_rate(taxable_income: Decimal, brackets: tuple[TaxBracket, ...]) -> Decimal:
    """Rate of the bracket containing ``taxable_income``."""
    for bracket in brackets:
        if bracket.max is None or taxable_income < bracket.max:
            return bracket.rate
    return brackets[-1].rate if brackets else ZERO
