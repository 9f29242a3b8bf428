"""Federal tax bracket configuration.

Federal brackets, standard deductions, FICA constants and contribution limits.
Keyed by tax year and filing status. Never hardcode brackets in computation functions.

Sources:
  - 2026: IRS Publication 15-T (2026), IRS Publication 15 (2026)
"""

from decimal import Decimal

from takehome.models.enums import FilingStatus
from takehome.models.tax_tables import DeductionLimits, FICAConstants, TaxBracket


def build_brackets(bounds: list[tuple[Decimal | None, Decimal]]) -> tuple[TaxBracket, ...]:
    """Expand ``(upper_bound, rate)`` pairs into contiguous brackets starting at 0.

    Upper bound is Decimal or None for the top bracket.
    """
    brackets: list[TaxBracket] = []
    prev_bound = Decimal("0")
    for upper_bound, rate in bounds:
        brackets.append(TaxBracket(min=prev_bound, max=upper_bound, rate=rate))
        if upper_bound is None:
            break
        prev_bound = upper_bound
    return tuple(brackets)


# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: brackets}}
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, tuple[TaxBracket, ...]]] = {
    2026: {
        FilingStatus.SINGLE: build_brackets([
            (Decimal("12150"), Decimal("0.10")),
            (Decimal("49400"), Decimal("0.12")),
            (Decimal("105400"), Decimal("0.22")),
            (Decimal("201200"), Decimal("0.24")),
            (Decimal("255600"), Decimal("0.32")),
            (Decimal("639200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ]),
        FilingStatus.MFJ: build_brackets([
            (Decimal("24300"), Decimal("0.10")),
            (Decimal("98800"), Decimal("0.12")),
            (Decimal("210800"), Decimal("0.22")),
            (Decimal("402400"), Decimal("0.24")),
            (Decimal("511200"), Decimal("0.32")),
            (Decimal("767200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ]),
        FilingStatus.MFS: build_brackets([
            (Decimal("12150"), Decimal("0.10")),
            (Decimal("49400"), Decimal("0.12")),
            (Decimal("105400"), Decimal("0.22")),
            (Decimal("201200"), Decimal("0.24")),
            (Decimal("255600"), Decimal("0.32")),
            (Decimal("383600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ]),
        FilingStatus.HOH: build_brackets([
            (Decimal("17300"), Decimal("0.10")),
            (Decimal("66050"), Decimal("0.12")),
            (Decimal("105400"), Decimal("0.22")),
            (Decimal("201200"), Decimal("0.24")),
            (Decimal("255600"), Decimal("0.32")),
            (Decimal("639200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ]),
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2026: {
        FilingStatus.SINGLE: Decimal("15000"),
        FilingStatus.MFJ: Decimal("30000"),
        FilingStatus.MFS: Decimal("15000"),
        FilingStatus.HOH: Decimal("22500"),
    },
}

# ---------------------------------------------------------------------------
# FICA (IRS Publication 15). Additional Medicare thresholds are statutory
# (IRC Section 3101(b)(2)) and NOT inflation-adjusted.
# ---------------------------------------------------------------------------
FICA: dict[int, FICAConstants] = {
    2026: FICAConstants(
        social_security_rate=Decimal("0.062"),
        social_security_wage_base=Decimal("184500"),
        medicare_rate=Decimal("0.0145"),
        additional_medicare_rate=Decimal("0.009"),
        additional_medicare_thresholds={
            FilingStatus.SINGLE: Decimal("200000"),
            FilingStatus.MFJ: Decimal("250000"),
            FilingStatus.MFS: Decimal("125000"),
            FilingStatus.HOH: Decimal("200000"),
        },
    ),
}
FICA_2026 = FICA[2026]

# ---------------------------------------------------------------------------
# Annual contribution limits for payroll deductions
# ---------------------------------------------------------------------------
DEDUCTION_LIMITS: dict[int, DeductionLimits] = {
    2026: DeductionLimits(
        retirement_401k=Decimal("23500"),
        hsa=Decimal("4300"),  # self-only coverage
        fsa=Decimal("3200"),
        traditional_ira=Decimal("7000"),
        roth_ira=Decimal("7000"),
    ),
}
