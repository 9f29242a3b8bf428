"""Payroll deduction models.

Pre-tax deductions reduce federal and state taxable income (not FICA wages);
post-tax deductions only reduce take-home pay. All amounts are annual.
The engine applies the tax year's contribution limits.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class PreTaxDeductions(BaseModel):
    """Annual pre-tax payroll deductions."""

    retirement_401k: Decimal = Field(
        default=Decimal("0"),
        description="Traditional 401(k) deferral: dollars, or percent of gross when flagged",
    )
    retirement_401k_is_percent: bool = Field(
        default=False,
        description="Treat retirement_401k as a percentage of annual gross (e.g. 6 = 6%)",
    )
    hsa: Decimal = Field(default=Decimal("0"), description="Health savings account contribution")
    health_insurance: Decimal = Field(
        default=Decimal("0"), description="Pre-tax portion of health insurance premiums"
    )
    fsa: Decimal = Field(default=Decimal("0"), description="Flexible spending account election")
    traditional_ira: Decimal = Field(
        default=Decimal("0"), description="Traditional IRA contribution"
    )
    other: Decimal = Field(default=Decimal("0"), description="Other pre-tax deductions")


class PostTaxDeductions(BaseModel):
    """Annual after-tax deductions. They never change the tax owed."""

    roth_ira: Decimal = Field(default=Decimal("0"), description="Roth IRA contribution")
    child_support: Decimal = Field(default=Decimal("0"))
    student_loan: Decimal = Field(default=Decimal("0"))
    other: Decimal = Field(default=Decimal("0"))


class DeductionBreakdown(BaseModel):
    """Deductions actually applied, after contribution limits."""

    retirement_401k: Decimal = Decimal("0")
    hsa: Decimal = Decimal("0")
    health_insurance: Decimal = Decimal("0")
    fsa: Decimal = Decimal("0")
    traditional_ira: Decimal = Decimal("0")
    other_pre_tax: Decimal = Decimal("0")
    total_pre_tax: Decimal = Decimal("0")

    roth_ira: Decimal = Decimal("0")
    child_support: Decimal = Decimal("0")
    student_loan: Decimal = Decimal("0")
    other_post_tax: Decimal = Decimal("0")
    total_post_tax: Decimal = Decimal("0")
