"""Data models for takehome."""

from takehome.models.deductions import DeductionBreakdown, PostTaxDeductions, PreTaxDeductions
from takehome.models.enums import FilingStatus, PayFrequency, StateTaxMethod, UpdateFrequency
from takehome.models.reports import (
    BracketComputation,
    BracketDetail,
    PayStub,
    PeriodAmounts,
    PeriodBreakdown,
    QuickEstimate,
    StateTaxResult,
    TaxCalculationResult,
)
from takehome.models.tax_tables import (
    DataSource,
    DeductionLimits,
    FICAConstants,
    StateTaxProfile,
    TaxBracket,
    TaxYearConstants,
)

__all__ = [
    "BracketComputation",
    "BracketDetail",
    "DataSource",
    "DeductionBreakdown",
    "DeductionLimits",
    "FICAConstants",
    "FilingStatus",
    "PayFrequency",
    "PayStub",
    "PeriodAmounts",
    "PeriodBreakdown",
    "PostTaxDeductions",
    "PreTaxDeductions",
    "QuickEstimate",
    "StateTaxMethod",
    "StateTaxProfile",
    "StateTaxResult",
    "TaxBracket",
    "TaxCalculationResult",
    "TaxYearConstants",
    "UpdateFrequency",
]
