"""Reference-data models for tax-year tables.

Brackets, FICA constants, state profiles and source citations. Instances are
frozen and their mappings are read-only views: a calculation reads them,
never mutates them.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, model_validator

from takehome.models.enums import FilingStatus, StateTaxMethod, UpdateFrequency


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)


K = TypeVar("K")
V = TypeVar("V")


def _freeze(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


def _thaw(mapping: Mapping) -> dict:
    return dict(mapping)


# Validated as a dict, stored as a read-only view, serialized back to a dict
FrozenDict = Annotated[dict[K, V], AfterValidator(_freeze), PlainSerializer(_thaw)]


class TaxBracket(ImmutableModel):
    """Half-open income interval ``[min, max)`` taxed at ``rate``.

    ``max`` is None for the top (unbounded) bracket.
    """

    min: Decimal
    max: Decimal | None = None
    rate: Decimal

    @model_validator(mode="after")
    def _validate_values(self) -> "TaxBracket":
        if self.rate < 0:
            raise ValueError("Tax rates must be non-negative")
        if self.min < 0:
            raise ValueError("Bracket lower bounds must be non-negative")
        if self.max is not None and self.max <= self.min:
            raise ValueError(f"Bracket upper bound {self.max} must exceed lower bound {self.min}")
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.max is None


def validate_bracket_table(brackets: tuple[TaxBracket, ...], label: str) -> None:
    """Check that a bracket table is contiguous, sorted and open-ended.

    Raises:
        ValueError: if the first bracket does not start at 0, a bracket does
            not begin where the previous one ended, or the last bracket is
            bounded.
    """
    if not brackets:
        raise ValueError(f"{label}: bracket table is empty")
    if brackets[0].min != 0:
        raise ValueError(f"{label}: first bracket must start at 0, got {brackets[0].min}")
    for prev, current in zip(brackets, brackets[1:]):
        if prev.max is None:
            raise ValueError(f"{label}: only the last bracket may be unbounded")
        if current.min != prev.max:
            raise ValueError(
                f"{label}: gap or overlap between {prev.max} and {current.min}"
            )
    if brackets[-1].max is not None:
        raise ValueError(f"{label}: last bracket must be unbounded")


class DataSource(ImmutableModel):
    """Citation for a piece of reference data."""

    name: str
    organization: str
    url: str
    last_verified: date
    update_frequency: UpdateFrequency = UpdateFrequency.ANNUAL
    data_types: tuple[str, ...] = ()
    notes: str | None = None


class FICAConstants(ImmutableModel):
    """Payroll-tax constants for a single tax year."""

    social_security_rate: Decimal
    social_security_wage_base: Decimal
    medicare_rate: Decimal
    additional_medicare_rate: Decimal
    additional_medicare_thresholds: FrozenDict[FilingStatus, Decimal]

    def additional_medicare_threshold(self, filing_status: FilingStatus) -> Decimal:
        return self.additional_medicare_thresholds[filing_status]


class DeductionLimits(ImmutableModel):
    """Annual contribution caps applied to pre-tax and Roth deductions."""

    retirement_401k: Decimal
    hsa: Decimal
    fsa: Decimal
    traditional_ira: Decimal
    roth_ira: Decimal


class StateTaxProfile(ImmutableModel):
    """Income-tax profile of a single state (or DC).

    ``method`` selects the calculation: PROGRESSIVE states carry a bracket
    table per filing status, FLAT states a single rate, NONE states neither.
    A filing status missing from ``standard_deduction`` deducts nothing.
    """

    code: str
    name: str
    method: StateTaxMethod
    brackets: FrozenDict[FilingStatus, tuple[TaxBracket, ...]] = Field(default_factory=dict)
    flat_rate: Decimal | None = None
    standard_deduction: FrozenDict[FilingStatus, Decimal] = Field(default_factory=dict)
    source: DataSource | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _validate_method(self) -> "StateTaxProfile":
        if self.method == StateTaxMethod.PROGRESSIVE:
            if not self.brackets:
                raise ValueError(f"{self.code}: progressive states require brackets")
            for status, table in self.brackets.items():
                validate_bracket_table(table, f"{self.code}/{status}")
        elif self.method == StateTaxMethod.FLAT:
            if self.flat_rate is None or self.flat_rate < 0:
                raise ValueError(f"{self.code}: flat-tax states require a non-negative rate")
            if self.brackets:
                raise ValueError(f"{self.code}: flat-tax states carry no brackets")
        else:
            if self.brackets or self.flat_rate is not None:
                raise ValueError(f"{self.code}: no-tax states carry no rates")
        return self

    def deduction_for(self, filing_status: FilingStatus) -> Decimal:
        return self.standard_deduction.get(filing_status, Decimal("0"))

    @property
    def top_rate(self) -> Decimal:
        """Highest marginal rate across all filing statuses."""
        if self.method == StateTaxMethod.FLAT:
            return self.flat_rate or Decimal("0")
        if self.method == StateTaxMethod.NONE:
            return Decimal("0")
        return max(b.rate for table in self.brackets.values() for b in table)


class TaxYearConstants(ImmutableModel):
    """Every reference table one calculation needs, for one tax year."""

    year: int
    federal_brackets: FrozenDict[FilingStatus, tuple[TaxBracket, ...]]
    federal_standard_deduction: FrozenDict[FilingStatus, Decimal]
    fica: FICAConstants
    states: FrozenDict[str, StateTaxProfile]
    deduction_limits: DeductionLimits
    federal_source: DataSource | None = None
    fica_source: DataSource | None = None

    @model_validator(mode="after")
    def _validate_tables(self) -> "TaxYearConstants":
        for status, table in self.federal_brackets.items():
            validate_bracket_table(table, f"federal/{status}")
            if status not in self.federal_standard_deduction:
                raise ValueError(f"federal/{status}: missing standard deduction")
            if status not in self.fica.additional_medicare_thresholds:
                raise ValueError(f"federal/{status}: missing Additional Medicare threshold")
        for code, profile in self.states.items():
            if code != profile.code:
                raise ValueError(f"State key {code!r} does not match profile code {profile.code!r}")
        return self

    @property
    def filing_statuses(self) -> list[FilingStatus]:
        return list(self.federal_brackets)
