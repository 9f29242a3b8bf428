"""Tests for reference-data model validation."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from takehome.engines.brackets import build_brackets
from takehome.models.enums import FilingStatus, StateTaxMethod
from takehome.models.tax_tables import (
    DataSource,
    StateTaxProfile,
    TaxBracket,
    validate_bracket_table,
)

FLAT_5 = build_brackets([(None, Decimal("0.05"))])


class TestTaxBracket:
    def test_valid(self):
        bracket = TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("0.1"))
        assert not bracket.is_unbounded

    def test_negative_rate(self):
        with pytest.raises(ValidationError):
            TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("-0.1"))

    def test_max_not_above_min(self):
        with pytest.raises(ValidationError):
            TaxBracket(min=Decimal("100"), max=Decimal("100"), rate=Decimal("0.1"))

    def test_negative_min(self):
        with pytest.raises(ValidationError):
            TaxBracket(min=Decimal("-1"), max=None, rate=Decimal("0.1"))

    def test_frozen(self):
        bracket = TaxBracket(min=Decimal("0"), rate=Decimal("0.1"))
        with pytest.raises(ValidationError):
            bracket.rate = Decimal("0.2")

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            TaxBracket(min=Decimal("0"), rate=Decimal("0.1"), label="bottom")


class TestValidateBracketTable:
    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            validate_bracket_table((), "t")

    def test_must_start_at_zero(self):
        table = (TaxBracket(min=Decimal("10"), rate=Decimal("0.1")),)
        with pytest.raises(ValueError, match="start at 0"):
            validate_bracket_table(table, "t")

    def test_gap(self):
        table = (
            TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("0.1")),
            TaxBracket(min=Decimal("150"), rate=Decimal("0.2")),
        )
        with pytest.raises(ValueError, match="gap or overlap"):
            validate_bracket_table(table, "t")

    def test_overlap(self):
        table = (
            TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("0.1")),
            TaxBracket(min=Decimal("50"), rate=Decimal("0.2")),
        )
        with pytest.raises(ValueError, match="gap or overlap"):
            validate_bracket_table(table, "t")

    def test_unbounded_in_middle(self):
        table = (
            TaxBracket(min=Decimal("0"), rate=Decimal("0.1")),
            TaxBracket(min=Decimal("100"), rate=Decimal("0.2")),
        )
        with pytest.raises(ValueError, match="only the last"):
            validate_bracket_table(table, "t")

    def test_bounded_last(self):
        table = (TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("0.1")),)
        with pytest.raises(ValueError, match="unbounded"):
            validate_bracket_table(table, "t")


class TestStateTaxProfile:
    def test_progressive_requires_brackets(self):
        with pytest.raises(ValidationError):
            StateTaxProfile(code="XX", name="X", method=StateTaxMethod.PROGRESSIVE)

    def test_progressive_validates_tables(self):
        bad = (TaxBracket(min=Decimal("0"), max=Decimal("100"), rate=Decimal("0.1")),)
        with pytest.raises(ValidationError):
            StateTaxProfile(
                code="XX", name="X", method=StateTaxMethod.PROGRESSIVE,
                brackets={FilingStatus.SINGLE: bad},
            )

    def test_flat_requires_rate(self):
        with pytest.raises(ValidationError):
            StateTaxProfile(code="XX", name="X", method=StateTaxMethod.FLAT)

    def test_flat_rejects_brackets(self):
        with pytest.raises(ValidationError):
            StateTaxProfile(
                code="XX", name="X", method=StateTaxMethod.FLAT, flat_rate=Decimal("0.05"),
                brackets={FilingStatus.SINGLE: FLAT_5},
            )

    def test_none_rejects_rates(self):
        with pytest.raises(ValidationError):
            StateTaxProfile(code="XX", name="X", method=StateTaxMethod.NONE, flat_rate=Decimal("0.01"))

    def test_deduction_defaults_to_zero(self):
        profile = StateTaxProfile(
            code="XX", name="X", method=StateTaxMethod.FLAT, flat_rate=Decimal("0.05"),
            standard_deduction={FilingStatus.SINGLE: Decimal("1000")},
        )
        assert profile.deduction_for(FilingStatus.SINGLE) == Decimal("1000")
        assert profile.deduction_for(FilingStatus.MFJ) == Decimal("0")


class TestTaxYearConstants:
    def test_state_key_must_match_code(self, tax_year_2026):
        data = tax_year_2026.model_dump()
        data["states"] = {"ZZ": tax_year_2026.states["CA"].model_dump()}
        with pytest.raises(ValidationError, match="does not match"):
            type(tax_year_2026).model_validate(data)

    def test_missing_standard_deduction(self, tax_year_2026):
        data = tax_year_2026.model_dump()
        del data["federal_standard_deduction"][FilingStatus.HOH]
        with pytest.raises(ValidationError, match="standard deduction"):
            type(tax_year_2026).model_validate(data)


class TestDataSource:
    def test_defaults(self):
        source = DataSource(
            name="n", organization="o", url="https://example.org", last_verified=date(2026, 1, 1)
        )
        assert source.data_types == ()
        assert source.notes is None


class TestReadOnlyTables:
    def test_state_deduction_cannot_be_mutated(self, tax_year_2026):
        with pytest.raises(TypeError):
            tax_year_2026.states["CA"].standard_deduction[FilingStatus.SINGLE] = Decimal("0")

    def test_state_brackets_cannot_be_mutated(self, tax_year_2026):
        with pytest.raises(TypeError):
            tax_year_2026.states["CA"].brackets[FilingStatus.SINGLE] = FLAT_5

    def test_states_cannot_be_replaced(self, tax_year_2026):
        with pytest.raises(TypeError):
            del tax_year_2026.states["CA"]

    def test_federal_tables_cannot_be_mutated(self, tax_year_2026):
        with pytest.raises(TypeError):
            tax_year_2026.federal_standard_deduction[FilingStatus.SINGLE] = Decimal("0")
        with pytest.raises(TypeError):
            tax_year_2026.federal_brackets[FilingStatus.SINGLE] = FLAT_5
        with pytest.raises(TypeError):
            tax_year_2026.fica.additional_medicare_thresholds[FilingStatus.SINGLE] = Decimal("0")

    def test_default_mapping_is_read_only(self):
        profile = StateTaxProfile(code="XX", name="X", method=StateTaxMethod.NONE)
        assert profile.deduction_for(FilingStatus.SINGLE) == Decimal("0")
        with pytest.raises(TypeError):
            profile.standard_deduction[FilingStatus.SINGLE] = Decimal("1")

    def test_input_dict_is_copied(self):
        deductions = {FilingStatus.SINGLE: Decimal("1000")}
        profile = StateTaxProfile(
            code="XX", name="X", method=StateTaxMethod.FLAT, flat_rate=Decimal("0.05"),
            standard_deduction=deductions,
        )
        deductions[FilingStatus.SINGLE] = Decimal("0")
        assert profile.deduction_for(FilingStatus.SINGLE) == Decimal("1000")

    def test_dump_is_plain_dict(self, tax_year_2026):
        data = tax_year_2026.states["CA"].model_dump(mode="json")
        assert isinstance(data["brackets"], dict)
        assert data["standard_deduction"]["SINGLE"] == "5540"
