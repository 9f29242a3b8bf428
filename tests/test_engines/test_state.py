"""Tests for state income tax resolution."""

from decimal import Decimal

import pytest

from takehome.engines.brackets import build_brackets
from takehome.engines.state import StateTaxResolver, calculate_state_tax
from takehome.exceptions import InvalidInputError, UnknownJurisdictionError
from takehome.models.enums import FilingStatus, StateTaxMethod
from takehome.models.tax_tables import StateTaxProfile


@pytest.fixture
def resolver(tax_year_2026):
    return StateTaxResolver(tax_year_2026)


class TestNoIncomeTaxStates:
    @pytest.mark.parametrize("code", ["AK", "FL", "NV", "NH", "SD", "TN", "TX", "WA", "WY"])
    def test_zero_tax(self, resolver, code):
        result = resolver.calculate(Decimal("250000"), code, FilingStatus.SINGLE)
        assert result.method == StateTaxMethod.NONE
        assert result.tax == Decimal("0")
        assert result.marginal_rate == Decimal("0")
        assert result.details == ()


class TestFlatStates:
    def test_illinois_no_deduction(self, resolver):
        result = resolver.calculate(Decimal("50000"), "IL", FilingStatus.SINGLE)
        assert result.tax == Decimal("2475.00")
        assert result.standard_deduction == Decimal("0")
        assert result.marginal_rate == Decimal("0.0495")

    def test_pennsylvania(self, resolver):
        result = resolver.calculate(Decimal("50000"), "PA", FilingStatus.SINGLE)
        assert result.tax == Decimal("1535.00")

    def test_north_carolina_with_deduction(self, resolver):
        """(50,000 - 12,750) x 4.75% = 1,769.375 -> 1,769.38."""
        result = resolver.calculate(Decimal("50000"), "NC", FilingStatus.SINGLE)
        assert result.taxable_income == Decimal("37250")
        assert result.tax == Decimal("1769.38")

    def test_income_below_deduction(self, resolver):
        result = resolver.calculate(Decimal("10000"), "NC", FilingStatus.SINGLE)
        assert result.taxable_income == Decimal("0")
        assert result.tax == Decimal("0.00")


class TestProgressiveStates:
    def test_california_single_50k(self, resolver):
        """Taxable 44,460: 104.12 + 285.44 + 571.00 + 330.06 = 1,290.62."""
        result = resolver.calculate(Decimal("50000"), "CA", FilingStatus.SINGLE)
        assert result.standard_deduction == Decimal("5540")
        assert result.taxable_income == Decimal("44460")
        assert result.tax == Decimal("1290.62")
        assert result.marginal_rate == Decimal("0.06")
        assert len(result.details) == 4

    def test_california_mfj_uses_married_table(self, resolver):
        """Taxable 88,920: 208.24 + 570.88 + 1,142.00 + 660.12 = 2,581.24."""
        result = resolver.calculate(Decimal("100000"), "CA", FilingStatus.MFJ)
        assert result.taxable_income == Decimal("88920")
        assert result.tax == Decimal("2581.24")

    def test_income_below_deduction(self, resolver):
        result = resolver.calculate(Decimal("5000"), "CA", FilingStatus.SINGLE)
        assert result.tax == Decimal("0.00")
        assert result.details == ()

    def test_state_without_deduction(self, resolver):
        """WV taxes from the first dollar: 10,000 x 2.36% + 5,000 x 3.15%."""
        result = resolver.calculate(Decimal("15000"), "WV", FilingStatus.SINGLE)
        assert result.standard_deduction == Decimal("0")
        assert result.tax == Decimal("393.50")

    def test_missing_filing_status_table(self, tax_year_2026):
        profile = StateTaxProfile(
            code="CA",
            name="California",
            method=StateTaxMethod.PROGRESSIVE,
            brackets={FilingStatus.SINGLE: build_brackets([(None, Decimal("0.05"))])},
        )
        constants = tax_year_2026.model_copy(update={"states": {"CA": profile}})
        with pytest.raises(InvalidInputError) as exc_info:
            StateTaxResolver(constants).calculate(Decimal("1000"), "CA", FilingStatus.MFJ)
        assert exc_info.value.field == "filing_status"


class TestResolver:
    def test_unknown_state(self, resolver):
        with pytest.raises(UnknownJurisdictionError) as exc_info:
            resolver.calculate(Decimal("50000"), "ZZ", FilingStatus.SINGLE)
        assert exc_info.value.state_code == "ZZ"

    def test_code_normalized(self, resolver):
        result = resolver.calculate(Decimal("50000"), " ca ", FilingStatus.SINGLE)
        assert result.state_code == "CA"
        assert result.state_name == "California"

    @pytest.mark.parametrize("code", [None, 6, b"CA"])
    def test_non_string_code(self, resolver, code):
        with pytest.raises(InvalidInputError) as exc_info:
            resolver.calculate(Decimal("50000"), code, FilingStatus.SINGLE)
        assert exc_info.value.field == "state_code"

    def test_negative_income(self, resolver):
        with pytest.raises(InvalidInputError):
            resolver.calculate(Decimal("-1"), "CA", FilingStatus.SINGLE)

    def test_marginal_rate(self, resolver):
        assert resolver.marginal_rate(Decimal("50000"), "NY", FilingStatus.SINGLE) == Decimal("0.055")

    def test_module_function(self, tax_year_2026):
        result = calculate_state_tax(Decimal("50000"), "IL", FilingStatus.SINGLE, tax_year_2026)
        assert result.tax == Decimal("2475.00")
