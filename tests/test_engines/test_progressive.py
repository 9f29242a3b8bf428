"""Tests for progressive bracket computation."""

from decimal import Decimal

import pytest

from takehome.engines.brackets import FEDERAL_BRACKETS, build_brackets
from takehome.engines.progressive import calculate_progressive_tax, marginal_rate, round_cents
from takehome.exceptions import InvalidInputError
from takehome.models.enums import FilingStatus

SINGLE = FEDERAL_BRACKETS[2026][FilingStatus.SINGLE]


class TestCalculateProgressiveTax:
    def test_zero_income(self):
        result = calculate_progressive_tax(Decimal("0"), SINGLE)
        assert result.total == Decimal("0.00")
        assert result.details == ()

    def test_negative_income_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_progressive_tax(Decimal("-1"), SINGLE)
        assert exc_info.value.field == "taxable_income"

    def test_two_brackets(self):
        """$35,000: 10% x 12,150 + 12% x 22,850 = 1,215 + 2,742 = 3,957."""
        result = calculate_progressive_tax(Decimal("35000"), SINGLE)
        assert result.total == Decimal("3957.00")
        assert len(result.details) == 2
        assert result.details[0].tax_owed == Decimal("1215.00")
        assert result.details[1].amount_taxed == Decimal("22850")
        assert result.details[-1].cumulative_tax == Decimal("3957.00")

    def test_income_on_bracket_boundary(self):
        result = calculate_progressive_tax(Decimal("12150"), SINGLE)
        assert result.total == Decimal("1215.00")
        assert len(result.details) == 1

    def test_top_bracket(self):
        """$485,000 single spans six brackets."""
        result = calculate_progressive_tax(Decimal("485000"), SINGLE)
        assert result.total == Decimal("138695.00")
        assert result.details[-1].rate == Decimal("0.35")

    def test_amounts_sum_to_income(self):
        for income in ["1", "12150", "49400.50", "250000", "1000000"]:
            result = calculate_progressive_tax(Decimal(income), SINGLE)
            assert sum(d.amount_taxed for d in result.details) == Decimal(income)

    def test_only_total_is_rounded(self):
        result = calculate_progressive_tax(Decimal("0.05"), SINGLE)
        assert result.details[0].tax_owed == Decimal("0.0050")
        assert result.total == Decimal("0.01")

    def test_monotone_in_income(self):
        previous = Decimal("0")
        for income in range(0, 800_001, 25_000):
            total = calculate_progressive_tax(Decimal(income), SINGLE).total
            assert total >= previous
            previous = total

    def test_zero_rate_bracket_has_no_tax(self):
        table = build_brackets([(Decimal("1000"), Decimal("0")), (None, Decimal("0.10"))])
        result = calculate_progressive_tax(Decimal("1500"), table)
        assert result.total == Decimal("50.00")
        assert result.details[0].tax_owed == Decimal("0")


class TestMarginalRate:
    def test_first_bracket(self):
        assert marginal_rate(Decimal("1000"), SINGLE) == Decimal("0.10")

    def test_boundary_belongs_to_next_bracket(self):
        assert marginal_rate(Decimal("12150"), SINGLE) == Decimal("0.12")

    def test_above_all_bounds(self):
        assert marginal_rate(Decimal("10000000"), SINGLE) == Decimal("0.37")

    def test_zero_income(self):
        assert marginal_rate(Decimal("0"), SINGLE) == Decimal("0.10")


class TestRoundCents:
    def test_half_up(self):
        assert round_cents(Decimal("1.005")) == Decimal("1.01")
        assert round_cents(Decimal("1.004")) == Decimal("1.00")

    def test_beyond_default_context_precision(self):
        amount = Decimal("123456789012345678901234567.891")
        assert round_cents(amount) == Decimal("123456789012345678901234567.89")
        assert round_cents(Decimal("1e27")) == Decimal("1000000000000000000000000000.00")
