"""Tests for the paycheck summary report."""

from decimal import Decimal

from takehome.models.deductions import PreTaxDeductions
from takehome.models.enums import FilingStatus, PayFrequency
from takehome.reports.paycheck_summary import PaycheckSummaryGenerator, currency, percent


class TestFilters:
    def test_currency(self):
        assert currency(Decimal("1234.5")) == "$1,234.50"
        assert currency(Decimal("-5")) == "-$5.00"

    def test_percent(self):
        assert percent(Decimal("18.15")) == "18.15%"
        assert percent(Decimal("0.12"), True) == "12.00%"


class TestPaycheckSummaryGenerator:
    def test_render_ca_single(self, ca_single_50k):
        output = PaycheckSummaryGenerator().render(ca_single_50k)
        assert "TAKE-HOME PAY SUMMARY  2026" in output
        assert "California (CA, progressive)" in output
        assert "$50,000.00" in output
        assert "$3,957.00" in output
        assert "$1,290.62" in output
        assert "$40,927.38" in output
        assert "18.15%" in output
        assert "12.00%" in output
        assert "BI-WEEKLY PAY STUB" in output
        assert "IRS Publication 15-T" in output
        assert "California Franchise Tax Board" in output
        assert "informational" in output
        assert "WARNINGS" not in output
        assert "Additional Medicare" not in output

    def test_render_with_warnings_and_hours(self, engine):
        result = engine.calculate(
            Decimal("120"), PayFrequency.HOURLY, FilingStatus.SINGLE, "WA",
            hours_per_week=Decimal("40"),
            pre_tax=PreTaxDeductions(retirement_401k=Decimal("40000")),
        )
        output = PaycheckSummaryGenerator().render(result)
        assert "Hours per week:" in output
        assert "Pre-tax deductions:" in output
        assert "Additional Medicare:" in output
        assert "WARNINGS" in output
        assert "401(k)" in output
