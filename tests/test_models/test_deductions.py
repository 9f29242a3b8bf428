"""Tests for payroll deduction models."""

from decimal import Decimal

from takehome.models.deductions import DeductionBreakdown, PostTaxDeductions, PreTaxDeductions


class TestPreTaxDeductions:
    def test_defaults(self):
        pre_tax = PreTaxDeductions()
        assert pre_tax.retirement_401k == Decimal("0")
        assert pre_tax.retirement_401k_is_percent is False
        assert pre_tax.hsa == Decimal("0")

    def test_numbers_coerced_to_decimal(self):
        pre_tax = PreTaxDeductions(hsa=1000.5, fsa="250")
        assert pre_tax.hsa == Decimal("1000.5")
        assert pre_tax.fsa == Decimal("250")


class TestPostTaxDeductions:
    def test_defaults(self):
        post_tax = PostTaxDeductions()
        assert post_tax.roth_ira == post_tax.child_support == Decimal("0")


class TestDeductionBreakdown:
    def test_compute_deductions_totals(self, engine):
        warnings: list[str] = []
        breakdown = engine.compute_deductions(
            Decimal("80000"),
            PreTaxDeductions(retirement_401k=Decimal("5"), retirement_401k_is_percent=True,
                             health_insurance=Decimal("1200")),
            PostTaxDeductions(student_loan=Decimal("2400"), other=Decimal("100")),
            warnings,
        )
        assert isinstance(breakdown, DeductionBreakdown)
        assert breakdown.retirement_401k == Decimal("4000.00")
        assert breakdown.total_pre_tax == Decimal("5200.00")
        assert breakdown.total_post_tax == Decimal("2500.00")
        assert warnings == []

    def test_cap_warning(self, engine):
        warnings: list[str] = []
        breakdown = engine.compute_deductions(
            Decimal("80000"),
            PreTaxDeductions(fsa=Decimal("5000")),
            PostTaxDeductions(),
            warnings,
        )
        assert breakdown.fsa == Decimal("3200")
        assert warnings == [
            "FSA contribution of $5,000.00 capped at the annual limit of $3,200.00"
        ]
