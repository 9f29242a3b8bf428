"""Report generation for takehome."""

from takehome.reports.paycheck_summary import PaycheckSummaryGenerator

__all__ = ["PaycheckSummaryGenerator"]
