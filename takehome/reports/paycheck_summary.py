"""Paycheck summary report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from takehome.engines.sources import TAX_DISCLAIMER, format_source_citation
from takehome.models.reports import TaxCalculationResult

TEMPLATE_DIR = Path(__file__).parent / "templates"


def currency(value: Decimal) -> str:
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def percent(value: Decimal, is_fraction: bool = False) -> str:
    """Format a percentage; ``is_fraction`` for rates stored as 0.22."""
    if is_fraction:
        value = value * 100
    return f"{value:.2f}%"


class PaycheckSummaryGenerator:
    """Generates a human-readable take-home pay summary."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["currency"] = currency
        self.env.filters["percent"] = percent
        self.env.filters["citation"] = format_source_citation

    def render(self, result: TaxCalculationResult) -> str:
        """Render paycheck summary report."""
        template = self.env.get_template("paycheck_summary.txt")
        return template.render(res=result, disclaimer=TAX_DISCLAIMER)
