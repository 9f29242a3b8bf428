"""Tax computation engines."""

from takehome.engines.paycheck import PaycheckEngine, calculate_taxes, quick_estimate
from takehome.engines.progressive import calculate_progressive_tax, marginal_rate
from takehome.engines.state import StateTaxResolver, calculate_state_tax
from takehome.engines.tax_year import available_tax_years, get_tax_year

__all__ = [
    "PaycheckEngine",
    "StateTaxResolver",
    "available_tax_years",
    "calculate_progressive_tax",
    "calculate_state_tax",
    "calculate_taxes",
    "get_tax_year",
    "marginal_rate",
    "quick_estimate",
]
