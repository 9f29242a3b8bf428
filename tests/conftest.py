"""Shared test fixtures for takehome."""

from decimal import Decimal

import pytest

from takehome.engines.paycheck import PaycheckEngine
from takehome.engines.tax_year import get_tax_year
from takehome.models.enums import FilingStatus, PayFrequency
from takehome.models.reports import TaxCalculationResult
from takehome.models.tax_tables import TaxYearConstants


@pytest.fixture
def tax_year_2026() -> TaxYearConstants:
    return get_tax_year(2026)


@pytest.fixture
def engine(tax_year_2026: TaxYearConstants) -> PaycheckEngine:
    return PaycheckEngine(tax_year_2026)


@pytest.fixture
def ca_single_50k(engine: PaycheckEngine) -> TaxCalculationResult:
    """Single filer, $50,000 salary, California, no deductions."""
    return engine.calculate(Decimal("50000"), PayFrequency.ANNUAL, FilingStatus.SINGLE, "CA")
