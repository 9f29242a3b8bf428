"""Tax-year registry.

Assembles the per-year tables from ``brackets``, ``state_tables`` and
``sources`` into one validated ``TaxYearConstants``. Calculations receive
the constants explicitly; there is no process-wide "current year".
"""

import logging
from functools import lru_cache

from takehome.engines.brackets import (
    DEDUCTION_LIMITS,
    FEDERAL_BRACKETS,
    FEDERAL_STANDARD_DEDUCTION,
    FICA,
)
from takehome.engines.sources import FEDERAL_SOURCE, FICA_SOURCE
from takehome.engines.state_tables import STATE_PROFILES
from takehome.exceptions import UnknownTaxYearError
from takehome.models.tax_tables import TaxYearConstants

logger = logging.getLogger(__name__)

DEFAULT_TAX_YEAR = 2026


def available_tax_years() -> list[int]:
    """Years for which every table (federal, FICA, state, limits) exists."""
    years = (
        set(FEDERAL_BRACKETS)
        & set(FEDERAL_STANDARD_DEDUCTION)
        & set(FICA)
        & set(STATE_PROFILES)
        & set(DEDUCTION_LIMITS)
    )
    return sorted(years)


@lru_cache(maxsize=None)
def get_tax_year(year: int) -> TaxYearConstants:
    """Return the reference tables for ``year``.

    Raises:
        UnknownTaxYearError: if any table is missing for that year.
    """
    if year not in available_tax_years():
        raise UnknownTaxYearError(year, available_tax_years())

    logger.debug("Building tax-year constants for %d", year)
    return TaxYearConstants(
        year=year,
        federal_brackets=FEDERAL_BRACKETS[year],
        federal_standard_deduction=FEDERAL_STANDARD_DEDUCTION[year],
        fica=FICA[year],
        states=STATE_PROFILES[year],
        deduction_limits=DEDUCTION_LIMITS[year],
        federal_source=FEDERAL_SOURCE,
        fica_source=FICA_SOURCE,
    )
