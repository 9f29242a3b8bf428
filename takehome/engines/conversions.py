"""Pay-rate and pay-frequency conversions.

Conversions between hourly and salaried pay use exact Decimal arithmetic;
only the display helpers (``convert_pay_frequency``, ``period_breakdown``)
round to cents.
"""

from decimal import Decimal, InvalidOperation

from takehome.engines.progressive import ZERO, round_cents
from takehome.exceptions import InvalidInputError
from takehome.models.enums import PayFrequency
from takehome.models.reports import PeriodBreakdown

DEFAULT_HOURS_PER_WEEK = Decimal("40")
DEFAULT_WEEKS_PER_YEAR = Decimal("52")
HOURS_PER_YEAR = Decimal("2080")
WORKDAYS_PER_WEEK = Decimal("5")

# Input ceilings keep every intermediate amount within the default
# 28-digit Decimal context, so rounding to cents never overflows
MAX_AMOUNT = Decimal("1000000000000")
MAX_HOURS_PER_WEEK = Decimal("168")
MAX_WEEKS_PER_YEAR = Decimal("53")

# Pay periods per year for salaried frequencies
PERIODS_PER_YEAR: dict[PayFrequency, Decimal] = {
    PayFrequency.WEEKLY: Decimal("52"),
    PayFrequency.BIWEEKLY: Decimal("26"),
    PayFrequency.SEMIMONTHLY: Decimal("24"),
    PayFrequency.MONTHLY: Decimal("12"),
    PayFrequency.ANNUAL: Decimal("1"),
}


def to_decimal(
    value: Decimal | int | float | str,
    field: str,
    *,
    positive: bool = False,
    maximum: Decimal = MAX_AMOUNT,
) -> Decimal:
    """Coerce ``value`` to a finite, non-negative Decimal no larger than ``maximum``.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.

    Raises:
        InvalidInputError: if the value is not numeric, not finite, negative,
            above ``maximum``, or zero when ``positive`` is set.
    """
    if isinstance(value, bool):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInputError(field, f"expected a number, got {value!r}") from None
    if not amount.is_finite():
        raise InvalidInputError(field, f"must be finite, got {value!r}")
    if positive and amount <= 0:
        raise InvalidInputError(field, f"must be greater than zero, got {amount}")
    if amount < 0:
        raise InvalidInputError(field, f"must be non-negative, got {amount}")
    if amount > maximum:
        raise InvalidInputError(field, f"exceeds maximum of {maximum:,}, got {amount}")
    return amount


def periods_per_year(frequency: PayFrequency, hours_per_week: Decimal | None = None,
                     weeks_per_year: Decimal = DEFAULT_WEEKS_PER_YEAR) -> Decimal:
    """Number of ``frequency`` periods in a year; hourly counts worked hours."""
    if frequency == PayFrequency.HOURLY:
        if hours_per_week is None:
            return HOURS_PER_YEAR
        return hours_per_week * weeks_per_year
    return PERIODS_PER_YEAR[frequency]


def hourly_to_salary(
    hourly_rate: Decimal | int | float | str,
    hours_per_week: Decimal | int | float | str = DEFAULT_HOURS_PER_WEEK,
    weeks_per_year: Decimal | int | float | str = DEFAULT_WEEKS_PER_YEAR,
) -> Decimal:
    """Annual salary for an hourly rate."""
    rate = to_decimal(hourly_rate, "hourly_rate", positive=True)
    hours = to_decimal(
        hours_per_week, "hours_per_week", positive=True, maximum=MAX_HOURS_PER_WEEK
    )
    weeks = to_decimal(
        weeks_per_year, "weeks_per_year", positive=True, maximum=MAX_WEEKS_PER_YEAR
    )
    return rate * hours * weeks


def salary_to_hourly(
    annual_salary: Decimal | int | float | str,
    hours_per_week: Decimal | int | float | str = DEFAULT_HOURS_PER_WEEK,
    weeks_per_year: Decimal | int | float | str = DEFAULT_WEEKS_PER_YEAR,
) -> Decimal:
    """Hourly rate for an annual salary."""
    salary = to_decimal(annual_salary, "annual_salary", positive=True)
    hours = to_decimal(
        hours_per_week, "hours_per_week", positive=True, maximum=MAX_HOURS_PER_WEEK
    )
    weeks = to_decimal(
        weeks_per_year, "weeks_per_year", positive=True, maximum=MAX_WEEKS_PER_YEAR
    )
    return salary / (hours * weeks)


def convert_pay_frequency(
    amount: Decimal | int | float | str,
    from_frequency: PayFrequency,
    to_frequency: PayFrequency,
) -> Decimal:
    """Re-express a per-period amount at another frequency, rounded to cents.

    Hourly amounts assume a 2,080-hour year.
    """
    value = to_decimal(amount, "amount")
    annual = value * periods_per_year(from_frequency)
    return round_cents(annual / periods_per_year(to_frequency))


def period_breakdown(annual: Decimal, hours_per_week: Decimal | None = None) -> PeriodBreakdown:
    """Spread an annual amount over the common pay periods.

    Daily is weekly over five workdays; hourly is weekly over
    ``hours_per_week`` and zero when no hours are known.
    """
    weekly = annual / PERIODS_PER_YEAR[PayFrequency.WEEKLY]
    if hours_per_week:
        hourly = weekly / hours_per_week
    else:
        hourly = ZERO
    return PeriodBreakdown(
        annual=round_cents(annual),
        monthly=round_cents(annual / PERIODS_PER_YEAR[PayFrequency.MONTHLY]),
        semi_monthly=round_cents(annual / PERIODS_PER_YEAR[PayFrequency.SEMIMONTHLY]),
        bi_weekly=round_cents(annual / PERIODS_PER_YEAR[PayFrequency.BIWEEKLY]),
        weekly=round_cents(weekly),
        daily=round_cents(weekly / WORKDAYS_PER_WEEK),
        hourly=round_cents(hourly),
    )
