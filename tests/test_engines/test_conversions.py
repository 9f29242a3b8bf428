"""Tests for pay-rate and pay-frequency conversions."""

from decimal import Decimal

import pytest

from takehome.engines.conversions import (
    MAX_AMOUNT,
    convert_pay_frequency,
    hourly_to_salary,
    period_breakdown,
    periods_per_year,
    salary_to_hourly,
    to_decimal,
)
from takehome.engines.progressive import round_cents
from takehome.exceptions import InvalidInputError
from takehome.models.enums import PayFrequency


class TestHourlySalary:
    def test_hourly_to_salary_defaults(self):
        assert hourly_to_salary(Decimal("25")) == Decimal("52000")

    def test_hourly_to_salary_custom_schedule(self):
        assert hourly_to_salary(Decimal("20"), Decimal("30"), Decimal("50")) == Decimal("30000")

    def test_salary_to_hourly_defaults(self):
        assert salary_to_hourly(Decimal("52000")) == Decimal("25")

    def test_accepts_strings_and_floats(self):
        assert hourly_to_salary("25") == Decimal("52000")
        assert salary_to_hourly(52000.0) == Decimal("25")

    @pytest.mark.parametrize("salary", ["50000", "123456.78", "31415.92"])
    def test_round_trip(self, salary):
        hourly = salary_to_hourly(Decimal(salary))
        assert round_cents(hourly_to_salary(hourly)) == Decimal(salary)

    @pytest.mark.parametrize("rate", ["25", "17.35", "123.456", "0.01"])
    @pytest.mark.parametrize("hours", ["40", "37.5", "13"])
    def test_hourly_round_trip_exact(self, rate, hours):
        salary = hourly_to_salary(Decimal(rate), Decimal(hours))
        assert salary_to_hourly(salary, Decimal(hours)) == Decimal(rate)

    def test_schedule_limits(self):
        with pytest.raises(InvalidInputError) as exc_info:
            hourly_to_salary(Decimal("25"), Decimal("169"))
        assert exc_info.value.field == "hours_per_week"
        with pytest.raises(InvalidInputError) as exc_info:
            salary_to_hourly(Decimal("52000"), Decimal("40"), Decimal("54"))
        assert exc_info.value.field == "weeks_per_year"

    @pytest.mark.parametrize(
        "args",
        [
            (Decimal("0"),),
            (Decimal("-5"),),
            (Decimal("25"), Decimal("0")),
            (Decimal("25"), Decimal("40"), Decimal("0")),
        ],
    )
    def test_non_positive_rejected(self, args):
        with pytest.raises(InvalidInputError):
            hourly_to_salary(*args)
        with pytest.raises(InvalidInputError):
            salary_to_hourly(*args)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            salary_to_hourly("lots")
        assert exc_info.value.field == "annual_salary"


class TestToDecimal:
    def test_float_goes_through_str(self):
        assert to_decimal(0.1, "x") == Decimal("0.1")

    def test_zero_allowed_unless_positive(self):
        assert to_decimal(0, "x") == Decimal("0")
        with pytest.raises(InvalidInputError):
            to_decimal(0, "x", positive=True)

    def test_maximum(self):
        assert to_decimal(MAX_AMOUNT, "x") == MAX_AMOUNT
        with pytest.raises(InvalidInputError, match="exceeds maximum"):
            to_decimal(MAX_AMOUNT + Decimal("0.01"), "x")
        with pytest.raises(InvalidInputError):
            to_decimal(Decimal("1e27"), "x")

    def test_custom_maximum(self):
        assert to_decimal("168", "hours", maximum=Decimal("168")) == Decimal("168")
        with pytest.raises(InvalidInputError):
            to_decimal("168.5", "hours", maximum=Decimal("168"))

    @pytest.mark.parametrize("value", ["nan", "inf", float("inf"), "", None, True, "-0.01"])
    def test_rejected(self, value):
        with pytest.raises(InvalidInputError):
            to_decimal(value, "x")


class TestConvertPayFrequency:
    def test_hourly_to_annual(self):
        assert convert_pay_frequency(Decimal("25"), PayFrequency.HOURLY, PayFrequency.ANNUAL) == Decimal("52000.00")

    def test_annual_to_biweekly(self):
        assert convert_pay_frequency(Decimal("52000"), PayFrequency.ANNUAL, PayFrequency.BIWEEKLY) == Decimal("2000.00")

    def test_monthly_to_weekly_rounds(self):
        assert convert_pay_frequency(Decimal("1000"), PayFrequency.MONTHLY, PayFrequency.WEEKLY) == Decimal("230.77")

    def test_same_frequency(self):
        assert convert_pay_frequency(Decimal("1234.56"), PayFrequency.MONTHLY, PayFrequency.MONTHLY) == Decimal("1234.56")

    def test_negative_rejected(self):
        with pytest.raises(InvalidInputError):
            convert_pay_frequency(Decimal("-1"), PayFrequency.MONTHLY, PayFrequency.ANNUAL)


class TestPeriodsPerYear:
    def test_salaried(self):
        assert periods_per_year(PayFrequency.SEMIMONTHLY) == Decimal("24")

    def test_hourly_default(self):
        assert periods_per_year(PayFrequency.HOURLY) == Decimal("2080")

    def test_hourly_custom(self):
        assert periods_per_year(PayFrequency.HOURLY, Decimal("30"), Decimal("50")) == Decimal("1500")


class TestPeriodBreakdown:
    def test_full_time(self):
        b = period_breakdown(Decimal("52000"), Decimal("40"))
        assert b.annual == Decimal("52000.00")
        assert b.monthly == Decimal("4333.33")
        assert b.semi_monthly == Decimal("2166.67")
        assert b.bi_weekly == Decimal("2000.00")
        assert b.weekly == Decimal("1000.00")
        assert b.daily == Decimal("200.00")
        assert b.hourly == Decimal("25.00")

    def test_no_hours(self):
        assert period_breakdown(Decimal("52000")).hourly == Decimal("0")

    def test_zero(self):
        b = period_breakdown(Decimal("0"), Decimal("40"))
        assert b.annual == b.monthly == b.hourly == Decimal("0")
