"""Unit tests for person.age."""

import datetime
from unittest.mock import patch

import pytest
from dateutil.relativedelta import relativedelta

from person import DobInFutureError, age, age_on, is_adult, is_adult_on
from person.datediff import InvalidFormatError, UndefinedModeError


@pytest.mark.unit
class TestAgeOn:
    @pytest.mark.parametrize(
        "dob, on_date, raw_format, expected",
        [
            ("2000-01-01", "2003-03-16", "%Y %M %D", "3 years 2 months 15 days"),
            ("2000-04-17", "2003-03-16", "%Y", "2 years"),
            ("2000-04-17", "2003-03-16", "%Y and %d days", "2 years and 333 days"),
            ("2000-04-17", "2003-03-16", "%D", "1063 days"),
            ("2000-04-17", "2003-04-17", "%Y", "3 years"),
            ("1991-04-01", "2012-04-01", "%Y", "21 year"),
            ("1991-04-01", "2002-04-01", "%Y old", "11 years old"),
            ("2024-03-01", "2024-03-01", "%D", "0 days"),
        ],
    )
    def test_known_ages(self, dob, on_date, raw_format, expected):
        got = age_on(
            datetime.date.fromisoformat(dob),
            datetime.date.fromisoformat(on_date),
            raw_format,
        )
        assert got == expected

    def test_accepts_datetimes(self):
        dob = datetime.datetime(1991, 4, 1, 13, 17, tzinfo=datetime.timezone.utc)
        on_date = datetime.datetime(1992, 5, 2, 13, 17, tzinfo=datetime.timezone.utc)
        assert age_on(dob, on_date, "%Y %M %D") == "1 year 1 month 1 day"

    def test_dob_after_date_raises(self):
        dob = datetime.datetime(1991, 4, 1, 13, 17, tzinfo=datetime.timezone.utc)
        with pytest.raises(DobInFutureError) as exc_info:
            age_on(dob, dob - datetime.timedelta(seconds=1), "%D")
        assert str(exc_info.value) == "date of birth is in the future"

    def test_unknown_verb_raises(self):
        dob = datetime.date(1991, 4, 1)
        with pytest.raises(InvalidFormatError) as exc_info:
            age_on(dob, datetime.date(1992, 5, 2), " %G %f_+")
        assert str(exc_info.value) == 'format " %G %f_+" has unknown verb G'

    def test_format_checked_before_dates(self):
        dob = datetime.date(1991, 4, 1)
        with pytest.raises(InvalidFormatError):
            age_on(dob, datetime.date(1990, 1, 1), "%Z")

    def test_no_verb_raises(self):
        with pytest.raises(UndefinedModeError):
            age_on(datetime.date(1991, 4, 1), datetime.date(1992, 5, 2), "age")

    def test_dob_in_future_is_a_value_error(self):
        assert issubclass(DobInFutureError, ValueError)


@pytest.mark.unit
class TestAge:
    def test_uses_today_for_dates(self):
        dob = datetime.date.today() - relativedelta(years=10)
        assert age(dob, "%Y") == "10 years"

    def test_uses_now_for_datetimes(self):
        fixed_now = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)
        dob = datetime.datetime(2013, 5, 30, 12, 0, tzinfo=datetime.timezone.utc)
        with patch("person.age._now_like", return_value=fixed_now):
            assert age(dob, "%Y %D") == "11 years 2 days"

    def test_future_dob_raises(self):
        dob = datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(hours=1)
        with pytest.raises(DobInFutureError):
            age(dob, "%D")

    def test_unknown_verb_raises(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            age(datetime.date(2000, 1, 1), " %Z m")
        assert str(exc_info.value) == 'format " %Z m" has unknown verb Z'


@pytest.mark.unit
class TestIsAdult:
    @pytest.mark.parametrize(
        "dob, on_date, adult_age, expected",
        [
            ("2000-01-01", "2018-01-01", 18, True),
            ("2000-01-01", "2017-12-31", 18, False),
            ("2000-01-01", "2030-06-01", 21, True),
            ("2000-01-01", "2000-01-01", 0, True),
            ("2000-02-29", "2018-02-28", 18, True),
        ],
    )
    def test_is_adult_on(self, dob, on_date, adult_age, expected):
        got = is_adult_on(
            datetime.date.fromisoformat(dob),
            datetime.date.fromisoformat(on_date),
            adult_age,
        )
        assert got is expected

    def test_is_adult_now(self):
        assert is_adult(datetime.date(2000, 1, 1), 18) is True

    def test_newborn_is_not_adult(self):
        assert is_adult(datetime.date.today(), 18) is False

    def test_negative_threshold_raises(self):
        with pytest.raises(ValueError):
            is_adult_on(datetime.date(2000, 1, 1), datetime.date(2020, 1, 1), -1)

    def test_dob_after_date_raises(self):
        with pytest.raises(DobInFutureError):
            is_adult_on(datetime.date(2020, 1, 2), datetime.date(2020, 1, 1), 18)
