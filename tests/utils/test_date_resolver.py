"""Unit tests for DateResolver and parse_date."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from tasknote.utils.date_resolver import (
    WEEKDAYS,
    DateResolver,
    InvalidDateError,
    parse_date,
)

# Wednesday 2024-05-15
TODAY = date(2024, 5, 15)


@pytest.fixture()
def resolver() -> DateResolver:
    return DateResolver()


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


class TestKeywords:
    def test_today(self, resolver):
        assert resolver.resolve("today", TODAY) == TODAY

    def test_tomorrow(self, resolver):
        assert resolver.resolve("tomorrow", TODAY) == date(2024, 5, 16)

    def test_tom_abbreviation(self, resolver):
        assert resolver.resolve("tom", TODAY) == date(2024, 5, 16)

    def test_yesterday(self, resolver):
        assert resolver.resolve("yesterday", TODAY) == date(2024, 5, 14)

    def test_case_insensitive(self, resolver):
        assert resolver.resolve("ToMoRRow", TODAY) == date(2024, 5, 16)

    def test_surrounding_whitespace(self, resolver):
        assert resolver.resolve("  today ", TODAY) == TODAY

    def test_tomorrow_crosses_month(self, resolver):
        assert resolver.resolve("tomorrow", date(2024, 2, 29)) == date(2024, 3, 1)

    def test_yesterday_crosses_year(self, resolver):
        assert resolver.resolve("yesterday", date(2024, 1, 1)) == date(2023, 12, 31)


# ---------------------------------------------------------------------------
# Weekdays (weeks start on Monday, date.weekday() convention)
# ---------------------------------------------------------------------------


class TestWeekdays:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("thursday", date(2024, 5, 16)),
            ("friday", date(2024, 5, 17)),
            ("saturday", date(2024, 5, 18)),
            ("sunday", date(2024, 5, 19)),
            ("monday", date(2024, 5, 20)),
            ("tuesday", date(2024, 5, 21)),
        ],
    )
    def test_next_occurrence(self, resolver, token, expected):
        assert resolver.resolve(token, TODAY) == expected

    def test_same_weekday_advances_a_week(self, resolver):
        assert resolver.resolve("wednesday", TODAY) == TODAY + timedelta(days=7)

    def test_never_returns_today(self, resolver):
        for offset in range(7):
            day = TODAY + timedelta(days=offset)
            for token in WEEKDAYS:
                assert resolver.resolve(token, day) != day

    @pytest.mark.parametrize(
        "abbr,full",
        [
            ("mon", "monday"),
            ("tue", "tuesday"),
            ("tues", "tuesday"),
            ("wed", "wednesday"),
            ("thu", "thursday"),
            ("thur", "thursday"),
            ("thurs", "thursday"),
            ("fri", "friday"),
            ("sat", "saturday"),
            ("sun", "sunday"),
        ],
    )
    def test_abbreviations_match_full_names(self, resolver, abbr, full):
        assert resolver.resolve(abbr, TODAY) == resolver.resolve(full, TODAY)

    def test_uppercase_weekday(self, resolver):
        assert resolver.resolve("FRI", TODAY) == date(2024, 5, 17)


# ---------------------------------------------------------------------------
# Canonical dates
# ---------------------------------------------------------------------------


class TestIsoDates:
    def test_valid_date_returned_unchanged(self, resolver):
        assert resolver.resolve("2024-03-01", TODAY) == date(2024, 3, 1)

    def test_leap_day(self, resolver):
        assert resolver.resolve("2024-02-29", TODAY) == date(2024, 2, 29)

    def test_non_leap_year_feb_29_rejected(self, resolver):
        with pytest.raises(InvalidDateError):
            resolver.resolve("2023-02-29", TODAY)

    def test_feb_30_rejected(self, resolver):
        with pytest.raises(InvalidDateError):
            resolver.resolve("2024-02-30", TODAY)

    def test_month_13_rejected(self, resolver):
        with pytest.raises(InvalidDateError):
            resolver.resolve("2024-13-01", TODAY)

    @pytest.mark.parametrize("token", ["2024-3-1", "24-03-01", "2024/03/01", "20240301"])
    def test_non_canonical_formats_rejected(self, resolver, token):
        with pytest.raises(InvalidDateError):
            resolver.resolve(token, TODAY)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    @pytest.mark.parametrize("token", ["", "someday", "next week", "in 3 days", "mondays"])
    def test_unresolvable(self, resolver, token):
        with pytest.raises(InvalidDateError):
            resolver.resolve(token, TODAY)

    def test_error_carries_token(self, resolver):
        with pytest.raises(InvalidDateError) as exc_info:
            resolver.resolve("someday", TODAY)
        assert exc_info.value.token == "someday"
        assert "someday" in str(exc_info.value)

    def test_error_is_value_error(self):
        assert issubclass(InvalidDateError, ValueError)


# ---------------------------------------------------------------------------
# parse_date convenience function
# ---------------------------------------------------------------------------


class TestParseDate:
    def test_returns_iso_string(self):
        assert parse_date("tomorrow", date(2024, 2, 28)) == "2024-02-29"

    def test_returns_none_on_failure(self):
        assert parse_date("whenever", TODAY) is None

    def test_defaults_to_current_date(self):
        assert parse_date("today") == date.today().isoformat()
