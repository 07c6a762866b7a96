"""
tests/calendar/test_weeks.py

Covers:
  - DayOfWeek numbering
  - ISO-8601 week numbers and week-based years
  - December week-1 dates reported as week 53
  - Sunday-start (en_US) strategy diverging from ISO
  - Locale → strategy mapping
  - Monday/Sunday helpers
"""

from datetime import date

import pytest

from weekresolver.calendar.weeks import (
    DayOfWeek,
    WeekFields,
    monday_of,
    sunday_of,
    week_fields_for_locale,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def iso():
    return WeekFields.ISO


@pytest.fixture
def sunday_start():
    return WeekFields.SUNDAY_START


# ── DayOfWeek ─────────────────────────────────────────────────────────────────

class TestDayOfWeek:

    def test_iso_numbering(self):
        assert DayOfWeek.MONDAY == 1
        assert DayOfWeek.SUNDAY == 7

    def test_of_date(self):
        assert DayOfWeek.of(date(2023, 3, 10)) is DayOfWeek.FRIDAY

    def test_compares_with_isoweekday(self):
        assert date(2023, 3, 11).isoweekday() >= DayOfWeek.FRIDAY


# ── ISO weeks ─────────────────────────────────────────────────────────────────

class TestIsoWeeks:

    def test_mid_year(self, iso):
        assert iso.week_and_year(date(2023, 3, 10)) == (10, 2023)

    def test_january_in_previous_week_year(self, iso):
        # 2021-01-01 is a Friday in ISO week 53 of 2020.
        assert iso.week_of_week_based_year(date(2021, 1, 1)) == 53
        assert iso.week_based_year(date(2021, 1, 1)) == 2020
        assert iso.week_and_year(date(2021, 1, 1)) == (53, 2020)

    def test_sunday_belongs_to_preceding_monday(self, iso):
        assert iso.week_and_year(date(2023, 1, 1)) == (52, 2022)
        assert iso.week_and_year(date(2023, 1, 2)) == (1, 2023)

    def test_december_week_one_reported_as_53(self, iso):
        # Raw ISO says week 1 of 2020.
        assert iso.week_of_week_based_year(date(2019, 12, 30)) == 1
        assert iso.week_based_year(date(2019, 12, 30)) == 2020
        assert iso.week_and_year(date(2019, 12, 30)) == (53, 2019)

    def test_start_of_week_is_monday(self, iso):
        assert iso.start_of_week(date(2023, 3, 8)) == date(2023, 3, 6)

    def test_invalid_minimal_days(self):
        with pytest.raises(ValueError):
            WeekFields(DayOfWeek.MONDAY, 0)


# ── Sunday-start weeks ────────────────────────────────────────────────────────

class TestSundayStartWeeks:

    def test_start_of_week_is_sunday(self, sunday_start):
        assert sunday_start.start_of_week(date(2023, 3, 8)) == date(2023, 3, 5)

    def test_week_one_contains_january_first(self, sunday_start):
        assert sunday_start.week_and_year(date(2023, 1, 1)) == (1, 2023)

    def test_sunday_diverges_from_iso(self, iso, sunday_start):
        d = date(2023, 3, 5)
        assert iso.week_of_week_based_year(d) == 9
        assert sunday_start.week_of_week_based_year(d) == 10

    def test_year_end_diverges_from_iso(self, iso, sunday_start):
        d = date(2022, 12, 31)
        assert iso.week_of_week_based_year(d) == 52
        assert sunday_start.week_of_week_based_year(d) == 53


# ── Locales ───────────────────────────────────────────────────────────────────

class TestLocales:

    @pytest.mark.parametrize("locale", ["da_DK", "da", "de_DE", "da_DK.UTF-8"])
    def test_iso_locales(self, locale):
        assert week_fields_for_locale(locale) == WeekFields.ISO

    @pytest.mark.parametrize("locale", ["en_US", "en-US", "en_CA", "ja_JP"])
    def test_sunday_start_locales(self, locale):
        assert week_fields_for_locale(locale) == WeekFields.SUNDAY_START

    def test_empty_locale_rejected(self):
        with pytest.raises(ValueError):
            week_fields_for_locale("  ")


# ── Helpers ───────────────────────────────────────────────────────────────────

class TestHelpers:

    def test_monday_of(self):
        assert monday_of(date(2023, 3, 12)) == date(2023, 3, 6)
        assert monday_of(date(2023, 3, 6)) == date(2023, 3, 6)

    def test_sunday_of(self):
        assert sunday_of(date(2023, 3, 6)) == date(2023, 3, 12)
        assert sunday_of(date(2023, 3, 12)) == date(2023, 3, 12)
