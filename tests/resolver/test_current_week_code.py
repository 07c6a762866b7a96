"""
tests/resolver/test_current_week_code.py

Covers:
  - Current week code before and after the Friday shift day
  - Closing days at year end (search bounded by Sunday)
  - Codes without shift day, codes ignoring closing days, fixed codes
  - Locale-driven week numbering
  - Default date (today in the configured time zone)
"""

from datetime import date

import pytest

from weekresolver import (
    Settings,
    UnknownCatalogueCode,
    WeekResolver,
    resolve_current_week_code,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def resolver():
    return WeekResolver(Settings())


# ── BKM ───────────────────────────────────────────────────────────────────────

class TestBkm:

    @pytest.mark.parametrize(
        "d, expected",
        [
            (date(2023, 3, 6), "BKM202310"),
            (date(2023, 3, 10), "BKM202311"),
            (date(2022, 12, 23), "BKM202252"),
            (date(2022, 12, 24), "BKM202252"),
            (date(2022, 12, 30), "BKM202301"),
            (date(2023, 1, 5), "BKM202301"),
            (date(2023, 1, 6), "BKM202302"),
        ],
    )
    def test_week_codes(self, resolver, d, expected):
        assert resolver.get_current_week_code("BKM", d).week_code == expected

    def test_week_before_easter_shifts_on_thursday(self, resolver):
        assert resolver.get_current_week_code("BKM", date(2023, 3, 29)).week_code == "BKM202313"
        assert resolver.get_current_week_code("BKM", date(2023, 3, 30)).week_code == "BKM202314"

    def test_easter_week_belongs_to_next_week(self, resolver):
        assert resolver.get_current_week_code("BKM", date(2023, 4, 3)).week_code == "BKM202315"

    def test_closing_day_search_stops_at_sunday(self, resolver):
        # Saturday 24 December: Monday 26 is closed, so the search ends on Sunday 25.
        result = resolver.get_current_week_code("BKM", date(2022, 12, 24))
        assert result.resolved_date == date(2023, 1, 1)


# ── Other configurations ──────────────────────────────────────────────────────

class TestOtherConfigurations:

    def test_no_shift_day_is_always_next_week(self, resolver):
        assert resolver.get_current_week_code("DAN", date(2023, 3, 6)).week_code == "DAN202311"

    def test_ignore_closing_days_is_this_week(self, resolver):
        assert resolver.get_current_week_code("ACC", date(2023, 3, 10)).week_code == "ACC202310"

    def test_fixed_code(self, resolver):
        assert resolver.get_current_week_code("DIS", date(2023, 3, 10)).week_code == "DIS197605"

    def test_unknown_code(self, resolver):
        assert resolver.get_current_week_code("ZZZ", date(2023, 3, 10)) == UnknownCatalogueCode("ZZZ")


# ── Locale ────────────────────────────────────────────────────────────────────

class TestLocale:

    def test_sunday_start_locale_diverges(self):
        d = date(2023, 3, 5)
        assert resolve_current_week_code("ACC", d, locale="da_DK").week_code == "ACC202309"
        assert resolve_current_week_code("ACC", d, locale="en_US").week_code == "ACC202310"

    def test_result_carries_settings(self):
        result = resolve_current_week_code("ACC", date(2023, 3, 5), time_zone="UTC", locale="en_US")
        assert result.time_zone == "UTC"
        assert result.locale == "en_US"

    def test_unknown_time_zone(self):
        with pytest.raises(ValueError):
            resolve_current_week_code("BKM", date(2023, 3, 6), time_zone="Nowhere/Town")


# ── Today ─────────────────────────────────────────────────────────────────────

class TestToday:

    def test_defaults_to_today(self, monkeypatch):
        monkeypatch.setattr(Settings, "today", lambda self: date(2023, 3, 10))
        assert WeekResolver(Settings()).get_current_week_code("BKM").week_code == "BKM202311"
