"""
tests/resolver/test_day_plan_and_fulfilled.py

Covers:
  - Day plan: one forward week code per day, in order
  - Day plan argument validation and unknown codes
  - Fulfilled check against the current week code
  - Fulfilled check validation
  - Listing supported codes
"""

from datetime import date

import pytest

from weekresolver import (
    FixedCode,
    UnknownCatalogueCode,
    check_week_code_fulfilled,
    list_codes,
    resolve_day_plan,
)


# ── Day plan ──────────────────────────────────────────────────────────────────

class TestDayPlan:

    def test_week_of_days(self):
        plan = resolve_day_plan("BKM", date(2023, 3, 6), date(2023, 3, 12))
        assert list(plan) == [date(2023, 3, d) for d in range(6, 13)]
        assert [plan[date(2023, 3, d)] for d in range(6, 10)] == ["BKM202312"] * 4
        assert [plan[date(2023, 3, d)] for d in range(10, 13)] == ["BKM202313"] * 3

    def test_single_day(self):
        d = date(2019, 10, 10)
        assert resolve_day_plan("dpf", d, d) == {d: "DPF201944"}

    def test_start_after_end(self):
        with pytest.raises(ValueError):
            resolve_day_plan("BKM", date(2023, 3, 7), date(2023, 3, 6))

    def test_unknown_code(self):
        plan = resolve_day_plan("ZZZ", date(2023, 3, 6), date(2023, 3, 7))
        assert plan == UnknownCatalogueCode("ZZZ")


# ── Fulfilled ─────────────────────────────────────────────────────────────────

class TestFulfilled:

    def test_same_week_is_fulfilled(self):
        result = check_week_code_fulfilled("BKM202310", date(2023, 3, 6))
        assert result.is_fulfilled
        assert result.current_week_code_result.week_code == "BKM202310"

    def test_earlier_week_is_fulfilled(self):
        result = check_week_code_fulfilled("bkm202309", date(2023, 3, 6))
        assert result.is_fulfilled
        assert result.requested_week_code == "BKM202309"

    def test_later_week_is_not_fulfilled(self):
        assert not check_week_code_fulfilled("BKM202311", date(2023, 3, 6)).is_fulfilled

    def test_later_year_is_not_fulfilled(self):
        assert not check_week_code_fulfilled("BKM202401", date(2023, 3, 6)).is_fulfilled

    @pytest.mark.parametrize("week_code", ["BKM2023", "BKM20231X", "BKM2023100"])
    def test_invalid_week_code(self, week_code):
        with pytest.raises(ValueError):
            check_week_code_fulfilled(week_code, date(2023, 3, 6))

    def test_unknown_code(self):
        result = check_week_code_fulfilled("ZZZ202310", date(2023, 3, 6))
        assert result == UnknownCatalogueCode("ZZZ")


# ── Codes ─────────────────────────────────────────────────────────────────────

class TestListCodes:

    def test_sorted_mapping(self):
        codes = list_codes()
        assert list(codes) == sorted(codes)
        assert codes["DIS"] == FixedCode("197605")
        assert "BKM" in codes
