from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from datetime import MAXYEAR, MINYEAR, date, timedelta
from enum import IntEnum


class DayOfWeek(IntEnum):
    """ISO-8601 day numbering, Monday = 1 … Sunday = 7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, d: date) -> DayOfWeek:
        return cls(d.isoweekday())


# Territories whose calendars start the week on Sunday with week 1 being the
# week that contains January 1.
_SUNDAY_START_TERRITORIES = frozenset({"US", "CA", "JP", "BR", "MX", "IL", "PH", "ZA"})


@dataclass(frozen=True)
class WeekFields:
    """
    Week-numbering strategy: the first day of the week and the minimal
    number of days the first week of a year must contain.

    ``WeekFields.ISO`` (Monday, 4) is ISO-8601 and is what Danish locales
    use.  ``WeekFields.SUNDAY_START`` (Sunday, 1) matches e.g. ``en_US``.
    """

    first_day: DayOfWeek = DayOfWeek.MONDAY
    minimal_days: int = 4

    ISO: ClassVar[WeekFields]
    SUNDAY_START: ClassVar[WeekFields]

    def __post_init__(self) -> None:
        if not 1 <= self.minimal_days <= 7:
            raise ValueError(
                f"minimal_days must be in 1..7; got {self.minimal_days}."
            )

    # ── week arithmetic ──────────────────────────────────────────────────

    def start_of_week(self, d: date) -> date:
        return d - timedelta(days=(d.isoweekday() - self.first_day) % 7)

    def _week_one_start(self, year: int) -> date:
        jan1 = date(year, 1, 1)
        offset = (jan1.isoweekday() - self.first_day) % 7
        start = jan1 - timedelta(days=offset) if year > MINYEAR or offset == 0 else jan1
        if 7 - offset < self.minimal_days:
            start += timedelta(days=7)
        return start

    def week_based_year(self, d: date) -> int:
        year = d.year
        if year > MINYEAR and d < self._week_one_start(year):
            return year - 1
        if year < MAXYEAR and d >= self._week_one_start(year + 1):
            return year + 1
        return year

    def week_of_week_based_year(self, d: date) -> int:
        year = self.week_based_year(d)
        return (d - self._week_one_start(year)).days // 7 + 1

    def week_and_year(self, d: date) -> tuple[int, int]:
        """
        Week number and year used in week codes.

        A December date that numbers as week 1 of the following year is
        reported as week 53 of its own calendar year.
        """
        week = self.week_of_week_based_year(d)
        if week == 1 and d.month == 12:
            return 53, d.year
        return week, self.week_based_year(d)

    def __repr__(self) -> str:
        return (
            f"WeekFields(first_day={self.first_day.name}, "
            f"minimal_days={self.minimal_days})"
        )


WeekFields.ISO = WeekFields(DayOfWeek.MONDAY, 4)
WeekFields.SUNDAY_START = WeekFields(DayOfWeek.SUNDAY, 1)


def week_fields_for_locale(locale: str) -> WeekFields:
    """
    Map a locale identifier such as ``da_DK``, ``en-US`` or ``da`` to its
    week-numbering strategy.  Locales without a territory use ISO-8601.
    """
    if not locale or not locale.strip():
        raise ValueError("Locale must not be empty.")
    parts = locale.replace("-", "_").split(".")[0].split("_")
    territory = parts[1].upper() if len(parts) > 1 else ""
    if territory in _SUNDAY_START_TERRITORIES:
        return WeekFields.SUNDAY_START
    return WeekFields.ISO


def monday_of(d: date) -> date:
    return d - timedelta(days=d.isoweekday() - 1)


def sunday_of(d: date) -> date:
    return d + timedelta(days=7 - d.isoweekday())
