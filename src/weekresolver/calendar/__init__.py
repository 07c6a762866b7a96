"""
weekresolver.calendar
~~~~~~~~~~~~~~~~~~~~~

Danish production-calendar primitives: week numbering, the Easter Sunday
table, the closing-day predicate and its compiled NumPy form.

Basic usage::

    from datetime import date
    from weekresolver.calendar import ClosingCalendar, is_closing_day

    is_closing_day(date(2019, 4, 18), allow_end_of_year=True)   # → True
    cal = ClosingCalendar(allow_end_of_year=True)
    cal.next_open_day(date(2019, 4, 18))                        # → 2019-04-23

Public API
----------
ClosingCalendar         Cached business-day calendar over the closing rules.
is_closing_day          Rule-by-rule closing-day predicate.
DANISH_CLOSING_RULES    The dated rule entries behind the predicate.
EASTER_SUNDAYS          Easter Sunday table, 2016 to 2040.
DayOfWeek, WeekFields   Week-numbering strategy.
"""

from __future__ import annotations

from weekresolver.calendar.calendar import ClosingCalendar
from weekresolver.calendar.easter import EASTER_SUNDAYS, EasterSundayTable
from weekresolver.calendar.holidays import (
    DANISH_CLOSING_RULES,
    ClosingRule,
    EasterOffsetRule,
    EndOfYearRule,
    FixedDayRule,
    WeekendRule,
    closing_rule,
    is_closing_day,
)
from weekresolver.calendar.weeks import (
    DayOfWeek,
    WeekFields,
    monday_of,
    sunday_of,
    week_fields_for_locale,
)

__all__ = [
    "ClosingCalendar",
    "ClosingRule",
    "DANISH_CLOSING_RULES",
    "DayOfWeek",
    "EASTER_SUNDAYS",
    "EasterOffsetRule",
    "EasterSundayTable",
    "EndOfYearRule",
    "FixedDayRule",
    "WeekFields",
    "WeekendRule",
    "closing_rule",
    "is_closing_day",
    "monday_of",
    "sunday_of",
    "week_fields_for_locale",
]
