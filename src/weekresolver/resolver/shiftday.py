from __future__ import annotations

import logging
from datetime import date, timedelta

from ..calendar.calendar import ClosingCalendar
from ..calendar.easter import EASTER_SUNDAYS
from ..calendar.weeks import DayOfWeek, WeekFields, monday_of

logger = logging.getLogger(__name__)


def adjust_shift_day(
    d: date,
    shift_day: DayOfWeek | None,
    allow_end_of_year: bool,
    week_fields: WeekFields = WeekFields.ISO,
) -> DayOfWeek | None:
    """
    Effective cut-over weekday for the week containing ``d``.

    ``None`` means the week has no cut-over at all (Easter week).  A Friday
    cut-over moves to Thursday in Pentecost week and in the week before
    Easter.  Otherwise the cut-over walks back over closing days, stopping
    at Monday.

    Raises DateOutOfSupportedRange when the Easter table does not cover
    the week.
    """
    if shift_day is None:
        return None

    if EASTER_SUNDAYS.is_easter_week(d):
        logger.debug("%s is in Easter week; no shift day", d)
        return None
    if shift_day == DayOfWeek.FRIDAY and EASTER_SUNDAYS.is_pentecost_week(d):
        logger.debug("%s is in Pentecost week; shift day moved to Thursday", d)
        return DayOfWeek.THURSDAY
    if shift_day == DayOfWeek.FRIDAY and EASTER_SUNDAYS.is_easter_week(d + timedelta(weeks=1)):
        logger.debug("Week after %s is Easter week; shift day moved to Thursday", d)
        return DayOfWeek.THURSDAY

    monday = monday_of(d)
    shift_date = monday + timedelta(days=shift_day - 1)
    effective = ClosingCalendar(allow_end_of_year, week_fields).previous_open_day(
        shift_date, floor=monday,
    )
    if effective != shift_date:
        logger.debug("Shift day moved back from %s to %s", shift_date, effective)
    return DayOfWeek.of(effective)
