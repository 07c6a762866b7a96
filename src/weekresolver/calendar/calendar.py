from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date
from functools import lru_cache

import numpy as np

from .easter import EASTER_SUNDAYS
from .holidays import closing_rule
from .weeks import WeekFields, monday_of

logger = logging.getLogger(__name__)

_WEEKMASK = "1111100"


def _d64(d: date) -> np.datetime64:
    return np.datetime64(d, "D")


def _as_date(value: np.datetime64) -> date:
    return value.astype("datetime64[D]").item()


@lru_cache(maxsize=128)
def _compile(year: int, allow_end_of_year: bool, week_fields: WeekFields) -> np.busdaycalendar:
    """
    Business-day calendar covering ``year`` and its neighbours, so rolling
    over Christmas and New Year never leaves the compiled window.
    """
    if year not in EASTER_SUNDAYS:
        logger.warning(
            "No Easter Sunday known for %d; Easter holidays are not applied", year,
        )
    first = max(year - 1, MINYEAR)
    last = min(year + 1, MAXYEAR)
    days = np.arange(
        np.datetime64(f"{first:04d}-01-01"),
        np.datetime64(f"{last + 1:04d}-01-01"),
        dtype="datetime64[D]",
    )
    weekdays = days[np.is_busday(days, weekmask=_WEEKMASK)]
    holidays = [
        d for d in weekdays.tolist()
        if closing_rule(d, allow_end_of_year, week_fields) is not None
    ]
    logger.debug(
        "Compiled closing calendar %d..%d (allow_end_of_year=%s): %d holidays",
        first, last, allow_end_of_year, len(holidays),
    )
    return np.busdaycalendar(
        weekmask=_WEEKMASK, holidays=np.array(holidays, dtype="datetime64[D]"),
    )


class ClosingCalendar:
    """
    Closing-day predicate compiled into NumPy business-day calendars.

    Compiled calendars are cached process-wide per (year, allow_end_of_year,
    week_fields) and never mutated, so instances are cheap and thread-safe.
    """

    def __init__(
        self,
        allow_end_of_year: bool = False,
        week_fields: WeekFields = WeekFields.ISO,
    ) -> None:
        self._allow_end_of_year = allow_end_of_year
        self._week_fields = week_fields

    def _busdaycal(self, d: date) -> np.busdaycalendar:
        return _compile(d.year, self._allow_end_of_year, self._week_fields)

    # ── queries ──────────────────────────────────────────────────────────

    def is_closing(self, d: date) -> bool:
        return not bool(np.is_busday(_d64(d), busdaycal=self._busdaycal(d)))

    def is_closed_week(self, d: date) -> bool:
        """True when Monday to Friday of the week containing ``d`` are all closing days."""
        monday = monday_of(d)
        workdays = np.arange(_d64(monday), _d64(monday) + 5)
        return not np.is_busday(workdays, busdaycal=self._busdaycal(monday)).any()

    def next_open_day(self, d: date) -> date:
        """``d`` itself, or the first day after it that is not a closing day."""
        rolled = np.busday_offset(_d64(d), 0, roll="forward", busdaycal=self._busdaycal(d))
        return _as_date(rolled)

    def previous_open_day(self, d: date, floor: date | None = None) -> date:
        """
        ``d`` itself, or the last day before it that is not a closing day.
        The result never goes below ``floor``.
        """
        rolled = _as_date(
            np.busday_offset(_d64(d), 0, roll="backward", busdaycal=self._busdaycal(d))
        )
        if floor is not None and rolled < floor:
            return floor
        return rolled

    def closing_days(self, year: int) -> list[date]:
        """Closing weekdays (Monday to Friday) of ``year``, in order."""
        start = np.datetime64(f"{year:04d}-01-01")
        stop = np.datetime64(f"{year + 1:04d}-01-01")
        holidays = self._busdaycal(date(year, 1, 1)).holidays
        return holidays[(holidays >= start) & (holidays < stop)].tolist()

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def allow_end_of_year(self) -> bool:
        return self._allow_end_of_year

    @property
    def week_fields(self) -> WeekFields:
        return self._week_fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClosingCalendar):
            return NotImplemented
        return (self._allow_end_of_year, self._week_fields) == (
            other._allow_end_of_year, other._week_fields,
        )

    def __hash__(self) -> int:
        return hash((self._allow_end_of_year, self._week_fields))

    def __repr__(self) -> str:
        return (
            f"ClosingCalendar(allow_end_of_year={self._allow_end_of_year}, "
            f"week_fields={self._week_fields!r}, "
            f"compiled={_compile.cache_info().currsize})"
        )
