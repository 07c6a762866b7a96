from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from ..calendar.calendar import ClosingCalendar
from ..calendar.weeks import DayOfWeek, WeekFields, monday_of
from ..codes.registry import CatalogueCodeConfiguration, ComputedCode
from .shiftday import adjust_shift_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekDescription:
    """Production schedule of one week, anchored on its Monday."""

    week_code_short: str
    week_number: int
    week_code_first: date | None = None
    week_code_last: date | None = None
    shift_day: date | None = None
    book_cart: date | None = None
    proof: date | None = None
    bkm: date | None = None
    proof_from: date | None = None
    proof_to: date | None = None
    publish: date | None = None
    no_production: bool = False

    def to_row(self) -> tuple[str, ...]:
        """Year-plan row; weeks without production keep only code and week number."""
        if self.no_production:
            return (self.week_code_short, *([""] * 9), str(self.week_number))

        def fmt(d: date | None) -> str:
            return d.isoformat() if d is not None else ""

        return (
            self.week_code_short,
            fmt(self.week_code_first),
            fmt(self.week_code_last),
            fmt(self.shift_day),
            fmt(self.book_cart),
            fmt(self.proof_from),
            fmt(self.proof),
            fmt(self.proof_to),
            fmt(self.bkm),
            fmt(self.publish),
            str(self.week_number),
        )


def build_week_description(
    config: CatalogueCodeConfiguration,
    d: date,
    week_code_short: str,
    week_fields: WeekFields = WeekFields.ISO,
) -> WeekDescription:
    monday = monday_of(d)
    week_number = week_fields.week_of_week_based_year(monday)

    shift_day = None
    allow_end_of_year = False
    if isinstance(config, ComputedCode):
        shift_day = config.shift_day
        allow_end_of_year = config.allow_end_of_year
    calendar = ClosingCalendar(allow_end_of_year, week_fields)

    no_production = False
    if shift_day is None:
        shift_date: date | None = monday + timedelta(days=6)
    else:
        resolved = adjust_shift_day(d, shift_day, allow_end_of_year, week_fields)
        if resolved is None:
            shift_date = None
            no_production = True
        else:
            shift_date = monday + timedelta(days=resolved - 1)
            no_production = resolved == DayOfWeek.MONDAY

    if no_production:
        logger.debug("Week of %s has no production", monday)

    proof = monday + timedelta(days=1)
    return WeekDescription(
        week_code_short=week_code_short,
        week_number=week_number,
        week_code_first=calendar.next_open_day(monday),
        week_code_last=shift_date - timedelta(days=1) if shift_date is not None else None,
        shift_day=shift_date,
        book_cart=monday,
        proof=proof,
        bkm=monday + timedelta(days=2),
        proof_from=proof,
        proof_to=proof,
        publish=monday + timedelta(days=4),
        no_production=no_production,
    )
