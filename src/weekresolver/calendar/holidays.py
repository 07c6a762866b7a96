"""
Danish closing days expressed as data.

Every rule is a frozen entry with an optional ``first_year``/``last_year``
window, so historical changes such as the abolition of Store Bededag after
2023 are table facts rather than branches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from .easter import EASTER_SUNDAYS, EasterSundayTable
from .weeks import DayOfWeek, WeekFields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClosingContext:
    """Per-query inputs shared by all rules."""

    allow_end_of_year: bool
    week_fields: WeekFields
    easter_sunday: date | None


@dataclass(frozen=True, kw_only=True)
class ClosingRule:
    name: str
    first_year: int | None = None
    last_year: int | None = None

    def in_effect(self, year: int) -> bool:
        if self.first_year is not None and year < self.first_year:
            return False
        if self.last_year is not None and year > self.last_year:
            return False
        return True

    def matches(self, d: date, ctx: ClosingContext) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, kw_only=True)
class WeekendRule(ClosingRule):

    def matches(self, d: date, ctx: ClosingContext) -> bool:
        return d.isoweekday() >= DayOfWeek.SATURDAY


@dataclass(frozen=True, kw_only=True)
class FixedDayRule(ClosingRule):
    """A fixed month/day, optionally only when it falls on ``weekday``."""

    month: int
    day: int
    weekday: DayOfWeek | None = None

    def matches(self, d: date, ctx: ClosingContext) -> bool:
        if d.month != self.month or d.day != self.day:
            return False
        return self.weekday is None or d.isoweekday() == self.weekday


@dataclass(frozen=True, kw_only=True)
class EndOfYearRule(ClosingRule):
    """
    New Year's Eve when end-of-year weeks are allowed, otherwise every day
    numbered as week 52, 53 or 1.
    """

    weeks: frozenset[int] = frozenset({52, 53, 1})

    def matches(self, d: date, ctx: ClosingContext) -> bool:
        if ctx.allow_end_of_year:
            return d.month == 12 and d.day == 31
        return ctx.week_fields.week_of_week_based_year(d) in self.weeks


@dataclass(frozen=True, kw_only=True)
class EasterOffsetRule(ClosingRule):
    """Days at fixed offsets from Easter Sunday of the same year."""

    offsets: tuple[int, ...]
    weekday: DayOfWeek | None = None

    def matches(self, d: date, ctx: ClosingContext) -> bool:
        if ctx.easter_sunday is None:
            return False
        if (d - ctx.easter_sunday).days not in self.offsets:
            return False
        return self.weekday is None or d.isoweekday() == self.weekday


DANISH_CLOSING_RULES: tuple[ClosingRule, ...] = (
    WeekendRule(name="weekend"),
    FixedDayRule(name="labour day", month=5, day=1),
    FixedDayRule(name="pinched friday after labour day", month=5, day=2, weekday=DayOfWeek.FRIDAY),
    FixedDayRule(name="constitution day", month=6, day=5),
    FixedDayRule(name="pinched friday after constitution day", month=6, day=6, weekday=DayOfWeek.FRIDAY),
    FixedDayRule(name="christmas eve", month=12, day=24),
    FixedDayRule(name="christmas day", month=12, day=25),
    FixedDayRule(name="boxing day", month=12, day=26),
    FixedDayRule(name="pinched friday after christmas", month=12, day=27, weekday=DayOfWeek.FRIDAY),
    EndOfYearRule(name="end of year"),
    FixedDayRule(name="new year's day", month=1, day=1),
    FixedDayRule(name="pinched friday after new year", month=1, day=2, weekday=DayOfWeek.FRIDAY),
    # Maundy Thursday through Easter Monday.
    EasterOffsetRule(name="easter", offsets=(-3, -2, -1, 0, 1)),
    EasterOffsetRule(name="whit monday", offsets=(50,)),
    EasterOffsetRule(name="ascension day", offsets=(39,)),
    EasterOffsetRule(name="pinched friday after ascension day", offsets=(40,)),
    EasterOffsetRule(name="store bededag", offsets=(26,), last_year=2023),
    EasterOffsetRule(
        name="pinched friday after store bededag", offsets=(27,), weekday=DayOfWeek.FRIDAY, last_year=2023,
    ),
)


def closing_rule(
    d: date,
    allow_end_of_year: bool,
    week_fields: WeekFields = WeekFields.ISO,
    rules: Sequence[ClosingRule] = DANISH_CLOSING_RULES,
    table: EasterSundayTable = EASTER_SUNDAYS,
) -> ClosingRule | None:
    """First rule that makes ``d`` a closing day, or ``None``."""
    ctx = ClosingContext(allow_end_of_year, week_fields, table.get(d.year))
    for rule in rules:
        if rule.in_effect(d.year) and rule.matches(d, ctx):
            return rule
    return None


def is_closing_day(
    d: date,
    allow_end_of_year: bool,
    week_fields: WeekFields = WeekFields.ISO,
) -> bool:
    """
    True when no production takes place on ``d``.

    Years outside the Easter table are checked without the Easter-relative
    rules; a warning is logged instead of raising.
    """
    if d.year not in EASTER_SUNDAYS:
        logger.warning(
            "No Easter Sunday known for %d; %s not checked for Easter holidays", d.year, d,
        )
    rule = closing_rule(d, allow_end_of_year, week_fields)
    if rule is None:
        logger.debug("%s is not a closing day", d)
        return False
    logger.debug("%s is a closing day (%s)", d, rule.name)
    return True
