from __future__ import annotations

import logging
from datetime import date, timedelta

from ..calendar.calendar import ClosingCalendar
from ..calendar.easter import EASTER_SUNDAYS
from ..calendar.weeks import monday_of, sunday_of
from ..codes.registry import (
    DEFAULT_REGISTRY,
    CatalogueCodeConfiguration,
    CatalogueRegistry,
    ComputedCode,
    FixedCode,
    UnknownCatalogueCode,
)
from ..config import Settings
from .description import build_week_description
from .results import WeekCodeFulfilledResult, WeekCodeResult
from .shiftday import adjust_shift_day
from .yearplan import YearPlanResult

logger = logging.getLogger(__name__)

ONE_WEEK = timedelta(weeks=1)


class WeekResolver:
    """
    Resolves catalogue codes and dates to week codes.

    Each call is an independent computation over read-only tables, so one
    instance can be shared freely.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: CatalogueRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._settings = settings or Settings()
        self._registry = registry
        self._week_fields = self._settings.week_fields

    # ── date pushing ─────────────────────────────────────────────────────

    def _calendar(self, allow_end_of_year: bool) -> ClosingCalendar:
        return ClosingCalendar(allow_end_of_year, self._week_fields)

    def _skip_closed_days(self, d: date, calendar: ClosingCalendar) -> date:
        """First day from ``d`` on that is neither a closing day nor in Easter week."""
        while True:
            d = calendar.next_open_day(d)
            if not EASTER_SUNDAYS.is_easter_week(d):
                return d
            d = monday_of(d) + ONE_WEEK

    def _release_date(self, d: date, config: ComputedCode) -> date:
        if config.ignore_closing_days:
            return d + timedelta(weeks=config.add_weeks)

        calendar = self._calendar(config.allow_end_of_year)
        shift_day = adjust_shift_day(
            d, config.shift_day, config.allow_end_of_year, self._week_fields,
        )
        if shift_day is None or d.isoweekday() >= shift_day:
            d = self._skip_closed_days(monday_of(d) + ONE_WEEK, calendar)
            logger.debug("Past shift day; moved to %s", d)

        # A following week without any production (Christmas, Easter) cannot
        # carry proofing, so the code moves past it.
        while calendar.is_closed_week(d + ONE_WEEK) or EASTER_SUNDAYS.is_easter_week(d + ONE_WEEK):
            d = monday_of(d + ONE_WEEK)
            logger.debug("Following week is closed; moved to %s", d)

        d += timedelta(weeks=config.add_weeks)
        return calendar.next_open_day(d)

    def _current_date(self, d: date, config: ComputedCode) -> date:
        if config.ignore_closing_days:
            return d

        calendar = self._calendar(True)
        if calendar.is_closing(d):
            d = min(calendar.next_open_day(d), sunday_of(d))
        shift_day = adjust_shift_day(d, config.shift_day, True, self._week_fields)
        if shift_day is None or d.isoweekday() >= shift_day:
            d += ONE_WEEK
        return d

    # ── result assembly ──────────────────────────────────────────────────

    def _result(
        self,
        code: str,
        config: CatalogueCodeConfiguration,
        requested: date,
        resolved: date,
    ) -> WeekCodeResult:
        if isinstance(config, FixedCode):
            week_number, year, suffix = 0, 0, config.suffix
        else:
            week_number, year = self._week_fields.week_and_year(resolved)
            if config.use_month_number:
                year, suffix = resolved.year, f"{resolved.year:04d}{resolved.month:02d}"
            else:
                suffix = f"{year:04d}{week_number:02d}"

        description = build_week_description(config, requested, suffix, self._week_fields)
        return WeekCodeResult(
            catalogue_code=code,
            week_code=code + suffix,
            week_number=week_number,
            year=year,
            resolved_date=resolved,
            description=description,
            time_zone=self._settings.time_zone,
            locale=self._settings.locale,
        )

    def _lookup(self, code: str) -> tuple[str, CatalogueCodeConfiguration | UnknownCatalogueCode]:
        config = self._registry.lookup(code)
        if isinstance(config, UnknownCatalogueCode):
            logger.warning("Catalogue code %r is not supported", code)
        return code.strip().upper(), config

    # ── public API ───────────────────────────────────────────────────────

    def get_week_code(
        self, code: str, d: date | None = None,
    ) -> WeekCodeResult | UnknownCatalogueCode:
        """Forward week code for a record created on ``d`` (default: today)."""
        d = d or self._settings.today()
        code, config = self._lookup(code)
        if isinstance(config, UnknownCatalogueCode):
            return config
        logger.info("Calculating week code for %s on %s", code, d)

        resolved = d if isinstance(config, FixedCode) else self._release_date(d, config)
        result = self._result(code, config, d, resolved)
        logger.info("%s on %s resolved to %s (%s)", code, d, result.week_code, resolved)
        return result

    def get_current_week_code(
        self, code: str, d: date | None = None,
    ) -> WeekCodeResult | UnknownCatalogueCode:
        """Week code that production is working on at ``d`` (default: today)."""
        d = d or self._settings.today()
        code, config = self._lookup(code)
        if isinstance(config, UnknownCatalogueCode):
            return config
        logger.info("Calculating current week code for %s on %s", code, d)

        resolved = d if isinstance(config, FixedCode) else self._current_date(d, config)
        return self._result(code, config, d, resolved)

    def get_year_plan(self, code: str, year: int) -> YearPlanResult | UnknownCatalogueCode:
        code, config = self._lookup(code)
        if isinstance(config, UnknownCatalogueCode):
            return config
        logger.info("Building year plan for %s %d", code, year)

        weeks = []
        monday = monday_of(date(year, 1, 1))
        while self._week_fields.week_based_year(monday) <= year:
            if self._week_fields.week_based_year(monday) == year:
                result = self.get_current_week_code(code, monday)
                weeks.append(result.description)
            monday += ONE_WEEK
        return YearPlanResult(year=year, catalogue_code=code, weeks=tuple(weeks))

    def get_day_plan(
        self, code: str, start: date, end: date,
    ) -> dict[date, str] | UnknownCatalogueCode:
        """Forward week code of every day from ``start`` to ``end``, inclusive."""
        if start > end:
            raise ValueError(f"start {start} is after end {end}.")
        code, config = self._lookup(code)
        if isinstance(config, UnknownCatalogueCode):
            return config

        plan: dict[date, str] = {}
        d = start
        while d <= end:
            plan[d] = self.get_week_code(code, d).week_code
            d += timedelta(days=1)
        return plan

    def is_week_code_fulfilled(
        self, week_code: str, d: date | None = None,
    ) -> WeekCodeFulfilledResult | UnknownCatalogueCode:
        """
        Whether production has reached ``week_code`` (three-letter catalogue
        code plus six digits) on ``d``.
        """
        week_code = week_code.strip().upper()
        if len(week_code) != 9 or not week_code[3:].isdigit():
            raise ValueError(f"Invalid week code {week_code!r}.")

        current = self.get_current_week_code(week_code[:3], d)
        if isinstance(current, UnknownCatalogueCode):
            return current
        fulfilled = int(current.week_code_short) >= int(week_code[3:])
        logger.info("Week code %s fulfilled: %s", week_code, fulfilled)
        return WeekCodeFulfilledResult(
            requested_week_code=week_code,
            current_week_code_result=current,
            is_fulfilled=fulfilled,
        )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def registry(self) -> CatalogueRegistry:
        return self._registry

    def __repr__(self) -> str:
        return (
            f"WeekResolver(time_zone={self._settings.time_zone!r}, "
            f"locale={self._settings.locale!r}, "
            f"codes={len(self._registry)})"
        )
